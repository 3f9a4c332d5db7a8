from datetime import timedelta

from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.authtoken.models import Token

from orders.models import Order

User = get_user_model()


def create_admin(email="admin@example.com", password="pass1234"):
    user = User.objects.create_user(email, email, password, is_staff=True)
    return user, Token.objects.create(user=user)


def create_order(minutes_ago=0, **overrides):
    data = {
        "customer_name": "Jane Doe",
        "contact_number": "555-0100",
        "email": "jane@example.com",
        "service": "Website Design",
        "details": "Need a 5-page site",
    }
    data.update(overrides)
    order = Order.objects.create(**data)
    if minutes_ago:
        Order.objects.filter(pk=order.pk).update(created_at=timezone.now() - timedelta(minutes=minutes_ago))
        order.refresh_from_db()
    return order
