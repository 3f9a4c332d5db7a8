from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "orders"

    def ready(self):
        from orders.models import Order
        from orders.store import orders_publisher

        orders_publisher.connect(Order)
