import os

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from rest_framework.authtoken.models import Token


class Command(BaseCommand):
    help = "Create or update the dashboard admin account."

    def add_arguments(self, parser):
        parser.add_argument("--email", default=os.getenv("DRAWPIX_ADMIN_EMAIL"))
        parser.add_argument("--password", default=os.getenv("DRAWPIX_ADMIN_PASSWORD"))

    def handle(self, *args, **options):
        email = (options["email"] or "").strip().lower()
        password = options["password"] or ""
        if not email or len(password) < 6:
            raise CommandError("An email and a password of at least 6 characters are required.")

        User = get_user_model()
        u, created = User.objects.get_or_create(
            username=email,
            defaults={"email": email, "is_staff": True},
        )
        if created:
            self.stdout.write(self.style.SUCCESS(f"Created admin '{email}'"))
        else:
            self.stdout.write(f"Admin '{email}' already exists")

        # set (or reset) password and make sure the account can use the dashboard
        u.email = email
        u.is_staff = True
        u.set_password(password)
        u.save(update_fields=["email", "is_staff", "password"])

        token, _ = Token.objects.get_or_create(user=u)
        self.stdout.write(f"  → token={token.key}")

        self.stdout.write(self.style.SUCCESS("Admin ready."))
