import uuid

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("customer_name", models.CharField(max_length=200)),
                ("contact_number", models.CharField(max_length=50)),
                ("email", models.EmailField(max_length=254)),
                ("service", models.CharField(max_length=200)),
                ("details", models.TextField()),
                ("file_url", models.CharField(blank=True, default="", max_length=500)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Pending", "Pending"),
                            ("In Progress", "In Progress"),
                            ("Completed", "Completed"),
                            ("Cancelled", "Cancelled"),
                        ],
                        default="Pending",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ("completed_at", models.DateTimeField(blank=True, null=True)),
                ("price", models.CharField(blank=True, default="", max_length=50)),
                ("delivery_file_url", models.CharField(blank=True, default="", max_length=500)),
            ],
            options={
                "db_table": "orders",
                "ordering": ["-created_at"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(status__in=["Pending", "In Progress", "Completed", "Cancelled"]),
                        name="order_status_valid",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(
                            models.Q(price="", delivery_file_url=""),
                            models.Q(~models.Q(price=""), ~models.Q(delivery_file_url="")),
                            _connector="OR",
                        ),
                        name="order_delivery_complete",
                    ),
                ],
            },
        ),
    ]
