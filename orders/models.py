"""Orders app models.

Defines the Order model. An Order is submitted by a customer from the public
storefront and afterwards only touched by admins: status changes, delivery
(final file + price) and hard deletion.
"""

import uuid

from django.db import models
from django.db.models import Q
from django.utils import timezone


class Order(models.Model):
    """A customer's service request and its fulfillment state."""

    class Status(models.TextChoices):
        PENDING = "Pending", "Pending"
        IN_PROGRESS = "In Progress", "In Progress"
        COMPLETED = "Completed", "Completed"
        CANCELLED = "Cancelled", "Cancelled"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    customer_name = models.CharField(max_length=200)
    contact_number = models.CharField(max_length=50)
    email = models.EmailField()
    service = models.CharField(max_length=200)
    details = models.TextField()
    file_url = models.CharField(max_length=500, blank=True, default="")

    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.PENDING
    )
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    completed_at = models.DateTimeField(null=True, blank=True)
    price = models.CharField(max_length=50, blank=True, default="")
    delivery_file_url = models.CharField(max_length=500, blank=True, default="")

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=Q(status__in=["Pending", "In Progress", "Completed", "Cancelled"]),
                name="order_status_valid",
            ),
            # price and delivery file are written together or not at all
            models.CheckConstraint(
                condition=(Q(price="") & Q(delivery_file_url=""))
                | (~Q(price="") & ~Q(delivery_file_url="")),
                name="order_delivery_complete",
            ),
        ]

    @property
    def is_delivered(self) -> bool:
        return bool(self.delivery_file_url)

    def __str__(self) -> str:
        """Readable representation for admin and debugging."""
        return f"Order<{self.id} {self.service} {self.status}>"
