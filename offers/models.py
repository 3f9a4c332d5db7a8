"""Offers app models.

Defines the Offer model: a promotional offer shown on the storefront while
its status is Active. Price is free-form text (e.g. "$49 this week").
"""

from django.db import models
from django.db.models import Q
from django.utils import timezone


class Offer(models.Model):
    """A promotional offer managed from the admin dashboard."""

    class Status(models.TextChoices):
        ACTIVE = "Active", "Active"
        INACTIVE = "Inactive", "Inactive"

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True, default="")
    price = models.CharField(max_length=50)
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.ACTIVE)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        db_table = "offers"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(condition=Q(status__in=["Active", "Inactive"]), name="offer_status_valid"),
        ]

    def __str__(self):
        return f"{self.title} (#{self.pk})"
