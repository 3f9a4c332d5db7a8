"""Portfolio app models.

A PortfolioItem is a showcase image with a title and description. The image
itself lives in file storage; the row only keeps its URL.
"""

from django.db import models
from django.db.models import Q
from django.utils import timezone


class PortfolioItem(models.Model):
    """A gallery entry shown on the storefront while its status is Show."""

    class Status(models.TextChoices):
        SHOW = "Show", "Show"
        HIDE = "Hide", "Hide"

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True, default="")
    image_url = models.CharField(max_length=500)
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.SHOW)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        db_table = "portfolio_items"
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(condition=Q(status__in=["Show", "Hide"]), name="portfolio_status_valid"),
        ]

    def __str__(self):
        return f"{self.title} (#{self.pk})"
