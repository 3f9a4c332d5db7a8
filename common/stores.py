"""Record store for the admin-managed catalog collections.

Portfolio items and offers share one shape: created by an admin, shown or
hidden through a two-valued status, hard-deleted, and watched live by the
dashboard. RecordStore implements that once; each app supplies its model
and publisher.
"""

import logging
from typing import Callable, List, Optional

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction

from .exceptions import StoreError
from .live import SnapshotPublisher, Subscription

logger = logging.getLogger(__name__)


class RecordNotFound(Exception):
    """No record exists with the given id."""


class RecordStore:
    model = None
    publisher: SnapshotPublisher = None
    visible_status: str = None
    label = "record"

    def create(self, **fields):
        try:
            record = self.model.objects.create(**fields)
        except DatabaseError as exc:
            logger.exception("Could not create %s.", self.label)
            raise StoreError(f"Could not create {self.label}.") from exc
        logger.info("Created %s %s.", self.label, record.pk)
        return record

    def get(self, pk) -> Optional[object]:
        try:
            return self.model.objects.get(pk=pk)
        except (self.model.DoesNotExist, ValidationError, ValueError):
            return None
        except DatabaseError as exc:
            raise StoreError(f"Could not fetch {self.label}.") from exc

    def list(self) -> List:
        try:
            return list(self.model.objects.order_by("-created_at"))
        except DatabaseError as exc:
            raise StoreError(f"Could not list {self.label}s.") from exc

    def list_visible(self) -> List:
        try:
            return list(self.model.objects.filter(status=self.visible_status).order_by("-created_at"))
        except DatabaseError as exc:
            raise StoreError(f"Could not list {self.label}s.") from exc

    def set_status(self, pk, status: str):
        if status not in self.model.Status.values:
            raise ValueError(f"'{status}' is not a valid {self.label} status.")
        try:
            with transaction.atomic():
                record = self._locked(pk)
                record.status = status
                record.save(update_fields=["status"])
        except DatabaseError as exc:
            logger.exception("Could not update %s %s.", self.label, pk)
            raise StoreError(f"Could not update {self.label}.") from exc
        return record

    def delete(self, pk):
        """Hard delete; returns the removed record (pk no longer in the table)."""
        try:
            with transaction.atomic():
                record = self._locked(pk)
                record.delete()
        except DatabaseError as exc:
            logger.exception("Could not delete %s %s.", self.label, pk)
            raise StoreError(f"Could not delete {self.label}.") from exc
        logger.info("Deleted %s %s.", self.label, pk)
        return record

    def subscribe(self, callback: Callable[[List], None]) -> Subscription:
        return self.publisher.subscribe(callback)

    # --- helpers ---
    def _locked(self, pk):
        try:
            return self.model.objects.select_for_update().get(pk=pk)
        except (self.model.DoesNotExist, ValidationError, ValueError):
            raise RecordNotFound(f"{self.label} {pk} not found.")
