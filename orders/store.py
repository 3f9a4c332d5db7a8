"""Order store.

Durable persistence for Order records plus a live subscription that hands
every subscriber the full order list (newest first) after each committed
change. Database failures surface as StoreError so callers can tell them
apart from "not found".
"""

import logging
from typing import Callable, List, Optional

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from django.utils import timezone

from common.exceptions import StoreError
from common.live import SnapshotPublisher, Subscription
from orders.models import Order

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("customer_name", "contact_number", "email", "service", "details")


class OrderNotFound(Exception):
    """No order exists with the given id."""


class InvalidStatus(ValueError):
    """Status is not one of Order.Status."""


def _load_orders():
    return Order.objects.order_by("-created_at")


orders_publisher = SnapshotPublisher("orders", _load_orders)


class OrderStore:
    """create / get_by_id / update_status / complete_with_delivery / delete / subscribe."""

    def __init__(self, publisher: SnapshotPublisher = None):
        self.publisher = publisher or orders_publisher

    def create(self, **fields) -> Order:
        """Insert a new Pending order. Field presence is the caller's job."""
        data = {k: fields.get(k, "") for k in REQUIRED_FIELDS}
        data["file_url"] = fields.get("file_url") or ""
        try:
            order = Order.objects.create(status=Order.Status.PENDING, **data)
        except DatabaseError as exc:
            logger.exception("Could not place order for %s.", data.get("email"))
            raise StoreError("Could not place order.") from exc
        logger.info("Order %s placed for service %r.", order.id, order.service)
        return order

    def get_by_id(self, order_id) -> Optional[Order]:
        """Return the order or None. Malformed ids count as not found."""
        try:
            return Order.objects.get(pk=order_id)
        except (Order.DoesNotExist, ValidationError, ValueError):
            return None
        except DatabaseError as exc:
            logger.exception("Could not fetch order %s.", order_id)
            raise StoreError("Could not fetch order status.") from exc

    def list(self) -> List[Order]:
        try:
            return list(_load_orders())
        except DatabaseError as exc:
            raise StoreError("Could not list orders.") from exc

    def update_status(self, order_id, status: str) -> Order:
        """Overwrite the status. Any status may follow any other."""
        if status not in Order.Status.values:
            raise InvalidStatus(f"'{status}' is not a valid order status.")
        try:
            with transaction.atomic():
                order = self._locked(order_id)
                order.status = status
                order.save(update_fields=["status"])
        except DatabaseError as exc:
            logger.exception("Could not update status of order %s.", order_id)
            raise StoreError("Could not update order status.") from exc
        return order

    def complete_with_delivery(self, order_id, delivery_url: str, price: str) -> Order:
        """Mark Completed with delivery URL, price and completion time in one write."""
        try:
            with transaction.atomic():
                order = self._locked(order_id)
                order.status = Order.Status.COMPLETED
                order.delivery_file_url = delivery_url
                order.price = price
                order.completed_at = timezone.now()
                order.save(update_fields=["status", "delivery_file_url", "price", "completed_at"])
        except DatabaseError as exc:
            logger.exception("Could not complete order %s.", order_id)
            raise StoreError("Could not complete order.") from exc
        return order

    def delete(self, order_id) -> None:
        try:
            with transaction.atomic():
                self._locked(order_id).delete()
        except DatabaseError as exc:
            logger.exception("Could not delete order %s.", order_id)
            raise StoreError("Could not delete order.") from exc
        logger.info("Order %s deleted.", order_id)

    def subscribe(self, callback: Callable[[List[Order]], None]) -> Subscription:
        return self.publisher.subscribe(callback)

    # --- helpers ---
    def _locked(self, order_id) -> Order:
        try:
            return Order.objects.select_for_update().get(pk=order_id)
        except (Order.DoesNotExist, ValidationError, ValueError):
            raise OrderNotFound(f"Order {order_id} not found.")
