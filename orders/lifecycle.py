"""Order lifecycle controller.

Status changes and the delivery workflow go through here rather than
straight to the store, so transition rules live in one place.

Transitions are deliberately permissive: any status may move to any other
status, including Completed -> Pending. ALLOWED_TRANSITIONS documents that.

Delivery runs in three steps:
1. upload the final file to the delivery namespace,
2. write status/price/delivery URL/completion time in one store update,
3. email the customer (best-effort).
An upload failure leaves the order untouched. A store failure after a
successful upload orphans the uploaded file; that is logged. An email
failure is reported as DeliveryOutcome.NOTIFICATION_FAILED.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Callable

from common.uploads import UploadGateway, get_upload_gateway, namespace
from orders.models import Order
from orders.notifications import send_delivery_email
from orders.store import InvalidStatus, OrderNotFound, OrderStore

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS = {status: frozenset(Order.Status.values) for status in Order.Status.values}


def _payload_size(file) -> int:
    """Size of an uploaded file or raw bytes; 0 when missing."""
    if file is None:
        return 0
    if isinstance(file, bytes):
        return len(file)
    return getattr(file, "size", None) or 0


class DeliveryValidationError(ValueError):
    """Delivery was requested without a file or without a price."""


class DeliveryOutcome(str, enum.Enum):
    DELIVERED = "delivered"
    NOTIFICATION_FAILED = "delivered_notification_failed"


@dataclass
class DeliveryResult:
    order: Order
    outcome: DeliveryOutcome
    download_url: str

    @property
    def notified(self) -> bool:
        return self.outcome is DeliveryOutcome.DELIVERED


class OrderLifecycleController:
    def __init__(
        self,
        store: OrderStore = None,
        uploads: UploadGateway = None,
        notify: Callable[[Order, str, str], bool] = None,
    ):
        self.store = store or OrderStore()
        self.uploads = uploads or get_upload_gateway()
        self.notify = notify or send_delivery_email

    def set_status(self, order_id, status: str) -> Order:
        if status not in Order.Status.values:
            raise InvalidStatus(f"'{status}' is not a valid order status.")
        current = self.store.get_by_id(order_id)
        if current is None:
            raise OrderNotFound(f"Order {order_id} not found.")
        if status not in ALLOWED_TRANSITIONS[current.status]:
            raise InvalidStatus(f"Cannot move order from '{current.status}' to '{status}'.")
        order = self.store.update_status(order_id, status)
        logger.info("Order %s: %s -> %s", order_id, current.status, status)
        return order

    def deliver(self, order_id, file, price: str) -> DeliveryResult:
        price = (price or "").strip()
        if not _payload_size(file):
            raise DeliveryValidationError("Please attach the final delivery file.")
        if not price:
            raise DeliveryValidationError("Please enter the final price for the order.")
        if self.store.get_by_id(order_id) is None:
            raise OrderNotFound(f"Order {order_id} not found.")

        download_url = self.uploads.put(namespace("delivery"), file)
        try:
            order = self.store.complete_with_delivery(order_id, download_url, price)
        except Exception:
            logger.warning(
                "Order %s was not completed; uploaded delivery file %s is orphaned.",
                order_id,
                download_url,
            )
            raise

        try:
            notified = self.notify(order, download_url, price)
        except Exception:
            # order is already Completed here
            logger.exception("Delivery email for order %s raised.", order_id)
            notified = False

        if notified:
            outcome = DeliveryOutcome.DELIVERED
        else:
            logger.warning("Order %s delivered, but the customer was not notified.", order_id)
            outcome = DeliveryOutcome.NOTIFICATION_FAILED
        return DeliveryResult(order=order, outcome=outcome, download_url=download_url)
