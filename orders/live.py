"""Admin live view model.

Keeps the latest order snapshot for one admin dashboard, derives the
filtered/sorted list the dashboard shows, and raises a short-lived
"new order" notification when the order list grows after the first
snapshot.
"""

import threading
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from django.conf import settings
from django.utils import timezone

from orders.models import Order
from orders.store import OrderStore

ALL_STATUSES = "All"
SORT_ORDERS = ("desc", "asc")


def project_orders(orders, status: str = ALL_STATUSES, sort: str = "desc") -> List[Order]:
    """Filter by status ("All" keeps everything) and sort by creation time."""
    if status != ALL_STATUSES and status not in Order.Status.values:
        raise ValueError(f"Unknown status filter '{status}'.")
    if sort not in SORT_ORDERS:
        raise ValueError("sort must be 'asc' or 'desc'.")
    rows = [o for o in orders if status == ALL_STATUSES or o.status == status]
    return sorted(rows, key=lambda o: o.created_at, reverse=(sort == "desc"))


@dataclass(frozen=True)
class Notification:
    order_id: str
    message: str
    raised_at: datetime
    expires_at: datetime


class AdminLiveViewModel:
    def __init__(self, store: OrderStore = None, clock: Callable[[], datetime] = timezone.now, ttl: timedelta = None):
        self.store = store or OrderStore()
        self.clock = clock
        self.ttl = ttl if ttl is not None else timedelta(seconds=settings.DRAWPIX_NOTIFICATION_SECONDS)
        self._orders: List[Order] = []
        self._initial_load = True
        self._notification: Optional[Notification] = None
        self._subscription = None
        self._lock = threading.Lock()
        self.notifications_raised = 0

    # --- lifecycle ---
    def attach(self) -> "AdminLiveViewModel":
        if self._subscription is None or not self._subscription.active:
            self._subscription = self.store.subscribe(self.on_snapshot)
        return self

    def detach(self) -> None:
        if self._subscription is not None:
            self._subscription.cancel()

    @property
    def attached(self) -> bool:
        return self._subscription is not None and self._subscription.active

    @property
    def loading(self) -> bool:
        return self._initial_load

    # --- stream ---
    def on_snapshot(self, orders: List[Order]) -> None:
        with self._lock:
            if not self._initial_load and len(orders) > len(self._orders):
                known = {o.pk for o in self._orders}
                added = [o for o in orders if o.pk not in known]
                if added:
                    self._raise(added[0])
            self._initial_load = False
            self._orders = list(orders)

    def _raise(self, order: Order) -> None:
        now = self.clock()
        self._notification = Notification(
            order_id=str(order.pk),
            message=f"New order for {order.service} from {order.customer_name}!",
            raised_at=now,
            expires_at=now + self.ttl,
        )
        self.notifications_raised += 1

    # --- reads ---
    @property
    def orders(self) -> List[Order]:
        with self._lock:
            return list(self._orders)

    @property
    def notification(self) -> Optional[Notification]:
        """The current notification, or None once it has auto-dismissed."""
        with self._lock:
            note = self._notification
            if note is not None and self.clock() >= note.expires_at:
                self._notification = None
                note = None
            return note

    def dismiss_notification(self) -> None:
        with self._lock:
            self._notification = None

    def view(self, status: str = ALL_STATUSES, sort: str = "desc") -> List[Order]:
        return project_orders(self.orders, status, sort)
