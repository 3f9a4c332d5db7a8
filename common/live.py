"""Live snapshot publishing.

A SnapshotPublisher hands every subscriber the full, current contents of a
collection: once when it subscribes, and again after each committed change.
There is no diff protocol; subscribers always receive complete lists.

Changes are detected through Django's post_save/post_delete signals and
published with transaction.on_commit, so a snapshot never contains state
that could still be rolled back.
"""

import logging
import threading
from typing import Callable, Iterable, List

from django.db import transaction
from django.db.models.signals import post_delete, post_save

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[List], None]


class Subscription:
    """Handle returned by SnapshotPublisher.subscribe()."""

    def __init__(self, publisher: "SnapshotPublisher", callback: SnapshotCallback):
        self._publisher = publisher
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        """Stop delivery. Calling it more than once is a no-op."""
        if not self.active:
            return
        self.active = False
        self._publisher._remove(self)


class SnapshotPublisher:
    """Fan out full collection snapshots to any number of subscribers."""

    def __init__(self, name: str, loader: Callable[[], Iterable]):
        self.name = name
        self._loader = loader
        self._subscriptions: List[Subscription] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: SnapshotCallback) -> Subscription:
        subscription = Subscription(self, callback)
        with self._lock:
            self._subscriptions.append(subscription)
        self._deliver(subscription, self.snapshot())
        return subscription

    def snapshot(self) -> List:
        return list(self._loader())

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def publish(self) -> None:
        """Load the collection once and deliver it to every active subscriber."""
        with self._lock:
            targets = list(self._subscriptions)
        if not targets:
            return
        snapshot = self.snapshot()
        for subscription in targets:
            self._deliver(subscription, snapshot)

    def publish_on_commit(self, **kwargs) -> None:
        """Signal receiver: publish once the surrounding transaction commits."""
        transaction.on_commit(self.publish)

    def connect(self, model) -> None:
        """Publish whenever an instance of `model` is saved or deleted."""
        uid = f"{self.name}-{model._meta.label_lower}"
        post_save.connect(self.publish_on_commit, sender=model, weak=False, dispatch_uid=f"{uid}-save")
        post_delete.connect(self.publish_on_commit, sender=model, weak=False, dispatch_uid=f"{uid}-delete")

    # --- helpers ---
    def _remove(self, subscription: Subscription) -> None:
        with self._lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

    def _deliver(self, subscription: Subscription, snapshot: List) -> None:
        if not subscription.active:
            return
        try:
            # each subscriber gets its own list
            subscription.callback(list(snapshot))
        except Exception:
            logger.exception("Snapshot subscriber on %s failed.", self.name)
