"""Offer store: persistence plus the live offers snapshot."""

from common.live import SnapshotPublisher
from common.stores import RecordStore
from offers.models import Offer

offers_publisher = SnapshotPublisher(
    "offers", lambda: Offer.objects.order_by("-created_at", "-id")
)


class OfferStore(RecordStore):
    model = Offer
    publisher = offers_publisher
    visible_status = Offer.Status.ACTIVE
    label = "offer"
