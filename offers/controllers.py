from common.stores import RecordNotFound
from offers.models import Offer
from offers.store import OfferStore


class OfferController:
    """create / set status / toggle / delete for offers. No binaries are involved."""

    def __init__(self, store: OfferStore = None):
        self.store = store or OfferStore()

    def create(self, title: str, description: str, price: str, status: str = Offer.Status.ACTIVE) -> Offer:
        return self.store.create(title=title, description=description, price=price, status=status)

    def set_status(self, pk, status: str) -> Offer:
        return self.store.set_status(pk, status)

    def toggle(self, pk) -> Offer:
        offer = self.store.get(pk)
        if offer is None:
            raise RecordNotFound(f"offer {pk} not found.")
        if offer.status == Offer.Status.ACTIVE:
            return self.store.set_status(pk, Offer.Status.INACTIVE)
        return self.store.set_status(pk, Offer.Status.ACTIVE)

    def delete(self, pk) -> None:
        self.store.delete(pk)
