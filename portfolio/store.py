"""Portfolio store: persistence plus the live portfolio snapshot."""

from common.live import SnapshotPublisher
from common.stores import RecordStore
from portfolio.models import PortfolioItem

portfolio_publisher = SnapshotPublisher(
    "portfolio", lambda: PortfolioItem.objects.order_by("-created_at", "-id")
)


class PortfolioStore(RecordStore):
    model = PortfolioItem
    publisher = portfolio_publisher
    visible_status = PortfolioItem.Status.SHOW
    label = "portfolio item"
