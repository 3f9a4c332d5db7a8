"""Portfolio controller.

Creating an item uploads its image first and then writes the row. Deleting
removes the row first and then releases the image; if the image cannot be
removed the orphaned file is logged and the delete still succeeds.
"""

import logging

from common.uploads import UploadGateway, get_upload_gateway, namespace
from portfolio.models import PortfolioItem
from portfolio.store import PortfolioStore

logger = logging.getLogger(__name__)


class PortfolioController:
    def __init__(self, store: PortfolioStore = None, uploads: UploadGateway = None):
        self.store = store or PortfolioStore()
        self.uploads = uploads or get_upload_gateway()

    def create(self, title: str, description: str, image=None, image_url: str = "",
               status: str = PortfolioItem.Status.SHOW) -> PortfolioItem:
        if image is not None:
            image_url = self.uploads.put(namespace("portfolio"), image)
        if not image_url:
            raise ValueError("Please attach an image.")
        try:
            return self.store.create(title=title, description=description, image_url=image_url, status=status)
        except Exception:
            if image is not None:
                logger.warning("Portfolio item was not created; uploaded image %s is orphaned.", image_url)
            raise

    def set_status(self, pk, status: str) -> PortfolioItem:
        return self.store.set_status(pk, status)

    def delete(self, pk) -> bool:
        """Delete the item and release its image. Returns True only if a stored image was removed."""
        item = self.store.delete(pk)
        try:
            return self.uploads.delete(item.image_url)
        except Exception:
            # the row is already gone; releasing the image is best-effort
            logger.exception("Portfolio item %s deleted, but image %s could not be removed.", pk, item.image_url)
            return False
