"""Upload gateway on top of Django's default file storage.

Uploads never overwrite: each file is stored under
`<namespace>/<epoch-millis>_<filename>` and the storage backend picks a fresh
name if that path is somehow taken. Deleting something that is already gone
is not an error.

URLs handed out are absolute (prefixed with DRAWPIX_PUBLIC_BASE_URL) so they
work outside the browser too, e.g. in a delivery email. Only URLs on that
host (or with no host) and under MEDIA_URL are treated as ours when deleting.
"""

import logging
import os
import time
from urllib.parse import unquote, urlparse

from django.conf import settings
from django.core.exceptions import SuspiciousFileOperation
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage
from django.utils.text import get_valid_filename

from .exceptions import UploadError

logger = logging.getLogger(__name__)


def _object_name(namespace: str, filename: str) -> str:
    base = get_valid_filename(os.path.basename(filename or "")) or "upload"
    return f"{namespace.strip('/')}/{int(time.time() * 1000)}_{base}"


class UploadGateway:
    """put(namespace, file) -> URL, delete(URL) -> bool."""

    def __init__(self, storage=None, base_url: str = None):
        self.storage = storage or default_storage
        self.base_url = (settings.DRAWPIX_PUBLIC_BASE_URL if base_url is None else base_url).rstrip("/")

    def put(self, namespace: str, file, filename: str = None) -> str:
        if not namespace:
            raise ValueError("A destination namespace must be provided.")
        if file is None:
            raise ValueError("A file must be provided.")
        if isinstance(file, bytes):
            file = ContentFile(file)
        name = _object_name(namespace, filename or getattr(file, "name", ""))
        try:
            stored = self.storage.save(name, file)
            url = self.storage.url(stored)
        except OSError as exc:
            logger.exception("Upload to %s failed.", namespace)
            raise UploadError(f"Could not upload file to '{namespace}'.") from exc
        logger.info("Uploaded %s", stored)
        return self.absolute_url(url)

    def delete(self, url: str) -> bool:
        """Remove the object behind `url`. Returns False if it did not exist or is not ours."""
        name = self.name_from_url(url)
        if not name:
            return False
        try:
            if not self.storage.exists(name):
                return False
            self.storage.delete(name)
        except SuspiciousFileOperation:
            logger.warning("Refusing to delete %s: outside of media storage.", url)
            return False
        except OSError as exc:
            raise UploadError(f"Could not delete '{name}'.") from exc
        return True

    def absolute_url(self, url: str) -> str:
        if not url or not self.base_url or urlparse(url).netloc:
            return url
        return f"{self.base_url}/{url.lstrip('/')}"

    def name_from_url(self, url: str) -> str:
        """Storage name for one of our URLs, or "" for anything else."""
        parsed = urlparse(url or "")
        if parsed.netloc and parsed.netloc != urlparse(self.base_url).netloc:
            return ""
        path = unquote(parsed.path)
        media_path = urlparse(settings.MEDIA_URL).path or "/"
        if not path.startswith(media_path):
            return ""
        return path[len(media_path):]


def get_upload_gateway() -> UploadGateway:
    return UploadGateway()


def namespace(key: str) -> str:
    return settings.DRAWPIX_UPLOAD_NAMESPACES[key]
