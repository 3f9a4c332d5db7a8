"""Errors shared by the stores and the upload gateway."""


class StoreError(Exception):
    """Persistence or transport failure while talking to the record store."""


class UploadError(Exception):
    """The binary object store rejected or failed an operation."""
