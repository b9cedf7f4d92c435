"""Data-access layer for a small blog/content-management backend."""

from .errors import AuthenticationFailed, ContentStoreError, NotFound, StorageFailure, Unauthorized
from .store import ContentStore, open_store

__all__ = [
    "AuthenticationFailed",
    "ContentStore",
    "ContentStoreError",
    "NotFound",
    "StorageFailure",
    "Unauthorized",
    "open_store",
]
