"""Exceptions raised by the content store."""

import psycopg

# Storage errors are never wrapped; callers catch the driver's base class.
StorageFailure = psycopg.Error


class ContentStoreError(Exception):
    """Base class for content store errors."""


class Unauthorized(ContentStoreError):
    """A mutating operation was called without an authenticated actor."""


class AuthenticationFailed(ContentStoreError):
    """The supplied administrator password did not match."""


class NotFound(ContentStoreError):
    """The requested row does not exist."""
