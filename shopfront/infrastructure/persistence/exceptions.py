"""Persistence exceptions."""


class PersistenceError(Exception):
    """Base exception for persistence-related errors."""


class StorageError(PersistenceError):
    """Raised when there's an error with storage operations."""
