"""Persistence strategies for domain lookups."""

from .exceptions import PersistenceError, StorageError

__all__ = ["PersistenceError", "StorageError"]
