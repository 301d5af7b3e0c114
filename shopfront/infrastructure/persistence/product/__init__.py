"""Product catalog implementations."""

from .memory_catalog import InMemoryProductCatalog

__all__ = ["InMemoryProductCatalog"]
