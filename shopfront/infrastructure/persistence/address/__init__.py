"""Address repository strategies."""

from .json_repository import JSONAddressRepository
from .memory_repository import InMemoryAddressRepository

__all__ = ["InMemoryAddressRepository", "JSONAddressRepository"]
