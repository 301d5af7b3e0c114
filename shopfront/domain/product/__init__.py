"""Product bounded context."""

from .catalog import ProductCatalog
from .exceptions import ProductNotFoundError
from .value_objects import Product

__all__ = ["Product", "ProductCatalog", "ProductNotFoundError"]
