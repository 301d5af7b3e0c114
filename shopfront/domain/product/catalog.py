"""Product catalog interface."""
from abc import ABC, abstractmethod
from typing import List, Optional

from .exceptions import ProductNotFoundError
from .value_objects import Product


class ProductCatalog(ABC):
    """Lookup contract for products."""

    @abstractmethod
    def find_product(self, product_id: str) -> Optional[Product]:
        """Find product by identifier, None if not in the catalog."""

    @abstractmethod
    def list_products(self) -> List[Product]:
        """Return all products in catalog order."""

    def get_product(self, product_id: str) -> Product:
        product = self.find_product(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
