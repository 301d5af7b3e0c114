"""In-memory product catalog."""
from typing import Dict, Iterable, List, Optional

from shopfront.domain.product.catalog import ProductCatalog
from shopfront.domain.product.value_objects import Product


class InMemoryProductCatalog(ProductCatalog):
    """Product catalog seeded from configuration."""

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: Dict[str, Product] = {p.product_id: p for p in products or []}

    def find_product(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)

    def list_products(self) -> List[Product]:
        return list(self._products.values())
