"""Product domain exceptions."""

from shopfront.domain.base.exceptions import EntityNotFoundError


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product is not in the catalog."""

    def __init__(self, product_id: str):
        super().__init__("Product", product_id)
        self.product_id = product_id
