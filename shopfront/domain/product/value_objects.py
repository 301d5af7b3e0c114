"""Product value objects."""
from pydantic import Field

from shopfront.domain.base.entity import ValueObject


class Product(ValueObject):
    """Orderable product."""

    product_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    price: float = Field(0.0, ge=0)
