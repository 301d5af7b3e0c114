"""Customer domain record."""
from typing import Optional

from pydantic import Field

from shopfront.domain.address.value_objects import Address
from shopfront.domain.base.entity import ValueObject


class Customer(ValueObject):
    """Customer looked up for a single call; never mutated afterwards."""

    customer_id: int = Field(..., description="Numeric customer identifier")
    name: str = Field(..., min_length=1)
    address: Optional[Address] = None

    @property
    def postal_code(self) -> str:
        """Postal code of the associated address, empty if there is none."""
        if self.address is None:
            return ""
        return self.address.postal_code

    @property
    def has_shipping_address(self) -> bool:
        return bool(self.postal_code)
