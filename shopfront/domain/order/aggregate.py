"""Order aggregate root."""
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List

from pydantic import Field, PrivateAttr

from shopfront.domain.base.entity import Entity
from shopfront.domain.customer.aggregate import Customer
from shopfront.domain.product.value_objects import Product

from .exceptions import OrderValidationError, ShippingFeeAlreadySetError


def _new_order_id() -> str:
    return f"ord-{uuid.uuid4().hex}"


class Order(Entity):
    """
    Order assembled for a customer.

    Items are append-only and kept in the order they were added. The
    shipping fee starts at 0.0 and may be set at most once.
    """

    id: str = Field(default_factory=_new_order_id)
    customer: Customer
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    _items: List[Product] = PrivateAttr(default_factory=list)
    _shipping_fee: float = PrivateAttr(default=0.0)
    _shipping_fee_set: bool = PrivateAttr(default=False)

    @classmethod
    def create(cls, customer: Customer) -> "Order":
        """Create an empty order owned by the customer."""
        return cls(customer=customer)

    @property
    def order_id(self) -> str:
        return self.id

    @property
    def items(self) -> List[Product]:
        """Snapshot of the order items in addition order."""
        return list(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def shipping_fee(self) -> float:
        return self._shipping_fee

    @property
    def has_shipping_fee(self) -> bool:
        return self._shipping_fee_set

    @property
    def subtotal(self) -> float:
        return sum(item.price for item in self._items)

    @property
    def total(self) -> float:
        return self.subtotal + self._shipping_fee

    def add_item(self, product: Product) -> None:
        """Append a product to the order."""
        self._items.append(product)

    def set_shipping_fee(self, fee: float) -> None:
        """
        Set the shipping fee.

        Raises:
            OrderValidationError: If the fee is negative
            ShippingFeeAlreadySetError: If the fee was already set
        """
        if self._shipping_fee_set:
            raise ShippingFeeAlreadySetError(self.id, self._shipping_fee)
        if fee < 0:
            raise OrderValidationError(
                f"Shipping fee must not be negative: {fee}",
                details={"order_id": self.id, "fee": fee},
            )
        self._shipping_fee = float(fee)
        self._shipping_fee_set = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert order to dictionary."""
        return {
            "order_id": self.id,
            "customer": self.customer.to_dict(),
            "items": [item.to_dict() for item in self._items],
            "item_count": self.item_count,
            "subtotal": self.subtotal,
            "shipping_fee": self._shipping_fee,
            "total": self.total,
            "created_at": self.created_at.isoformat(),
        }
