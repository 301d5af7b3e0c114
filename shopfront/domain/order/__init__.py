"""Order bounded context."""

from .aggregate import Order
from .exceptions import OrderValidationError, ShippingFeeAlreadySetError

__all__ = [
    "Order",
    "OrderValidationError",
    "ShippingFeeAlreadySetError",
]
