"""Order domain exceptions."""

from shopfront.domain.base.exceptions import InvariantViolationError, ValidationError


class OrderValidationError(ValidationError):
    """Raised when order data fails validation."""


class ShippingFeeAlreadySetError(InvariantViolationError):
    """Raised when the shipping fee of an order is set a second time."""

    def __init__(self, order_id: str, current_fee: float):
        super().__init__(
            f"Shipping fee for order {order_id} is already set to {current_fee}",
            "SHIPPING_FEE_ALREADY_SET",
            {"order_id": order_id, "current_fee": current_fee},
        )
