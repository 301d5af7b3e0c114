"""Shipping fee calculators."""
from shopfront.domain.base.exceptions import ValidationError
from shopfront.domain.shipping.calculator import ShippingFeeCalculator
from shopfront.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class FlatRateShippingFeeCalculator(ShippingFeeCalculator):
    """Charges the same fee for every postal code."""

    def __init__(self, rate: float = 5.0):
        if rate < 0:
            raise ValidationError(
                f"Shipping rate must not be negative: {rate}",
                details={"rate": rate},
            )
        self._rate = float(rate)

    @property
    def rate(self) -> float:
        return self._rate

    def calculate(self, postal_code: str) -> float:
        logger.debug("Calculating shipping fee for postal code %s", postal_code)
        return self._rate
