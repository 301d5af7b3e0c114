"""Shipping fee calculation interface."""
from abc import ABC, abstractmethod


class ShippingFeeCalculator(ABC):
    """Computes the shipping fee for a destination postal code."""

    @abstractmethod
    def calculate(self, postal_code: str) -> float:
        """Return the shipping fee for the postal code."""
