"""Shipping application services."""

from .service import FlatRateShippingFeeCalculator

__all__ = ["FlatRateShippingFeeCalculator"]
