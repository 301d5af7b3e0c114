"""Shipping bounded context."""

from .calculator import ShippingFeeCalculator

__all__ = ["ShippingFeeCalculator"]
