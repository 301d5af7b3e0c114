import pytest

from shopfront.application.shipping.service import FlatRateShippingFeeCalculator
from shopfront.domain.base.exceptions import ValidationError
from shopfront.domain.shipping.calculator import ShippingFeeCalculator


def test_flat_rate_for_any_postal_code():
    calculator = FlatRateShippingFeeCalculator(rate=4.25)

    assert isinstance(calculator, ShippingFeeCalculator)
    assert calculator.calculate("10001") == 4.25
    assert calculator.calculate("94105") == 4.25


def test_default_rate():
    assert FlatRateShippingFeeCalculator().rate == 5.0


def test_negative_rate_rejected():
    with pytest.raises(ValidationError):
        FlatRateShippingFeeCalculator(rate=-0.01)
