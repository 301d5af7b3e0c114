import pytest

from shopfront.domain.base.exceptions import InvariantViolationError
from shopfront.domain.order.aggregate import Order
from shopfront.domain.order.exceptions import OrderValidationError, ShippingFeeAlreadySetError


@pytest.fixture
def empty_order(customer_with_address):
    return Order.create(customer_with_address)


def test_create_order(customer_with_address):
    # Act
    order = Order.create(customer_with_address)

    # Assert
    assert order.order_id.startswith("ord-")
    assert order.customer == customer_with_address
    assert order.items == []
    assert order.item_count == 0
    assert order.shipping_fee == 0.0
    assert order.has_shipping_fee is False


def test_orders_get_distinct_ids(customer_with_address):
    first = Order.create(customer_with_address)
    second = Order.create(customer_with_address)

    assert first.order_id != second.order_id
    assert first != second


def test_items_keep_addition_order(empty_order, sample_products):
    # Act
    for product in reversed(sample_products):
        empty_order.add_item(product)

    # Assert
    assert [p.product_id for p in empty_order.items] == ["P3", "P2", "P1"]
    assert empty_order.item_count == 3


def test_items_view_cannot_shrink_order(empty_order, sample_products):
    empty_order.add_item(sample_products[0])

    items = empty_order.items
    items.clear()

    assert empty_order.item_count == 1


def test_set_shipping_fee(empty_order):
    # Act
    empty_order.set_shipping_fee(7.5)

    # Assert
    assert empty_order.shipping_fee == 7.5
    assert empty_order.has_shipping_fee is True


def test_shipping_fee_is_set_at_most_once(empty_order):
    empty_order.set_shipping_fee(7.5)

    with pytest.raises(ShippingFeeAlreadySetError) as exc_info:
        empty_order.set_shipping_fee(9.0)

    assert isinstance(exc_info.value, InvariantViolationError)
    assert empty_order.shipping_fee == 7.5


def test_negative_shipping_fee_rejected(empty_order):
    with pytest.raises(OrderValidationError):
        empty_order.set_shipping_fee(-1.0)

    assert empty_order.has_shipping_fee is False


def test_totals(empty_order, sample_products):
    empty_order.add_item(sample_products[0])
    empty_order.add_item(sample_products[2])
    empty_order.set_shipping_fee(5.0)

    assert empty_order.subtotal == pytest.approx(11.75)
    assert empty_order.total == pytest.approx(16.75)


def test_to_dict(empty_order, sample_products):
    empty_order.add_item(sample_products[1])
    empty_order.set_shipping_fee(5.0)

    result = empty_order.to_dict()

    assert result["order_id"] == empty_order.order_id
    assert result["customer"]["customer_id"] == 1
    assert result["customer"]["address"]["postal_code"] == "10001"
    assert result["items"] == [{"product_id": "P2", "name": "Fountain pen", "price": 24.0}]
    assert result["item_count"] == 1
    assert result["shipping_fee"] == 5.0
    assert result["total"] == 29.0
