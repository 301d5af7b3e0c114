"""Order placement facade."""
from typing import Iterable

from shopfront.domain.customer.exceptions import CustomerNotFoundError
from shopfront.domain.customer.lookup import CustomerLookup
from shopfront.domain.order.aggregate import Order
from shopfront.domain.product.catalog import ProductCatalog
from shopfront.domain.shipping.calculator import ShippingFeeCalculator
from shopfront.infrastructure.di.decorators import injectable
from shopfront.infrastructure.logging.logger import get_logger


@injectable
class OrderFacade:
    """
    Single entry point for placing an order.

    Coordinates the customer lookup, the product catalog and the shipping fee
    calculator. A missing customer fails the call; missing products are
    skipped with a warning; a customer without a postal code gets no
    shipping fee.
    """

    def __init__(
        self,
        customer_lookup: CustomerLookup,
        product_catalog: ProductCatalog,
        fee_calculator: ShippingFeeCalculator,
    ):
        self._customer_lookup = customer_lookup
        self._product_catalog = product_catalog
        self._fee_calculator = fee_calculator
        self._logger = get_logger(__name__)

    def place_order(self, customer_id: int, product_ids: Iterable[str]) -> Order:
        """
        Assemble an order for a customer.

        Args:
            customer_id: Customer identifier
            product_ids: Requested product identifiers, in order

        Returns:
            The assembled order

        Raises:
            CustomerNotFoundError: If the customer does not exist
        """
        customer = self._customer_lookup.find_customer(customer_id)
        if customer is None:
            self._logger.error("Cannot place order: customer %s not found", customer_id)
            raise CustomerNotFoundError(customer_id)

        order = Order.create(customer)

        for product_id in product_ids:
            product = self._product_catalog.find_product(product_id)
            if product is None:
                self._logger.warning(
                    "Product %s not found, skipping it for order %s", product_id, order.order_id
                )
                continue
            order.add_item(product)

        if customer.has_shipping_address:
            order.set_shipping_fee(self._fee_calculator.calculate(customer.postal_code))
        else:
            self._logger.warning(
                "Customer %s has no postal code, shipping fee left at %.2f for order %s",
                customer.customer_id,
                order.shipping_fee,
                order.order_id,
            )

        self._logger.info(
            "Order %s placed for customer %s: %d item(s), shipping fee %.2f",
            order.order_id,
            customer.customer_id,
            order.item_count,
            order.shipping_fee,
        )
        return order
