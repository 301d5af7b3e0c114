"""Customer lookup service."""
from typing import Dict, Optional

from shopfront.domain.address.exceptions import AddressNotFoundError
from shopfront.domain.address.repository import AddressRepository
from shopfront.domain.address.value_objects import Address
from shopfront.domain.customer.aggregate import Customer
from shopfront.domain.customer.lookup import CustomerLookup
from shopfront.infrastructure.di.decorators import injectable
from shopfront.infrastructure.logging.logger import get_logger


@injectable
class CustomerService(CustomerLookup):
    """
    Canned customer lookup.

    Every positive identifier yields a fresh ``Customer`` named after it.
    Identifiers linked to a postal code get the address registered for that
    code in the address repository.
    """

    def __init__(
        self,
        address_repository: AddressRepository,
        postal_codes: Optional[Dict[int, str]] = None,
    ):
        self._address_repository = address_repository
        self._postal_codes = dict(postal_codes or {})
        self._logger = get_logger(__name__)

    def find_customer(self, customer_id: int) -> Optional[Customer]:
        self._logger.debug("Looking up customer %s", customer_id)
        if customer_id < 1:
            self._logger.debug("Customer id %s is not a valid identifier", customer_id)
            return None

        return Customer(
            customer_id=customer_id,
            name=f"Customer {customer_id}",
            address=self._lookup_address(customer_id),
        )

    def _lookup_address(self, customer_id: int) -> Optional[Address]:
        postal_code = self._postal_codes.get(customer_id)
        if not postal_code:
            return None
        try:
            return self._address_repository.get_by_postal_code(postal_code)
        except AddressNotFoundError as e:
            self._logger.warning("Customer %s has no usable address: %s", customer_id, e)
            return None

    def save_customer(self, customer: Customer) -> None:
        self._logger.info("Saving customer %s (%s)", customer.customer_id, customer.name)
