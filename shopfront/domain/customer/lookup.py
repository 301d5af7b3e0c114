"""Customer lookup interface - contract consumed by the order facade."""
from abc import ABC, abstractmethod
from typing import Optional

from .aggregate import Customer
from .exceptions import CustomerNotFoundError


class CustomerLookup(ABC):
    """Lookup and save contract for customers."""

    @abstractmethod
    def find_customer(self, customer_id: int) -> Optional[Customer]:
        """Find customer by identifier, None if there is no such customer."""

    @abstractmethod
    def save_customer(self, customer: Customer) -> None:
        """Save a customer."""

    def get_customer(self, customer_id: int) -> Customer:
        """
        Get customer by identifier.

        Raises:
            CustomerNotFoundError: If the customer does not exist
        """
        customer = self.find_customer(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer
