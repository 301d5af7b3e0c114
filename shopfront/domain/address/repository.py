"""Address repository interface - contract for address lookup by postal code."""
from abc import ABC, abstractmethod
from typing import List, Optional

from .exceptions import AddressNotFoundError
from .value_objects import Address, normalize_postal_code


class AddressRepository(ABC):
    """
    Lookup abstraction for addresses keyed by postal code.

    Callers depend only on "lookup by key"; how the lookup is satisfied
    (in-memory mapping, JSON file, ...) is up to the concrete strategy.
    """

    @abstractmethod
    def find_by_postal_code(self, postal_code: str) -> Optional[Address]:
        """Find address by postal code, None if not registered."""

    @abstractmethod
    def find_all(self) -> List[Address]:
        """Return all registered addresses."""

    def get_by_postal_code(self, postal_code: str) -> Address:
        """
        Get address by postal code.

        Raises:
            AddressNotFoundError: If no address is registered for the key
        """
        address = self.find_by_postal_code(postal_code)
        if address is None:
            raise AddressNotFoundError(normalize_postal_code(postal_code))
        return address

    def exists(self, postal_code: str) -> bool:
        """Check if an address is registered for the postal code."""
        return self.find_by_postal_code(postal_code) is not None
