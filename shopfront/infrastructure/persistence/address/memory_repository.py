"""In-memory address repository."""
from typing import Dict, Iterable, List, Optional

from shopfront.domain.address.repository import AddressRepository
from shopfront.domain.address.value_objects import Address, normalize_postal_code
from shopfront.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class InMemoryAddressRepository(AddressRepository):
    """Address repository backed by a dict keyed by postal code."""

    def __init__(self, addresses: Optional[Iterable[Address]] = None):
        self._addresses: Dict[str, Address] = {}
        for address in addresses or []:
            self.save(address)

    def save(self, address: Address) -> None:
        """Register an address, replacing any address with the same postal code."""
        self._addresses[address.postal_code] = address
        logger.debug("Registered address for postal code %s", address.postal_code)

    def find_by_postal_code(self, postal_code: str) -> Optional[Address]:
        return self._addresses.get(normalize_postal_code(postal_code))

    def find_all(self) -> List[Address]:
        return list(self._addresses.values())
