"""Address bounded context - postal code lookup."""

from .exceptions import AddressNotFoundError
from .repository import AddressRepository
from .value_objects import Address, normalize_postal_code

__all__ = [
    "Address",
    "AddressRepository",
    "AddressNotFoundError",
    "normalize_postal_code",
]
