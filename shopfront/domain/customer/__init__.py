"""Customer bounded context."""

from .aggregate import Customer
from .exceptions import CustomerNotFoundError
from .lookup import CustomerLookup

__all__ = [
    "Customer",
    "CustomerLookup",
    "CustomerNotFoundError",
]
