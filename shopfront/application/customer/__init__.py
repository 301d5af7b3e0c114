"""Customer application services."""

from .service import CustomerService

__all__ = ["CustomerService"]
