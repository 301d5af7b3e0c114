"""Base domain layer - shared kernel for all bounded contexts."""

from .entity import Entity, ValueObject
from .exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    InvariantViolationError,
    ValidationError,
)

__all__ = [
    "Entity",
    "ValueObject",
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "InvariantViolationError",
    "ConfigurationError",
]
