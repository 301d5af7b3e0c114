"""Address value objects."""
from pydantic import Field, field_validator

from shopfront.domain.base.entity import ValueObject


def normalize_postal_code(postal_code: str) -> str:
    """Normalize a postal code lookup key."""
    return (postal_code or "").strip()


class Address(ValueObject):
    """Postal address keyed by postal code."""

    postal_code: str = Field(..., description="Postal code, the lookup key")
    street: str = ""
    city: str = ""
    country: str = ""

    @field_validator("postal_code")
    @classmethod
    def validate_postal_code(cls, v: str) -> str:
        if not v:
            raise ValueError("postal_code must not be blank")
        return v
