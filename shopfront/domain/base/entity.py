"""Base domain entities - foundation for all domain objects."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for immutable domain records compared by value."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


class Entity(BaseModel):
    """Base class for mutable domain entities compared by identity."""

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )

    id: Optional[Any] = None

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID and type."""
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash((self.__class__, self.id))

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
