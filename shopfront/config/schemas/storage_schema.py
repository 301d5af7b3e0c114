"""Address storage configuration schema."""
from typing import List, Literal

from pydantic import BaseModel, Field, model_validator

from shopfront.domain.address.value_objects import Address


class StorageConfig(BaseModel):
    """Address repository strategy configuration."""

    strategy: Literal["memory", "json"] = Field(
        "memory", description="Address repository strategy"
    )
    json_path: str = Field("data/addresses.json", description="Address file for the json strategy")
    addresses: List[Address] = Field(
        default_factory=list, description="Seed addresses for the memory strategy"
    )

    @model_validator(mode="after")
    def validate_json_path(self) -> "StorageConfig":
        if self.strategy == "json" and not self.json_path.strip():
            raise ValueError("json_path is required for the json storage strategy")
        return self
