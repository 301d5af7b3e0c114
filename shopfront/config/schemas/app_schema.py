"""Main application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, Field

from .common_schema import CatalogConfig, CustomerDirectoryConfig, ShippingConfig
from .logging_schema import LoggingConfig
from .storage_schema import StorageConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    environment: str = Field("development", description="Environment")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    storage: StorageConfig = Field(default_factory=lambda: StorageConfig())
    shipping: ShippingConfig = Field(default_factory=lambda: ShippingConfig())
    catalog: CatalogConfig = Field(default_factory=lambda: CatalogConfig())
    customers: CustomerDirectoryConfig = Field(
        default_factory=lambda: CustomerDirectoryConfig()
    )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        return cls.model_validate(data)
