"""Configuration schemas."""

from .app_schema import AppConfig
from .common_schema import CatalogConfig, CustomerDirectoryConfig, ShippingConfig
from .logging_schema import LoggingConfig
from .storage_schema import StorageConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "StorageConfig",
    "ShippingConfig",
    "CatalogConfig",
    "CustomerDirectoryConfig",
]
