"""Configuration package with clean public API."""

from .schemas import (
    AppConfig,
    CatalogConfig,
    CustomerDirectoryConfig,
    LoggingConfig,
    ShippingConfig,
    StorageConfig,
)
from .loader import ConfigurationLoader
from .manager import ConfigurationManager, get_config_manager

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "StorageConfig",
    "ShippingConfig",
    "CatalogConfig",
    "CustomerDirectoryConfig",
    "ConfigurationLoader",
    "ConfigurationManager",
    "get_config_manager",
]
