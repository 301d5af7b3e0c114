"""Unified configuration management for the application."""
from __future__ import annotations

import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from shopfront.domain.base.exceptions import ConfigurationError
from shopfront.infrastructure.patterns.singleton_access import get_singleton
from shopfront.infrastructure.logging.logger import get_logger

from .loader import ConfigurationLoader
from .schemas import (
    AppConfig,
    CatalogConfig,
    CustomerDirectoryConfig,
    LoggingConfig,
    ShippingConfig,
    StorageConfig,
)

T = TypeVar("T")
logger = get_logger(__name__)

_SECTION_BY_TYPE: Dict[Type[Any], str] = {
    LoggingConfig: "logging",
    StorageConfig: "storage",
    ShippingConfig: "shipping",
    CatalogConfig: "catalog",
    CustomerDirectoryConfig: "customers",
}


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is loaded lazily on first access from, in increasing
    precedence: schema defaults, the JSON config file, and SHOPFRONT_*
    environment overrides.
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        config_data: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            config_file: Optional path to a JSON configuration file
            config_data: Optional in-memory configuration, used instead of a file
        """
        self._config_file = config_file
        self._config_data = config_data
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = ConfigurationLoader()

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        if self._config_data is not None:
            config_data = dict(self._config_data)
        else:
            config_data = self._loader.load_configuration(self._config_file)

        config_data = self._loader.apply_environment_overrides(config_data)

        try:
            app_config = AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} validation error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e

        logger.debug(
            "Configuration loaded: environment=%s storage=%s",
            app_config.environment,
            app_config.storage.strategy,
        )
        return app_config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section."""
        section = _SECTION_BY_TYPE.get(config_type)
        if section is None:
            raise ConfigurationError(f"Unknown configuration type: {config_type.__name__}")
        return getattr(self.app_config, section)

    def get_storage_strategy(self) -> str:
        return self.app_config.storage.strategy

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._app_config = None


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """
    Get the shared ConfigurationManager.

    The first call creates it (with ``config_file``); later calls return the
    same instance and ignore the argument.
    """
    return get_singleton(ConfigurationManager, config_file)
