"""Application bootstrap - DI-based wiring of all services."""
from __future__ import annotations

from typing import Any, Dict, Optional

from shopfront.application.order.facade import OrderFacade
from shopfront.config.manager import ConfigurationManager, get_config_manager
from shopfront.config.schemas.app_schema import AppConfig
from shopfront.config.schemas.logging_schema import LoggingConfig
from shopfront.domain.address.repository import AddressRepository
from shopfront.domain.customer.lookup import CustomerLookup
from shopfront.domain.product.catalog import ProductCatalog
from shopfront.infrastructure.di.container import DIContainer
from shopfront.infrastructure.di.services import register_services
from shopfront.infrastructure.logging.logger import get_logger, setup_logging


class Application:
    """
    Application context.

    Loads configuration, configures logging and builds a DI container holding
    one shared instance of each service. Initialization happens once, on the
    first call to ``initialize()`` or to any service accessor.
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        config_data: Optional[Dict[str, Any]] = None,
        container: Optional[DIContainer] = None,
    ) -> None:
        """
        Args:
            config_path: Optional JSON configuration file
            config_data: Optional in-memory configuration, takes precedence over the file
            container: Optional container to populate; a new one is created otherwise
        """
        self.config_path = config_path
        self._config_data = config_data
        self._container = container or DIContainer()
        self._config_manager: Optional[ConfigurationManager] = None
        self._initialized = False
        self.logger = get_logger(__name__)

    @property
    def container(self) -> DIContainer:
        return self._container

    @property
    def config(self) -> AppConfig:
        self.initialize()
        return self._config_manager.app_config

    def initialize(self) -> "Application":
        """Load configuration, set up logging and register services."""
        if self._initialized:
            return self

        if self._config_data is not None or self.config_path is not None:
            self._config_manager = ConfigurationManager(self.config_path, self._config_data)
        else:
            self._config_manager = get_config_manager()

        app_config = self._config_manager.app_config
        setup_logging(self._config_manager.get_typed(LoggingConfig))

        self._container.register_instance(ConfigurationManager, self._config_manager)
        register_services(self._container, app_config)

        self._initialized = True
        self.logger.info(
            "Application initialized: environment=%s storage=%s",
            app_config.environment,
            self._config_manager.get_storage_strategy(),
        )
        return self

    def get_order_facade(self) -> OrderFacade:
        self.initialize()
        return self._container.get(OrderFacade)

    def get_customer_lookup(self) -> CustomerLookup:
        self.initialize()
        return self._container.get(CustomerLookup)

    def get_address_repository(self) -> AddressRepository:
        self.initialize()
        return self._container.get(AddressRepository)

    def get_product_catalog(self) -> ProductCatalog:
        self.initialize()
        return self._container.get(ProductCatalog)
