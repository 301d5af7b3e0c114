"""Factory selecting the address repository strategy from configuration."""
import os

from shopfront.config.schemas.storage_schema import StorageConfig
from shopfront.domain.address.repository import AddressRepository
from shopfront.domain.base.exceptions import ConfigurationError
from shopfront.infrastructure.logging.logger import get_logger
from shopfront.infrastructure.persistence.address.json_repository import JSONAddressRepository
from shopfront.infrastructure.persistence.address.memory_repository import (
    InMemoryAddressRepository,
)

logger = get_logger(__name__)


class AddressRepositoryFactory:
    """Creates the configured AddressRepository strategy."""

    @staticmethod
    def create(storage_config: StorageConfig) -> AddressRepository:
        """
        Create an address repository based on configuration.

        Args:
            storage_config: Storage section of the application configuration

        Returns:
            AddressRepository: Configured repository instance

        Raises:
            ConfigurationError: If the strategy is not supported
        """
        strategy = storage_config.strategy
        logger.debug("Creating address repository with strategy %s", strategy)

        if strategy == "memory":
            return InMemoryAddressRepository(storage_config.addresses)
        if strategy == "json":
            return JSONAddressRepository(os.path.expandvars(storage_config.json_path))

        raise ConfigurationError(
            f"Unsupported storage strategy: {strategy}",
            details={"strategy": strategy},
        )
