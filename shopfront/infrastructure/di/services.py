"""Service registration for the DI container."""
from shopfront.application.customer.service import CustomerService
from shopfront.application.order.facade import OrderFacade
from shopfront.application.shipping.service import FlatRateShippingFeeCalculator
from shopfront.config.schemas.app_schema import AppConfig
from shopfront.domain.address.repository import AddressRepository
from shopfront.domain.customer.lookup import CustomerLookup
from shopfront.domain.product.catalog import ProductCatalog
from shopfront.domain.shipping.calculator import ShippingFeeCalculator
from shopfront.infrastructure.logging.logger import get_logger
from shopfront.infrastructure.persistence.product.memory_catalog import InMemoryProductCatalog
from shopfront.infrastructure.persistence.repository_factory import AddressRepositoryFactory

from .container import DIContainer

logger = get_logger(__name__)


def register_services(container: DIContainer, app_config: AppConfig) -> DIContainer:
    """
    Register every application service as a singleton.

    Each abstraction is bound to the implementation selected by configuration;
    consumers receive the same shared instance.
    """
    container.register_instance(AppConfig, app_config)

    container.register_singleton(
        AddressRepository,
        lambda c: AddressRepositoryFactory.create(app_config.storage),
    )
    container.register_singleton(
        ProductCatalog,
        lambda c: InMemoryProductCatalog(app_config.catalog.products),
    )
    container.register_singleton(
        ShippingFeeCalculator,
        lambda c: FlatRateShippingFeeCalculator(app_config.shipping.flat_rate),
    )
    container.register_singleton(
        CustomerLookup,
        lambda c: CustomerService(
            c.get(AddressRepository),
            postal_codes=app_config.customers.postal_codes,
        ),
    )
    container.register_singleton(OrderFacade)

    logger.debug("Registered application services")
    return container
