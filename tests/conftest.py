import json
import logging
import pytest
from unittest.mock import Mock
from typing import Dict, Any

from shopfront.domain.address.repository import AddressRepository
from shopfront.domain.address.value_objects import Address
from shopfront.domain.customer.aggregate import Customer
from shopfront.domain.customer.lookup import CustomerLookup
from shopfront.domain.product.catalog import ProductCatalog
from shopfront.domain.product.value_objects import Product
from shopfront.domain.shipping.calculator import ShippingFeeCalculator
from shopfront.infrastructure.di.container import reset_container
from shopfront.infrastructure.logging.logger import ROOT_LOGGER_NAME
from shopfront.infrastructure.patterns.singleton_registry import SingletonRegistry


@pytest.fixture(autouse=True)
def reset_singletons():
    """Every test starts without shared container or registry state."""
    reset_container()
    SingletonRegistry.reset_instance()
    yield
    reset_container()
    SingletonRegistry.reset_instance()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging so caplog sees records at the level each test asks for."""
    yield
    app_logger = logging.getLogger(ROOT_LOGGER_NAME)
    app_logger.setLevel(logging.NOTSET)
    for handler in app_logger.handlers[:]:
        app_logger.removeHandler(handler)
        handler.close()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in (
        "SHOPFRONT_CONFIG",
        "SHOPFRONT_LOG_LEVEL",
        "SHOPFRONT_STORAGE_STRATEGY",
        "SHOPFRONT_STORAGE_JSON_PATH",
        "SHOPFRONT_SHIPPING_FLAT_RATE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_address():
    return Address(postal_code="10001", street="350 5th Ave", city="New York", country="US")


@pytest.fixture
def customer_with_address(sample_address):
    return Customer(customer_id=1, name="Customer 1", address=sample_address)


@pytest.fixture
def customer_without_address():
    return Customer(customer_id=2, name="Customer 2")


@pytest.fixture
def sample_products():
    return [
        Product(product_id="P1", name="Notebook", price=3.5),
        Product(product_id="P2", name="Fountain pen", price=24.0),
        Product(product_id="P3", name="Ink bottle", price=8.25),
    ]


@pytest.fixture
def mock_customer_lookup():
    return Mock(spec=CustomerLookup)


@pytest.fixture
def mock_product_catalog():
    return Mock(spec=ProductCatalog)


@pytest.fixture
def mock_fee_calculator():
    return Mock(spec=ShippingFeeCalculator)


@pytest.fixture
def mock_address_repository():
    return Mock(spec=AddressRepository)


@pytest.fixture
def app_config_data() -> Dict[str, Any]:
    return {
        "environment": "test",
        "logging": {"level": "DEBUG", "destination": "stdout"},
        "storage": {
            "strategy": "memory",
            "addresses": [
                {"postal_code": "10001", "city": "New York"},
                {"postal_code": "94105", "city": "San Francisco"},
            ],
        },
        "shipping": {"flat_rate": 7.5},
        "catalog": {
            "products": [
                {"product_id": "P1", "name": "Notebook", "price": 3.5},
                {"product_id": "P3", "name": "Ink bottle", "price": 8.25},
            ]
        },
        "customers": {"postal_codes": {"1": "10001", "2": "94105", "3": "99999"}},
    }


@pytest.fixture
def config_file(tmp_path, app_config_data):
    path = tmp_path / "shopfront.json"
    path.write_text(json.dumps(app_config_data), encoding="utf-8")
    return path
