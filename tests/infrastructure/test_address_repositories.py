import json

import pytest

from shopfront.config.schemas.storage_schema import StorageConfig
from shopfront.domain.address.exceptions import AddressNotFoundError
from shopfront.domain.address.repository import AddressRepository
from shopfront.domain.address.value_objects import Address
from shopfront.domain.base.exceptions import ConfigurationError
from shopfront.infrastructure.persistence.address.json_repository import JSONAddressRepository
from shopfront.infrastructure.persistence.address.memory_repository import (
    InMemoryAddressRepository,
)
from shopfront.infrastructure.persistence.exceptions import StorageError
from shopfront.infrastructure.persistence.repository_factory import AddressRepositoryFactory


@pytest.fixture
def address_file(tmp_path):
    path = tmp_path / "addresses.json"
    path.write_text(
        json.dumps(
            {
                "addresses": [
                    {"postal_code": "10001", "city": "New York"},
                    {"postal_code": "60601", "city": "Chicago"},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture(params=["memory", "json"])
def repository(request, address_file):
    """Both strategies behind the same contract."""
    if request.param == "memory":
        return InMemoryAddressRepository(
            [Address(postal_code="10001", city="New York"), Address(postal_code="60601", city="Chicago")]
        )
    return JSONAddressRepository(address_file)


def test_find_by_postal_code(repository):
    address = repository.find_by_postal_code("10001")

    assert isinstance(repository, AddressRepository)
    assert address.city == "New York"


def test_lookup_key_is_trimmed(repository):
    assert repository.find_by_postal_code(" 60601 ").city == "Chicago"


def test_unknown_postal_code(repository):
    # Act & Assert
    assert repository.find_by_postal_code("99999") is None
    assert repository.exists("99999") is False

    with pytest.raises(AddressNotFoundError) as exc_info:
        repository.get_by_postal_code("99999")

    assert str(exc_info.value) == "Address not found for key 99999"


def test_find_all(repository):
    assert sorted(a.postal_code for a in repository.find_all()) == ["10001", "60601"]


def test_memory_save_replaces_by_postal_code():
    repository = InMemoryAddressRepository()

    repository.save(Address(postal_code="10001", city="Old"))
    repository.save(Address(postal_code="10001", city="New"))

    assert repository.get_by_postal_code("10001").city == "New"
    assert len(repository.find_all()) == 1


def test_json_list_format(tmp_path):
    path = tmp_path / "addresses.json"
    path.write_text(json.dumps([{"postal_code": "94105"}]), encoding="utf-8")

    repository = JSONAddressRepository(path)

    assert repository.exists("94105")


def test_json_missing_file_is_empty(tmp_path, caplog):
    repository = JSONAddressRepository(tmp_path / "missing.json")

    assert repository.find_all() == []
    assert "Address file not found" in caplog.text


def test_json_malformed_file(tmp_path):
    path = tmp_path / "addresses.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StorageError):
        JSONAddressRepository(path).find_all()


def test_json_file_not_utf8(tmp_path):
    path = tmp_path / "addresses.json"
    path.write_bytes(b'[{"postal_code": "1000\xff"}]')

    with pytest.raises(StorageError):
        JSONAddressRepository(path).find_all()


def test_json_invalid_record(tmp_path):
    path = tmp_path / "addresses.json"
    path.write_text(json.dumps([{"postal_code": " "}]), encoding="utf-8")

    with pytest.raises(StorageError):
        JSONAddressRepository(path).find_by_postal_code("10001")


def test_json_wrong_shape(tmp_path):
    path = tmp_path / "addresses.json"
    path.write_text(json.dumps({"addresses": "10001"}), encoding="utf-8")

    with pytest.raises(StorageError):
        JSONAddressRepository(path).find_all()


def test_json_object_without_addresses_key(tmp_path):
    path = tmp_path / "addresses.json"
    path.write_text(json.dumps({"postal_code": "10001"}), encoding="utf-8")

    with pytest.raises(StorageError):
        JSONAddressRepository(path).find_all()


def test_json_file_read_once(address_file):
    repository = JSONAddressRepository(address_file)
    repository.find_all()

    address_file.write_text("[]", encoding="utf-8")

    assert repository.exists("10001")


class TestAddressRepositoryFactory:
    def test_memory_strategy(self):
        config = StorageConfig(strategy="memory", addresses=[{"postal_code": "10001"}])

        repository = AddressRepositoryFactory.create(config)

        assert isinstance(repository, InMemoryAddressRepository)
        assert repository.exists("10001")

    def test_json_strategy(self, address_file):
        config = StorageConfig(strategy="json", json_path=str(address_file))

        repository = AddressRepositoryFactory.create(config)

        assert isinstance(repository, JSONAddressRepository)
        assert repository.exists("60601")

    def test_json_path_env_expansion(self, address_file, monkeypatch):
        monkeypatch.setenv("ADDRESS_DIR", str(address_file.parent))
        config = StorageConfig(strategy="json", json_path="$ADDRESS_DIR/addresses.json")

        repository = AddressRepositoryFactory.create(config)

        assert repository.storage_path == address_file

    def test_unsupported_strategy(self):
        config = StorageConfig.model_construct(strategy="dynamodb", json_path="", addresses=[])

        with pytest.raises(ConfigurationError):
            AddressRepositoryFactory.create(config)
