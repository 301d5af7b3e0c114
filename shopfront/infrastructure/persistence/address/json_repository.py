"""JSON file address repository."""
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from shopfront.domain.address.repository import AddressRepository
from shopfront.domain.address.value_objects import Address, normalize_postal_code
from shopfront.infrastructure.logging.logger import get_logger
from shopfront.infrastructure.persistence.exceptions import StorageError

logger = get_logger(__name__)


class JSONAddressRepository(AddressRepository):
    """
    Read-only address repository loaded from a JSON file.

    The file holds either a list of address objects or an object with an
    ``"addresses"`` list::

        {"addresses": [{"postal_code": "10001", "city": "New York"}]}

    The file is read on first lookup. A missing file yields an empty store.
    """

    def __init__(self, storage_path: Union[str, Path]):
        self._storage_path = Path(storage_path)
        self._addresses: Optional[Dict[str, Address]] = None

    @property
    def storage_path(self) -> Path:
        return self._storage_path

    def _load(self) -> Dict[str, Address]:
        if self._addresses is not None:
            return self._addresses

        if not self._storage_path.is_file():
            logger.warning("Address file not found: %s", self._storage_path)
            self._addresses = {}
            return self._addresses

        try:
            with open(self._storage_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageError(
                f"Failed to read addresses from {self._storage_path}: {str(e)}"
            ) from e

        records = self._extract_records(data)
        addresses: Dict[str, Address] = {}
        try:
            for record in records:
                address = Address.model_validate(record)
                addresses[address.postal_code] = address
        except PydanticValidationError as e:
            raise StorageError(
                f"Invalid address record in {self._storage_path}: {str(e)}"
            ) from e

        logger.debug("Loaded %d addresses from %s", len(addresses), self._storage_path)
        self._addresses = addresses
        return self._addresses

    def _extract_records(self, data: Any) -> List[Any]:
        if isinstance(data, dict):
            if "addresses" not in data:
                raise StorageError(
                    f"Address file {self._storage_path} has no \"addresses\" list"
                )
            data = data["addresses"]
        if not isinstance(data, list):
            raise StorageError(
                f"Address file {self._storage_path} must contain a list of addresses"
            )
        return data

    def find_by_postal_code(self, postal_code: str) -> Optional[Address]:
        return self._load().get(normalize_postal_code(postal_code))

    def find_all(self) -> List[Address]:
        return list(self._load().values())
