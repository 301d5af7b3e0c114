"""Configuration loading from files and environment."""
import json
import os
from typing import Any, Callable, Dict, Optional

from shopfront.domain.base.exceptions import ConfigurationError
from shopfront.infrastructure.logging.logger import get_logger

from .utils.env_expansion import expand_env_vars

logger = get_logger(__name__)

CONFIG_FILE_ENV = "SHOPFRONT_CONFIG"

# Environment variable -> (section, key, converter)
ENV_OVERRIDES: Dict[str, tuple] = {
    "SHOPFRONT_LOG_LEVEL": ("logging", "level", str),
    "SHOPFRONT_STORAGE_STRATEGY": ("storage", "strategy", str),
    "SHOPFRONT_STORAGE_JSON_PATH": ("storage", "json_path", str),
    "SHOPFRONT_SHIPPING_FLAT_RATE": ("shipping", "flat_rate", float),
}


class ConfigurationLoader:
    """Loads raw configuration data from a JSON file and the environment."""

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """
        Load configuration from a JSON file.

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {config_file}") from e
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_file}: {str(e)}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a JSON object"
            )

        logger.debug("Loaded configuration from %s", config_file)
        return expand_env_vars(data)

    def load_configuration(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from the given file, $SHOPFRONT_CONFIG, or defaults."""
        path = config_file or os.environ.get(CONFIG_FILE_ENV)
        if path:
            return self.load_from_file(path)
        logger.debug("No configuration file given, using defaults")
        return {}

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply SHOPFRONT_* environment overrides on top of config data."""
        result = dict(config_data)
        for env_name, (section, key, converter) in ENV_OVERRIDES.items():
            raw = os.environ.get(env_name)
            if raw is None or raw.strip() == "":
                continue
            value = self._convert(env_name, raw.strip(), converter)
            current = result.get(section) or {}
            if not isinstance(current, dict):
                raise ConfigurationError(
                    f"Configuration section '{section}' must be an object to apply {env_name}",
                    details={"section": section, "variable": env_name},
                )
            section_data = dict(current)
            section_data[key] = value
            result[section] = section_data
            logger.debug("Applied environment override %s", env_name)
        return result

    @staticmethod
    def _convert(env_name: str, raw: str, converter: Callable[[str], Any]) -> Any:
        try:
            return converter(raw)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for {env_name}: {raw}",
                details={"variable": env_name, "value": raw},
            ) from e
