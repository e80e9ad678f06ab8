"""
Configuration manager for Courier.

Loads configuration from an optional TOML file, applies environment variable
overrides and validates the result.
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from courier.exceptions.config import (
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from courier.logging.loggers import StructuredLogger

from .models import CourierConfig, CourierSettings

logger = StructuredLogger(context="ConfigManager")


@dataclass
class EnvironmentOverride:
    """Helper for applying environment variable overrides."""
    config_section: Dict[str, Any]
    settings: CourierSettings

    def apply_if_set(self, setting_name: str, config_key: str) -> None:
        """Apply setting if it's set in environment."""
        value = getattr(self.settings, setting_name, None)
        if value is not None:
            self.config_section[config_key] = value

    def apply_string_if_set(self, setting_name: str, config_key: str) -> None:
        """Apply string setting if it's set and non-empty in environment."""
        value = getattr(self.settings, setting_name, None)
        if value:
            self.config_section[config_key] = value


class ConfigManager:
    """
    Configuration manager with validation.

    Precedence, lowest to highest: model defaults, TOML file, environment.
    """

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to a TOML config file. Environment only when None.
        """
        self.config_file = Path(config_file) if config_file else None
        self._config: Optional[CourierConfig] = None

    def load_config(self) -> CourierConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}

        if self.config_file and self.config_file.exists():
            logger.debug("Loading configuration file", metadata={"path": str(self.config_file)})
            config_data = self._load_toml_file()
        elif self.config_file:
            logger.warn("Configuration file not found, using defaults", metadata={"path": str(self.config_file)})

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = CourierConfig(**config_data)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise ConfigurationValidationError(errors) from e

        logger.verbose("Configuration loaded", metadata=self._config.model_dump(mode="json"))

        return self._config

    def reload_config(self) -> CourierConfig:
        """Discard the cached configuration and load it again."""
        self._config = None
        return self.load_config()

    def _load_toml_file(self) -> Dict[str, Any]:
        """Load configuration from TOML file."""
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(self.config_file),
                f"Invalid TOML syntax: {e}",
                "valid TOML format",
            ) from e
        except OSError as e:
            raise InvalidConfigurationError(
                str(self.config_file),
                f"Cannot read file: {e}",
                "a readable TOML file",
            ) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        settings = CourierSettings()

        config_data.setdefault("logging", {})
        config_data.setdefault("http", {})

        logging_override = EnvironmentOverride(config_data["logging"], settings)
        logging_override.apply_string_if_set("log_level", "level")
        logging_override.apply_string_if_set("log_format", "format")
        logging_override.apply_if_set("log_to_file", "to_file")
        logging_override.apply_string_if_set("log_directory", "directory")
        logging_override.apply_string_if_set("app_name", "app_name")

        http_override = EnvironmentOverride(config_data["http"], settings)
        http_override.apply_if_set("http_timeout", "timeout")
        http_override.apply_if_set("http_retries", "retries")
        http_override.apply_if_set("http_retry_delay", "retry_delay")

        return config_data
