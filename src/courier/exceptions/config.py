"""
Configuration-specific exceptions.
"""

from typing import Any, List

from .base import CourierError


class ConfigurationError(CourierError):
    """Base exception for configuration-related errors."""


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, expected: str):
        message = f"Invalid configuration for '{field}': got {repr(value)}, expected {expected}"
        help_text = f"Please check the configuration for '{field}' and ensure it matches the expected format: {expected}"
        super().__init__(message, help_text)
        self.field = field
        self.value = value
        self.expected = expected


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"

        help_text = "Please check your configuration file and environment variables and fix the errors listed above"
        super().__init__(message, help_text)
