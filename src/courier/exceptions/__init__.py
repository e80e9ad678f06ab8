"""
Courier Exception Hierarchy

Exception Hierarchy:
    CourierError (base)
    ├── ConfigurationError
    │   ├── InvalidConfigurationError
    │   └── ConfigurationValidationError
    └── HttpClientError
"""

from .base import CourierError
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .http import HttpClientError

__all__ = [
    "CourierError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
    "HttpClientError",
]
