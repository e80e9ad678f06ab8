"""
Configuration management for Courier.

Usage:
    from courier.core.config import ConfigManager

    config = ConfigManager().load_config()
    config.logging.level      # LogLevel.DEBUG unless LOG_LEVEL is set
    config.http.retries       # 3 unless HTTP_RETRIES is set
"""

from .manager import ConfigManager
from .models import (
    CourierConfig,
    CourierSettings,
    HttpClientConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    "ConfigManager",
    "CourierConfig",
    "CourierSettings",
    "HttpClientConfig",
    "LogFormat",
    "LoggingConfig",
    "LogLevel",
]
