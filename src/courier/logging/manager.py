"""
Centralized logging configuration and management.

Provides the LoggingManager singleton for configuring the ``courier`` logger
tree and handing out StructuredLogger handles.
"""

import logging
import sys
from typing import List, Optional

from courier.core.config.models import LogFormat, LoggingConfig

from .filters import RequestContextFilter
from .formatters import PrettyFormatter, StructuredFormatter
from .handlers import DailyRotatingFileHandler
from .levels import to_level_number
from .loggers import ROOT_LOGGER_NAME, StructuredLogger


class LoggingManager:
    """Centralized logging configuration and management."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.config: Optional[LoggingConfig] = None
            self.handlers: List[logging.Handler] = []
            self._initialized = True

    @property
    def logger(self) -> logging.Logger:
        return logging.getLogger(ROOT_LOGGER_NAME)

    def configure(self, config: LoggingConfig) -> None:
        """Configure the logging system, replacing any previous configuration."""
        self.config = config
        logger = self.logger

        self.reset()

        logger.setLevel(to_level_number(config.level))
        logger.propagate = False

        self._add_console_handler(config)
        if config.to_file:
            self._add_file_handlers(config)

    def reset(self) -> None:
        """Detach and close every handler this manager installed."""
        logger = self.logger
        for handler in self.handlers:
            logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

    def _add_console_handler(self, config: LoggingConfig) -> None:
        """Add console handler."""
        handler = logging.StreamHandler(sys.stderr)
        if config.format == LogFormat.JSON:
            handler.setFormatter(StructuredFormatter(config.app_name))
        else:
            handler.setFormatter(PrettyFormatter())
        self._install(handler)

    def _add_file_handlers(self, config: LoggingConfig) -> None:
        """Add the combined and error-only rotating JSON file handlers."""
        config.directory.mkdir(parents=True, exist_ok=True)

        combined = DailyRotatingFileHandler(
            str(config.directory / f"{config.app_name}.log"),
            max_bytes=config.max_file_size,
            retention_days=config.retention_days,
        )
        combined.setFormatter(StructuredFormatter(config.app_name))
        self._install(combined)

        errors = DailyRotatingFileHandler(
            str(config.directory / f"{config.app_name}-error.log"),
            max_bytes=config.max_file_size,
            retention_days=config.error_retention_days,
        )
        errors.setLevel(logging.ERROR)
        errors.setFormatter(StructuredFormatter(config.app_name))
        self._install(errors)

    def _install(self, handler: logging.Handler) -> None:
        handler.addFilter(RequestContextFilter())
        self.logger.addHandler(handler)
        self.handlers.append(handler)

    def get_logger(self, context: Optional[str] = None) -> StructuredLogger:
        """Get a StructuredLogger, optionally bound to a context label."""
        return StructuredLogger(self.logger, context)


# Global logging manager instance
logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig) -> None:
    """Configure the global logging system."""
    logging_manager.configure(config)
