"""
Courier Logging Package

Structured, request-correlated logging on top of the standard library:
- levels: error, warn, info, http, debug, verbose (HTTP and VERBOSE registered)
- loggers: StructuredLogger handles bound to a component label
- filters: request ID stamping from the ambient request context
- formatters: JSON and pretty (colorized single line) output
- handlers: daily, size-capped rotating files pruned by age
- manager: centralized setup from LoggingConfig
"""

from .filters import RequestContextFilter
from .formatters import PrettyFormatter, StructuredFormatter
from .handlers import DailyRotatingFileHandler
from .levels import HTTP, LEVELS, VERBOSE, level_name, to_level_number
from .loggers import ROOT_LOGGER_NAME, StructuredLogger
from .manager import LoggingManager, configure_logging, logging_manager

get_logger = logging_manager.get_logger

__all__ = [
    "LoggingManager",
    "configure_logging",
    "logging_manager",
    "get_logger",
    "StructuredLogger",
    "ROOT_LOGGER_NAME",
    "RequestContextFilter",
    "StructuredFormatter",
    "PrettyFormatter",
    "DailyRotatingFileHandler",
    "HTTP",
    "VERBOSE",
    "LEVELS",
    "level_name",
    "to_level_number",
]
