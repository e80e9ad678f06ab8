"""
Structured logger bound to a component label.

StructuredLogger is the LoggerPort implementation used throughout Courier.
Each handle is a light, immutable wrapper around one shared standard-library
logger; set_context() returns a new handle instead of mutating this one.
"""

import logging
from typing import Any, Mapping, Optional

from courier.core.security.sanitizer import SensitiveDataSanitizer

from .levels import HTTP, VERBOSE

ROOT_LOGGER_NAME = "courier"


class StructuredLogger:
    """Leveled logger that stamps a context label and sanitized metadata."""

    __slots__ = ("_logger", "_context")

    def __init__(self, logger: Optional[logging.Logger] = None, context: Optional[str] = None):
        self._logger = logger or logging.getLogger(ROOT_LOGGER_NAME)
        self._context = context

    @property
    def context(self) -> Optional[str]:
        return self._context

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def set_context(self, context: str) -> "StructuredLogger":
        """Return a new handle bound to ``context`` and sharing this sink."""
        return StructuredLogger(self._logger, context)

    def _log(
        self,
        level: int,
        message: str,
        trace: Optional[str] = None,
        metadata: Optional[Mapping[str, Any]] = None,
        context: Optional[str] = None,
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return

        extra = {
            "context": context or self._context,
            "trace": trace,
            "metadata": SensitiveDataSanitizer.sanitize(metadata) if metadata else None,
        }
        self._logger.log(level, message, extra=extra)

    def error(self, message: str, trace: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None) -> None:
        self._log(logging.ERROR, message, trace, metadata)

    def warn(self, message: str, trace: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None) -> None:
        self._log(logging.WARNING, message, trace, metadata)

    def info(self, message: str, trace: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None) -> None:
        self._log(logging.INFO, message, trace, metadata)

    def http(self, message: str, trace: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None) -> None:
        self._log(HTTP, message, trace, metadata)

    def debug(self, message: str, trace: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None) -> None:
        self._log(logging.DEBUG, message, trace, metadata)

    def verbose(self, message: str, trace: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None) -> None:
        self._log(VERBOSE, message, trace, metadata)

    def log(self, message: str, context: Optional[str] = None) -> None:
        """Info-level message with an optional one-off context label."""
        self._log(logging.INFO, message, context=context)

    def __repr__(self) -> str:
        return f"StructuredLogger(name={self._logger.name!r}, context={self._context!r})"
