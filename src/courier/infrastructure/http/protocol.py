"""
Protocol definitions for the HTTP client and the logger it writes to.

These protocols describe the interfaces application code depends on, so
callers can inject test doubles or alternative implementations.
"""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from .models import HttpRequestConfig, HttpResponse


@runtime_checkable
class LoggerPort(Protocol):
    """Leveled, context-labelled structured logger."""

    def set_context(self, context: str) -> "LoggerPort":
        """Return a new logger bound to ``context``; self is left unchanged."""
        ...

    def error(self, message: str, trace: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None) -> None:
        ...

    def warn(self, message: str, trace: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None) -> None:
        ...

    def info(self, message: str, trace: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None) -> None:
        ...

    def http(self, message: str, trace: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None) -> None:
        ...

    def debug(self, message: str, trace: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None) -> None:
        ...

    def verbose(self, message: str, trace: Optional[str] = None, metadata: Optional[Mapping[str, Any]] = None) -> None:
        ...


@runtime_checkable
class HttpClientPort(Protocol):
    """Outbound HTTP operations.

    Implementations handle retries, timeouts and request ID propagation, and
    raise HttpClientError once a call has definitively failed.
    """

    def get(self, url: str, config: Optional[HttpRequestConfig] = None) -> HttpResponse:
        """Perform an HTTP GET request.

        Args:
            url: The URL or path to request
            config: Optional request configuration
        """
        ...

    def post(self, url: str, data: Any = None, config: Optional[HttpRequestConfig] = None) -> HttpResponse:
        """Perform an HTTP POST request.

        Args:
            url: The URL or path to request
            data: Request body
            config: Optional request configuration
        """
        ...

    def put(self, url: str, data: Any = None, config: Optional[HttpRequestConfig] = None) -> HttpResponse:
        """Perform an HTTP PUT request."""
        ...

    def patch(self, url: str, data: Any = None, config: Optional[HttpRequestConfig] = None) -> HttpResponse:
        """Perform an HTTP PATCH request."""
        ...

    def delete(self, url: str, config: Optional[HttpRequestConfig] = None) -> HttpResponse:
        """Perform an HTTP DELETE request."""
        ...
