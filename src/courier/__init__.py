"""
Courier: request-correlated logging and resilient HTTP calls.

Architecture Overview:
- Correlation: ambient request context scoped per request (threads, asyncio)
- Logging: leveled, structured logging with sensitive-data redaction
- HTTP: requests-based client with bounded linear-backoff retries
- Config: pydantic models loaded from TOML and environment variables
- CLI: operator tool for issuing correlated requests
"""

__version__ = "0.1.0"

# Import order matters: exceptions read the correlation context and the
# config package logs through courier.logging.
from .core.correlation import RequestContext, RequestContextManager
from .exceptions import CourierError, HttpClientError
from .core.config import ConfigManager, CourierConfig
from .logging import StructuredLogger, configure_logging, get_logger
from .infrastructure.http import HttpClient, HttpRequestConfig, HttpResponse
from .core.correlation.middleware import RequestIdMiddleware

__all__ = [
    "RequestContext",
    "RequestContextManager",
    "RequestIdMiddleware",
    "CourierError",
    "HttpClientError",
    "ConfigManager",
    "CourierConfig",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
    "HttpClient",
    "HttpRequestConfig",
    "HttpResponse",
]
