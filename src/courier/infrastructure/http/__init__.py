"""HTTP infrastructure components."""

from .client import HttpClient
from .models import HttpMethod, HttpRequestConfig, HttpResponse, normalize_headers
from .protocol import HttpClientPort, LoggerPort
from .retry import (
    BackoffStrategy,
    LinearBackoffStrategy,
    OtherFailure,
    Success,
    TransportFailure,
    is_retryable,
    should_retry,
)

__all__ = [
    "HttpClient",
    "HttpClientPort",
    "LoggerPort",
    "HttpMethod",
    "HttpRequestConfig",
    "HttpResponse",
    "normalize_headers",
    "BackoffStrategy",
    "LinearBackoffStrategy",
    "Success",
    "TransportFailure",
    "OtherFailure",
    "is_retryable",
    "should_retry",
]
