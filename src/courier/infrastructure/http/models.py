"""
Request and response models for the HTTP client.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, Mapping, Optional, TypeVar, Union

T = TypeVar("T")

QueryValue = Union[str, int, float, bool]


class HttpMethod(str, Enum):
    """Supported HTTP methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@dataclass
class HttpRequestConfig:
    """Per-call request options. Unset fields fall back to the client defaults."""

    headers: Optional[Dict[str, str]] = None
    params: Optional[Dict[str, QueryValue]] = None
    timeout: Optional[int] = None       # milliseconds
    retries: Optional[int] = None
    base_url: Optional[str] = None

    def resolve_url(self, url: str) -> str:
        """Prefix ``url`` with the base URL when one is configured."""
        return f"{self.base_url}{url}" if self.base_url else url


@dataclass
class HttpResponse(Generic[T]):
    """Normalized response of a successful call."""

    data: T
    status: int
    status_text: str
    headers: Dict[str, str] = field(default_factory=dict)


def normalize_headers(headers: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Flatten response headers to a plain ``str -> str`` mapping.

    String values are copied, list/tuple values are joined with ``", "``,
    and values of any other type are dropped.
    """
    normalized: Dict[str, str] = {}
    if not headers:
        return normalized

    for key, value in headers.items():
        if isinstance(value, str):
            normalized[key] = value
        elif isinstance(value, (list, tuple)):
            normalized[key] = ", ".join(str(item) for item in value)
    return normalized
