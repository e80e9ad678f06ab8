"""
HTTP client exceptions.

A single normalized error type is raised by the HTTP client once its retry
policy is exhausted or a terminal failure occurs.
"""

from typing import Any, Optional

import requests

from courier.constants import (
    HTTP_STATUS_BAD_REQUEST,
    HTTP_STATUS_INTERNAL_SERVER_ERROR,
)

from .base import CourierError


class HttpClientError(CourierError):
    """Normalized outbound HTTP failure.

    Attributes:
        status: HTTP status code, or None when no response was received
        data: Raw (parsed) error response body, if any
        cause: The underlying exception
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        data: Any = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, context={"status": status})
        self.status = status
        self.data = data
        self.cause = cause

    @property
    def is_network_error(self) -> bool:
        """True when the transport failed before any response arrived."""
        return self.status is None and isinstance(self.cause, requests.RequestException)

    @property
    def is_client_error(self) -> bool:
        return (
            self.status is not None
            and HTTP_STATUS_BAD_REQUEST <= self.status < HTTP_STATUS_INTERNAL_SERVER_ERROR
        )

    @property
    def is_server_error(self) -> bool:
        return self.status is not None and self.status >= HTTP_STATUS_INTERNAL_SERVER_ERROR

    def to_dict(self):
        result = super().to_dict()
        result["status"] = self.status
        return result
