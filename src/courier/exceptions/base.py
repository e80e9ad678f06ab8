"""
Base exception classes for Courier.

Provides the foundational CourierError class that all other exceptions inherit from.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from courier.core.correlation.manager import RequestContextManager


class CourierError(Exception):
    """Base exception for all Courier-related errors.

    Attributes:
        message: The error message
        help_text: Optional actionable guidance for the caller
        context: Additional context information
        request_id: Correlation ID that was ambient when the error was created
        timestamp: When the error was created (UTC)
    """

    def __init__(
        self,
        message: str,
        help_text: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.help_text = help_text
        self.context = dict(context) if context else {}
        self.request_id = RequestContextManager.get_request_id()
        self.timestamp = datetime.now(timezone.utc)
        super().__init__(message)

    def __str__(self) -> str:
        result = self.message

        if self.help_text:
            result += f"\n\nHelp: {self.help_text}"

        if self.context:
            context_items = [
                f"{k}: {v}" for k, v in self.context.items() if v is not None
            ]
            if context_items:
                result += f"\n\nContext: {', '.join(context_items)}"

        if self.request_id:
            result += f"\n\nRequest ID: {self.request_id}"
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "request_id": self.request_id,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context,
            "help_text": self.help_text,
        }

    def add_context(self, **kwargs) -> "CourierError":
        """Add additional context to the exception."""
        self.context.update(kwargs)
        return self
