"""
Attempt outcomes, retry decision and backoff for the HTTP client.

Each attempt is reduced to a tagged outcome, and a pure function decides
whether another attempt should follow. Nothing here performs I/O.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Union

import requests

from courier.constants import (
    HTTP_STATUS_INTERNAL_SERVER_ERROR,
    HTTP_STATUS_TOO_MANY_REQUESTS,
)


@dataclass(frozen=True)
class Success:
    """The transport returned a 2xx response."""
    response: requests.Response


@dataclass(frozen=True)
class TransportFailure:
    """The transport raised. ``status`` is None when no response arrived."""
    message: str
    cause: BaseException
    status: Optional[int] = None
    body: Any = None


@dataclass(frozen=True)
class OtherFailure:
    """Unexpected, non-transport exception."""
    message: str
    cause: BaseException


AttemptOutcome = Union[Success, TransportFailure, OtherFailure]


def is_retryable(outcome: AttemptOutcome) -> bool:
    """Network failures, 5xx and 429 are retryable; everything else is not."""
    if not isinstance(outcome, TransportFailure):
        return False
    if outcome.status is None:
        return True
    return (
        outcome.status >= HTTP_STATUS_INTERNAL_SERVER_ERROR
        or outcome.status == HTTP_STATUS_TOO_MANY_REQUESTS
    )


def should_retry(outcome: AttemptOutcome, attempt: int, max_retries: int) -> bool:
    """Decide whether to issue another attempt.

    Args:
        outcome: Result of the attempt that just finished
        attempt: Zero-based index of that attempt
        max_retries: Retries allowed after the first attempt
    """
    if attempt >= max_retries:
        return False
    return is_retryable(outcome)


class BackoffStrategy(ABC):
    """Abstract base class for backoff strategies."""

    @abstractmethod
    def calculate_delay(self, attempt: int, base_delay: float) -> float:
        """Delay before retry number ``attempt`` (1-based), in base_delay units."""
        pass


class LinearBackoffStrategy(BackoffStrategy):
    """Linear increase in delay: attempt × base_delay, uncapped."""

    def calculate_delay(self, attempt: int, base_delay: float) -> float:
        return base_delay * attempt
