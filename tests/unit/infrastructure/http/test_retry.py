"""
Tests for attempt outcomes, the retry decision and backoff strategies.
"""

import pytest
import requests

from courier.infrastructure.http.retry import (
    LinearBackoffStrategy,
    OtherFailure,
    Success,
    TransportFailure,
    is_retryable,
    should_retry,
)


def _transport(status=None):
    return TransportFailure("failed", requests.ConnectionError("failed"), status=status)


@pytest.mark.unit
class TestIsRetryable:
    """Test the retryability rule."""

    @pytest.mark.parametrize("status", [None, 500, 502, 503, 504, 429])
    def test_retryable(self, status):
        assert is_retryable(_transport(status)) is True

    @pytest.mark.parametrize("status", [400, 401, 403, 404, 409, 422])
    def test_terminal_client_errors(self, status):
        assert is_retryable(_transport(status)) is False

    def test_other_failure_not_retryable(self):
        assert is_retryable(OtherFailure("bug", TypeError("bug"))) is False

    def test_success_not_retryable(self):
        assert is_retryable(Success(requests.Response())) is False


@pytest.mark.unit
class TestShouldRetry:
    """Test the attempt budget."""

    def test_retries_until_budget_spent(self):
        outcome = _transport()

        assert should_retry(outcome, 0, 3) is True
        assert should_retry(outcome, 2, 3) is True
        assert should_retry(outcome, 3, 3) is False

    def test_zero_retries(self):
        assert should_retry(_transport(503), 0, 0) is False

    def test_terminal_outcome_never_retried(self):
        assert should_retry(_transport(404), 0, 3) is False


@pytest.mark.unit
class TestLinearBackoffStrategy:
    """Test the linear delay schedule."""

    def test_delay_grows_linearly(self):
        strategy = LinearBackoffStrategy()

        assert [strategy.calculate_delay(n, 1000) for n in (1, 2, 3)] == [1000, 2000, 3000]

    def test_uncapped(self):
        assert LinearBackoffStrategy().calculate_delay(10, 1000) == 10000
