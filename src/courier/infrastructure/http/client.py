"""
Resilient HTTP client.

Wraps a shared requests.Session with bounded linear-backoff retries,
request ID propagation and structured logging of every attempt. All
results are normalized to HttpResponse, all failures to HttpClientError.
"""

import time
import traceback
from typing import Any, Callable, Dict, Optional

import requests
from requests.adapters import HTTPAdapter

from courier.constants import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_HTTP_POOL_MAXSIZE,
    DEFAULT_HTTP_RETRIES,
    DEFAULT_HTTP_RETRY_DELAY_MS,
    DEFAULT_HTTP_TIMEOUT_MS,
    REQUEST_ID_HEADER,
)
from courier.core.config.models import HttpClientConfig
from courier.core.correlation.manager import RequestContextManager
from courier.exceptions.http import HttpClientError
from courier.logging import get_logger

from .models import HttpMethod, HttpRequestConfig, HttpResponse, normalize_headers
from .protocol import LoggerPort
from .retry import (
    AttemptOutcome,
    BackoffStrategy,
    LinearBackoffStrategy,
    OtherFailure,
    Success,
    TransportFailure,
    should_retry,
)


class HttpClient:
    """HTTP client with retry logic, timeouts, request ID propagation and logging."""

    def __init__(
        self,
        logger: Optional[LoggerPort] = None,
        context_manager=RequestContextManager,
        session: Optional[requests.Session] = None,
        timeout: int = DEFAULT_HTTP_TIMEOUT_MS,
        retries: int = DEFAULT_HTTP_RETRIES,
        retry_delay: int = DEFAULT_HTTP_RETRY_DELAY_MS,
        pool_maxsize: int = DEFAULT_HTTP_POOL_MAXSIZE,
        backoff: Optional[BackoffStrategy] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize HTTP client.

        Args:
            logger: Logger to write to (bound to the "HttpClient" context)
            context_manager: Source of the ambient request ID
            session: Optional existing session to use
            timeout: Default per-attempt timeout in milliseconds
            retries: Default number of retries after the first attempt
            retry_delay: Backoff base delay in milliseconds
            pool_maxsize: Connections kept per host when creating a session
            backoff: Backoff strategy (linear by default)
            sleep: Function used to wait between attempts, in seconds
        """
        self.logger = (logger or get_logger()).set_context("HttpClient")
        self.context_manager = context_manager
        self.timeout = timeout
        self.retries = retries
        self.retry_delay = retry_delay
        self.backoff = backoff or LinearBackoffStrategy()
        self._sleep = sleep
        self.session = session or self._create_session(pool_maxsize)

    @classmethod
    def from_config(
        cls, config: HttpClientConfig, logger: Optional[LoggerPort] = None, **kwargs
    ) -> "HttpClient":
        """Create a client from the ``http`` configuration section."""
        return cls(
            logger=logger,
            timeout=config.timeout,
            retries=config.retries,
            retry_delay=config.retry_delay,
            pool_maxsize=config.pool_maxsize,
            **kwargs,
        )

    def _create_session(self, pool_maxsize: int) -> requests.Session:
        """Create a pooled session. Retries are handled here, not by urllib3."""
        session = requests.Session()
        adapter = HTTPAdapter(
            pool_connections=pool_maxsize, pool_maxsize=pool_maxsize, max_retries=0
        )
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def get(self, url: str, config: Optional[HttpRequestConfig] = None) -> HttpResponse:
        return self.request(HttpMethod.GET, url, None, config)

    def post(self, url: str, data: Any = None, config: Optional[HttpRequestConfig] = None) -> HttpResponse:
        return self.request(HttpMethod.POST, url, data, config)

    def put(self, url: str, data: Any = None, config: Optional[HttpRequestConfig] = None) -> HttpResponse:
        return self.request(HttpMethod.PUT, url, data, config)

    def patch(self, url: str, data: Any = None, config: Optional[HttpRequestConfig] = None) -> HttpResponse:
        return self.request(HttpMethod.PATCH, url, data, config)

    def delete(self, url: str, config: Optional[HttpRequestConfig] = None) -> HttpResponse:
        return self.request(HttpMethod.DELETE, url, None, config)

    def request(
        self,
        method: str,
        url: str,
        data: Any = None,
        config: Optional[HttpRequestConfig] = None,
    ) -> HttpResponse:
        """Perform a request, retrying transient failures.

        Raises:
            HttpClientError: when the last attempt failed or a failure was terminal
        """
        config = config or HttpRequestConfig()
        method = HttpMethod(method.upper()).value
        retries = max(config.retries if config.retries is not None else self.retries, 0)
        timeout = config.timeout if config.timeout is not None else self.timeout
        full_url = config.resolve_url(url)
        headers = self._build_headers(config.headers)

        last_error: Optional[HttpClientError] = None
        attempts = 0

        for attempt in range(retries + 1):
            if attempt > 0:
                self.logger.debug(
                    f"Retry attempt {attempt}/{retries}",
                    metadata={"method": method, "url": full_url},
                )
                self._sleep(self.backoff.calculate_delay(attempt, self.retry_delay) / 1000)

            self.logger.debug(
                f"HTTP {method} request",
                metadata={"url": full_url, "attempt": attempt + 1},
            )
            attempts = attempt + 1

            outcome = self._send(method, full_url, data, headers, config.params, timeout)

            if isinstance(outcome, Success):
                response = outcome.response
                self.logger.debug(
                    f"HTTP {method} response",
                    metadata={"url": full_url, "status": response.status_code},
                )
                return HttpResponse(
                    data=self._parse_body(response),
                    status=response.status_code,
                    status_text=response.reason or "",
                    headers=normalize_headers(response.headers),
                )

            last_error = self._handle_failure(outcome, method, full_url)

            if not should_retry(outcome, attempt, retries):
                break

        self.logger.error(
            f"HTTP {method} request failed after {attempts} attempts",
            trace=self._format_trace(last_error.cause),
            metadata={
                "url": full_url,
                "status": last_error.status,
                "message": last_error.message,
            },
        )
        raise last_error from last_error.cause

    def _build_headers(self, custom_headers: Optional[Dict[str, str]]) -> Dict[str, str]:
        """Build request headers including the request ID for tracing."""
        headers = {"Content-Type": DEFAULT_CONTENT_TYPE}
        if custom_headers:
            headers.update(custom_headers)

        request_id = self.context_manager.get_request_id()
        if request_id:
            headers[REQUEST_ID_HEADER] = request_id

        return headers

    def _send(
        self,
        method: str,
        url: str,
        data: Any,
        headers: Dict[str, str],
        params: Optional[Dict[str, Any]],
        timeout: int,
    ) -> AttemptOutcome:
        """Issue one attempt and reduce it to an outcome."""
        if data is None:
            body = {}
        elif isinstance(data, (str, bytes)):
            body = {"data": data}
        else:
            body = {"json": data}

        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                params=params,
                timeout=timeout / 1000,
                **body,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            if e.response is None:
                return TransportFailure(str(e), e)
            return TransportFailure(
                str(e),
                e,
                status=e.response.status_code,
                body=self._parse_body(e.response),
            )
        except Exception as e:
            return OtherFailure(str(e) or type(e).__name__, e)

        return Success(response)

    def _handle_failure(self, outcome: AttemptOutcome, method: str, url: str) -> HttpClientError:
        """Transform a failed outcome into HttpClientError and log it."""
        if isinstance(outcome, TransportFailure):
            error = HttpClientError(outcome.message, outcome.status, outcome.body, outcome.cause)
            self.logger.warn(
                f"HTTP {method} request failed",
                metadata={"url": url, "status": error.status, "message": error.message},
            )
            return error

        error = HttpClientError(outcome.message, cause=outcome.cause)
        self.logger.warn(
            f"HTTP {method} request failed",
            metadata={"url": url, "message": error.message},
        )
        return error

    @staticmethod
    def _parse_body(response: requests.Response) -> Any:
        """JSON body when parseable, text otherwise, None when empty."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _format_trace(cause: Optional[BaseException]) -> Optional[str]:
        if cause is None:
            return None
        return "".join(traceback.format_exception(cause)).rstrip()

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
