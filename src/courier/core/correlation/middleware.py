"""
WSGI middleware establishing the request context at the inbound boundary.

Reads the ``x-request-id`` header (or generates an ID), echoes it on the
response and runs the wrapped application inside that request's context.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union
from urllib.parse import parse_qs

from courier.constants import REQUEST_ID_HEADER
from courier.logging import get_logger

from .manager import RequestContext, RequestContextManager

REQUEST_ID_ENVIRON_KEY = "HTTP_" + REQUEST_ID_HEADER.upper().replace("-", "_")


def _parse_query(query_string: str) -> Dict[str, Union[str, List[str]]]:
    """Query parameters, with repeated keys kept as lists."""
    return {
        key: values[0] if len(values) == 1 else values
        for key, values in parse_qs(query_string, keep_blank_values=True).items()
    }


class _ContextualResponse:
    """Response iterable that re-enters the request context for every chunk."""

    def __init__(self, iterable: Iterable[bytes], context: RequestContext, on_close: Callable[[], None]):
        self._iterable = iterable
        self._iterator: Iterator[bytes] = iter(iterable)
        self._context = context
        self._on_close = on_close

    def __iter__(self) -> "_ContextualResponse":
        return self

    def __next__(self) -> bytes:
        return RequestContextManager.run(self._context, next, self._iterator)

    def close(self) -> None:
        try:
            close = getattr(self._iterable, "close", None)
            if close is not None:
                RequestContextManager.run(self._context, close)
        finally:
            RequestContextManager.run(self._context, self._on_close)


class RequestIdMiddleware:
    """Wrap a WSGI application with request correlation.

    Example:
        app = RequestIdMiddleware(app)
    """

    def __init__(self, app: Callable, logger=None):
        self.app = app
        self.logger = (logger or get_logger()).set_context("HTTP")

    def __call__(self, environ: dict, start_response: Callable) -> Iterable[bytes]:
        request_id = environ.get(REQUEST_ID_ENVIRON_KEY) or RequestContextManager.generate_id()
        context = RequestContext(request_id=request_id)
        return RequestContextManager.run(context, self._dispatch, context, environ, start_response)

    def _dispatch(self, context: RequestContext, environ: dict, start_response: Callable) -> Iterable[bytes]:
        method = environ.get("REQUEST_METHOD", "GET")
        path = environ.get("PATH_INFO", "") or "/"
        status: List[str] = []

        def start_response_with_id(
            status_line: str, headers: List[Tuple[str, str]], exc_info: Optional[Any] = None
        ):
            status[:] = [status_line.split(" ", 1)[0]]
            headers = [
                (name, value) for name, value in headers if name.lower() != REQUEST_ID_HEADER
            ]
            headers.append((REQUEST_ID_HEADER, context.request_id))
            return start_response(status_line, headers, exc_info)

        def log_completion() -> None:
            self.logger.http(
                f"<-- {method} {path} {status[0] if status else '500'}",
                metadata={"duration": f"{context.elapsed_ms():.0f}ms"},
            )

        self.logger.http(
            f"--> {method} {path}",
            metadata={"query": _parse_query(environ.get("QUERY_STRING", "")), "ip": environ.get("REMOTE_ADDR")},
        )

        try:
            result = self.app(environ, start_response_with_id)
        except Exception:
            log_completion()
            raise

        return _ContextualResponse(result, context, log_completion)
