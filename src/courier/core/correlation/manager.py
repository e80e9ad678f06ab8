"""
Core request context management.

This module provides the RequestContext value and the RequestContextManager
that scopes it to the dynamic extent of a call. Storage is a ContextVar, so
every OS thread starts with no context, every asyncio task works on its own
copy, and nested scopes restore the outer value on exit.
"""

import functools
import inspect
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Iterator, Optional, TypeVar

T = TypeVar("T")

_request_context: ContextVar[Optional["RequestContext"]] = ContextVar(
    "courier_request_context", default=None
)


@dataclass(frozen=True)
class RequestContext:
    """
    Correlation data for one logical inbound request.

    Created once at the request boundary and never mutated afterwards.
    """

    request_id: str
    start_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def elapsed_ms(self) -> float:
        """Milliseconds elapsed since the request started."""
        return (datetime.now(timezone.utc) - self.start_time).total_seconds() * 1000


class RequestContextManager:
    """
    Manager for the ambient request context.

    All methods are static; the state lives in a module-level ContextVar so
    any component can read the current request id without it being passed
    through every call.
    """

    @staticmethod
    def generate_id() -> str:
        """Generate a new request ID."""
        return str(uuid.uuid4())

    @staticmethod
    def run(context: RequestContext, callback: Callable[..., T], *args, **kwargs) -> T:
        """
        Invoke ``callback`` with ``context`` as the ambient request context.

        When ``callback`` returns an awaitable (a coroutine function, an
        object with an async ``__call__``, a wrapper returning a coroutine),
        the awaitable is wrapped so the context is installed again while it
        runs and is still in place after every ``await``. The returned value
        is whatever ``callback`` returns (or an awaitable resolving to it).
        """
        token = _request_context.set(context)
        try:
            result = callback(*args, **kwargs)
        finally:
            _request_context.reset(token)

        if inspect.isawaitable(result):
            return RequestContextManager._await_in_context(context, result)
        return result

    @staticmethod
    async def _await_in_context(context: RequestContext, awaitable):
        token = _request_context.set(context)
        try:
            return await awaitable
        finally:
            _request_context.reset(token)

    @staticmethod
    @contextmanager
    def scope(
        context: Optional[RequestContext] = None,
        request_id: Optional[str] = None,
    ) -> Iterator[RequestContext]:
        """
        Context manager form of :meth:`run`.

        Args:
            context: Context to install. Built fresh when omitted.
            request_id: ID for the fresh context (generated when omitted)
        """
        if context is None:
            context = RequestContext(
                request_id=request_id or RequestContextManager.generate_id()
            )

        token = _request_context.set(context)
        try:
            yield context
        finally:
            _request_context.reset(token)

    @staticmethod
    def get_context() -> Optional[RequestContext]:
        """Get the ambient request context, or None outside any scope."""
        return _request_context.get()

    @staticmethod
    def get_request_id() -> Optional[str]:
        context = _request_context.get()
        return context.request_id if context else None

    @staticmethod
    def get_start_time() -> Optional[datetime]:
        context = _request_context.get()
        return context.start_time if context else None

    @staticmethod
    def bind_context(func: Callable[..., T]) -> Callable[..., T]:
        """
        Capture the current context for a call made on another execution unit.

        Thread pools and executors do not inherit the caller's context; wrap
        the submitted callable with this to hand the context over explicitly.
        When no context is active the function is returned unchanged.
        """
        context = _request_context.get()
        if context is None:
            return func

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            return RequestContextManager.run(context, func, *args, **kwargs)

        return wrapper
