"""
Request context decorators.

Provides decorators for running functions inside a request context, for code
that starts outside any inbound request (background jobs, scheduled tasks,
scripts) but still wants correlated logs and outbound headers.
"""

import functools
import inspect
from typing import Callable, Optional

from .manager import RequestContext, RequestContextManager


def with_request_context(request_id: Optional[str] = None, reuse_existing: bool = True):
    """
    Decorator to run a function inside a request context.

    Args:
        request_id: Fixed request ID to use (generated per call when None)
        reuse_existing: Keep the caller's context when one is already active
    """

    def decorator(func: Callable) -> Callable:
        def _context() -> Optional[RequestContext]:
            if reuse_existing and RequestContextManager.get_context() is not None:
                return None
            return RequestContext(
                request_id=request_id or RequestContextManager.generate_id()
            )

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                context = _context()
                if context is None:
                    return await func(*args, **kwargs)
                return await RequestContextManager.run(context, func, *args, **kwargs)

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            context = _context()
            if context is None:
                return func(*args, **kwargs)
            return RequestContextManager.run(context, func, *args, **kwargs)

        return wrapper

    return decorator
