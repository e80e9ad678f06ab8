"""
Request correlation for Courier.

Key Features:
- ContextVar-backed request context (thread, asyncio task and scope isolated)
- run/scope helpers to establish a context for a dynamic extent
- Explicit hand-off of the context to thread pools via bind_context
- Decorator for jobs that start outside an inbound request

Usage:
    from courier.core.correlation import RequestContext, RequestContextManager

    context = RequestContext(request_id="req-123")
    RequestContextManager.run(context, handle_request)

    with RequestContextManager.scope() as context:
        RequestContextManager.get_request_id()  # == context.request_id

The WSGI boundary lives in ``courier.core.correlation.middleware``.
"""

from .decorators import with_request_context
from .manager import RequestContext, RequestContextManager

get_context = RequestContextManager.get_context
get_request_id = RequestContextManager.get_request_id
get_start_time = RequestContextManager.get_start_time
bind_context = RequestContextManager.bind_context

__all__ = [
    "RequestContext",
    "RequestContextManager",
    "with_request_context",
    "get_context",
    "get_request_id",
    "get_start_time",
    "bind_context",
]
