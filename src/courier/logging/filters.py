"""
Logging filters.
"""

import logging

from courier.core.correlation.manager import RequestContextManager


class RequestContextFilter(logging.Filter):
    """Stamp the ambient request ID on every record.

    Handlers emit in the thread (and context) of the logging call, so the
    value read here is the one of the request that produced the record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = RequestContextManager.get_request_id()
        return True
