"""
Application-wide constants for Courier.

This module contains defaults and protocol constants shared by the
correlation, logging and HTTP components.
"""

# File size constants (bytes)
BYTES_PER_MB = 1024 * 1024

# Correlation
REQUEST_ID_HEADER = "x-request-id"

# HTTP client defaults (milliseconds where applicable)
DEFAULT_HTTP_TIMEOUT_MS = 30000
DEFAULT_HTTP_RETRIES = 3
DEFAULT_HTTP_RETRY_DELAY_MS = 1000
DEFAULT_HTTP_POOL_MAXSIZE = 10
DEFAULT_CONTENT_TYPE = "application/json"

# HTTP status codes
HTTP_STATUS_BAD_REQUEST = 400
HTTP_STATUS_TOO_MANY_REQUESTS = 429
HTTP_STATUS_INTERNAL_SERVER_ERROR = 500

# Logging defaults
DEFAULT_APP_NAME = "courier"
DEFAULT_LOG_DIRECTORY = "logs"
DEFAULT_LOG_FILE_SIZE_BYTES = 20 * BYTES_PER_MB
MIN_LOG_FILE_SIZE_BYTES = BYTES_PER_MB
DEFAULT_LOG_RETENTION_DAYS = 14
DEFAULT_ERROR_LOG_RETENTION_DAYS = 30
PRETTY_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Redaction
REDACTED = "[REDACTED]"
CIRCULAR = "[Circular]"
