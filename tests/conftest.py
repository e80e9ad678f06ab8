"""
Pytest configuration and shared fixtures for Courier tests.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import pytest
import requests

from courier.logging import LoggingManager, RequestContextFilter, ROOT_LOGGER_NAME, VERBOSE

COURIER_ENV_VARS = (
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_TO_FILE",
    "LOG_DIRECTORY",
    "APP_NAME",
    "HTTP_TIMEOUT",
    "HTTP_RETRIES",
    "HTTP_RETRY_DELAY",
)


class RecordingHandler(logging.Handler):
    """Handler that keeps emitted records in memory."""

    def __init__(self):
        super().__init__(level=VERBOSE)
        self.records: List[logging.LogRecord] = []
        self.addFilter(RequestContextFilter())

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def at(self, levelno: int) -> List[logging.LogRecord]:
        return [r for r in self.records if r.levelno == levelno]

    def messages(self, levelno: Optional[int] = None) -> List[str]:
        return [
            r.getMessage() for r in self.records if levelno is None or r.levelno == levelno
        ]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove Courier environment overrides so tests see model defaults."""
    for name in COURIER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Leave the courier logger tree as a fresh process would have it."""
    yield
    manager = LoggingManager()
    manager.reset()
    manager.config = None
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def log_records():
    """Capture everything logged under the courier logger, down to verbose."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handler = RecordingHandler()
    previous_level = logger.level
    logger.setLevel(VERBOSE)
    logger.addHandler(handler)
    yield handler
    logger.removeHandler(handler)
    logger.setLevel(previous_level)


@pytest.fixture
def make_response():
    """Build real requests.Response objects without a network."""

    def _make(
        status: int = 200,
        body: Any = None,
        text: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        reason: str = "OK",
        url: str = "https://api.example.com/resource",
    ) -> requests.Response:
        response = requests.Response()
        response.status_code = status
        response.reason = reason
        response.url = url
        if text is not None:
            response._content = text.encode("utf-8")
        elif body is not None:
            response._content = json.dumps(body).encode("utf-8")
            response.headers["Content-Type"] = "application/json"
        else:
            response._content = b""
        response.headers.update(headers or {})
        return response

    return _make


@pytest.fixture
def sample_config_data():
    """Sample TOML-shaped configuration data for testing."""
    return {
        "logging": {
            "level": "info",
            "format": "json",
            "app_name": "billing",
        },
        "http": {
            "timeout": 5000,
            "retries": 2,
            "retry_delay": 250,
        },
    }
