"""
Integration tests for request correlation across the inbound boundary,
logging and outbound calls.
"""

import io
import json
from unittest.mock import Mock, patch
from wsgiref.util import setup_testing_defaults

import pytest

from courier.core.config import LoggingConfig
from courier.core.correlation.middleware import RequestIdMiddleware
from courier.infrastructure.http import HttpClient, HttpRequestConfig
from courier.logging import configure_logging, get_logger


@pytest.fixture
def json_log_stream():
    """Route courier logs, JSON formatted, into a buffer."""
    stream = io.StringIO()
    with patch("courier.logging.manager.sys.stderr", stream):
        configure_logging(LoggingConfig(level="verbose", format="json"))
    return stream


def _entries(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines()]


@pytest.mark.integration
class TestRequestCorrelation:
    """One inbound request, one ID, everywhere."""

    def test_inbound_id_reaches_outbound_call_and_logs(self, http_server, json_log_stream):
        client = HttpClient(sleep=Mock())
        base = HttpRequestConfig(base_url=http_server.base_url)
        service_logger = get_logger("OrderService")

        def app(environ, start_response):
            service_logger.info("Creating order", metadata={"password": "hunter2", "sku": "A-1"})
            downstream = client.post("/echo", {"sku": "A-1"}, base)
            start_response("201 Created", [("Content-Type", "application/json")])
            return [json.dumps(downstream.data).encode()]

        environ = {"REQUEST_METHOD": "POST", "PATH_INFO": "/orders", "HTTP_X_REQUEST_ID": "req-e2e"}
        setup_testing_defaults(environ)
        start_response = Mock()

        result = RequestIdMiddleware(app)(environ, start_response)
        body = json.loads(b"".join(result))
        result.close()
        client.close()

        assert body["request_id"] == "req-e2e"
        assert ("x-request-id", "req-e2e") in start_response.call_args[0][1]

        entries = _entries(json_log_stream)
        assert {e.get("request_id") for e in entries} == {"req-e2e"}
        assert {e["context"] for e in entries} == {"HTTP", "OrderService", "HttpClient"}

        service_entry = next(e for e in entries if e["context"] == "OrderService")
        assert service_entry["metadata"] == {"password": "[REDACTED]", "sku": "A-1"}

        http_messages = [e["message"] for e in entries if e["level"] == "http"]
        assert http_messages == ["--> POST /orders", "<-- POST /orders 201"]

    def test_set_context_handles_are_independent(self, json_log_stream):
        base = get_logger()
        payments = base.set_context("Payments")

        payments.info("charged")
        base.info("plain")

        charged, plain = _entries(json_log_stream)
        assert charged["context"] == "Payments"
        assert "context" not in plain

    def test_level_threshold(self):
        stream = io.StringIO()
        with patch("courier.logging.manager.sys.stderr", stream):
            configure_logging(LoggingConfig(level="warn", format="json"))

        logger = get_logger("Svc")
        logger.info("dropped")
        logger.http("dropped")
        logger.warn("kept")
        logger.error("kept too")

        assert [e["message"] for e in _entries(stream)] == ["kept", "kept too"]
