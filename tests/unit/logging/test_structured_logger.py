"""
Tests for StructuredLogger.
"""

import logging
import threading
from dataclasses import dataclass

import pytest

from courier.core.correlation import RequestContext, RequestContextManager
from courier.logging import HTTP, VERBOSE, StructuredFormatter, StructuredLogger, get_logger
from courier.logging.loggers import ROOT_LOGGER_NAME


@pytest.mark.unit
class TestStructuredLogger:
    """Test leveled logging, context labels and metadata handling."""

    @pytest.mark.parametrize("method,levelno", [
        ("error", logging.ERROR),
        ("warn", logging.WARNING),
        ("info", logging.INFO),
        ("http", HTTP),
        ("debug", logging.DEBUG),
        ("verbose", VERBOSE),
    ])
    def test_level_methods(self, log_records, method, levelno):
        getattr(StructuredLogger(), method)("hello")

        record = log_records.records[-1]
        assert record.levelno == levelno
        assert record.getMessage() == "hello"

    def test_set_context_returns_independent_handle(self, log_records):
        base = get_logger()
        bound = base.set_context("Svc")

        bound.info("x")
        base.info("y")

        first, second = log_records.records
        assert bound is not base
        assert base.context is None
        assert first.context == "Svc"
        assert second.context is None

    def test_handles_share_the_sink(self):
        base = get_logger()
        assert base.set_context("A").logger is base.logger

    def test_metadata_is_sanitized(self, log_records):
        get_logger().debug("login", metadata={"user": "alice", "password": "x"})

        assert log_records.records[-1].metadata == {"user": "alice", "password": "[REDACTED]"}

    def test_structured_metadata_does_not_leak_secrets(self, log_records):
        @dataclass
        class User:
            name: str
            password: str

        get_logger("Auth").info("login", metadata={"user": User("bob", "hunter2")})

        output = StructuredFormatter().format(log_records.records[-1])
        assert "hunter2" not in output
        assert log_records.records[-1].metadata == {"user": {"name": "bob", "password": "[REDACTED]"}}

    def test_cyclic_metadata_does_not_raise(self, log_records):
        meta = {"a": 1}
        meta["self"] = meta

        get_logger("Svc").info("cyclic", metadata=meta)

        assert log_records.records[-1].metadata == {"a": 1, "self": "[Circular]"}

    def test_concurrent_scopes_stamp_their_own_request_id(self, log_records):
        logger = get_logger("Worker")
        barrier = threading.Barrier(2)

        def handle(expected):
            barrier.wait()
            for step in range(5):
                logger.info(f"step {step}", metadata={"expected": expected})

        threads = [
            threading.Thread(
                target=RequestContextManager.run, args=(RequestContext(request_id=rid), handle, rid)
            )
            for rid in ("req-A", "req-B")
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(log_records.records) == 10
        for record in log_records.records:
            assert record.request_id == record.metadata["expected"]
        assert {r.request_id for r in log_records.records} == {"req-A", "req-B"}

    def test_trace_attached(self, log_records):
        get_logger().error("failed", trace="Traceback (most recent call last): ...")

        assert log_records.records[-1].trace.startswith("Traceback")

    def test_request_id_stamped_from_context(self, log_records):
        logger = get_logger("Svc")

        with RequestContextManager.scope(request_id="req-9"):
            logger.info("inside")
        logger.info("outside")

        inside, outside = log_records.records
        assert inside.request_id == "req-9"
        assert outside.request_id is None

    def test_records_below_threshold_are_dropped(self, log_records):
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.INFO)

        logger = get_logger()
        logger.debug("hidden")
        logger.http("hidden too")
        logger.info("shown")

        assert log_records.messages() == ["shown"]

    def test_log_method_with_one_off_context(self, log_records):
        logger = get_logger("Default")

        logger.log("compat message", context="Override")
        logger.log("plain")

        first, second = log_records.records
        assert first.levelno == logging.INFO
        assert first.context == "Override"
        assert second.context == "Default"

    def test_repr(self):
        assert repr(get_logger("Svc")) == "StructuredLogger(name='courier', context='Svc')"
