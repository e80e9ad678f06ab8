"""
Tests for the log level registry.
"""

import logging

import pytest

from courier.core.config import LogLevel
from courier.logging import HTTP, LEVELS, VERBOSE, level_name, to_level_number


@pytest.mark.unit
class TestLevels:
    """Test level ordering and name resolution."""

    def test_severity_order(self):
        numbers = list(LEVELS.values())
        assert numbers == sorted(numbers, reverse=True)
        assert list(LEVELS) == ["error", "warn", "info", "http", "debug", "verbose"]

    def test_custom_levels_registered(self):
        assert logging.getLevelName(HTTP) == "HTTP"
        assert logging.getLevelName(VERBOSE) == "VERBOSE"

    @pytest.mark.parametrize("level,expected", [
        ("error", logging.ERROR),
        ("WARN", logging.WARNING),
        (LogLevel.HTTP, HTTP),
        (LogLevel.VERBOSE, VERBOSE),
        (logging.INFO, logging.INFO),
    ])
    def test_to_level_number(self, level, expected):
        assert to_level_number(level) == expected

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            to_level_number("trace")

    @pytest.mark.parametrize("levelno,expected", [
        (logging.CRITICAL, "error"),
        (logging.WARNING, "warn"),
        (HTTP, "http"),
        (logging.DEBUG, "debug"),
        (VERBOSE, "verbose"),
        (1, "verbose"),
    ])
    def test_level_name(self, levelno, expected):
        assert level_name(levelno) == expected
