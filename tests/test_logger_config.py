"""
Unit tests for logging configuration.
"""
import logging
import os
from unittest.mock import patch
from logger_config import CorrelationIdFilter, LOGGER_NAMESPACE, get_logger


class TestGetLogger:
    """Tests for get_logger."""

    def test_namespaced_logger(self):
        logger = get_logger("tests.namespaced")
        assert logger.name == f"{LOGGER_NAMESPACE}.tests.namespaced"
        assert logger.propagate is False

    def test_single_handler(self):
        """Test repeated calls do not stack handlers."""
        first = get_logger("tests.single_handler")
        second = get_logger("tests.single_handler")
        assert first is second
        assert len(second.handlers) == 1

    @patch.dict(os.environ, {'LOG_LEVEL': 'DEBUG'})
    def test_level_from_environment(self):
        logger = get_logger("tests.debug_level")
        assert logger.level == logging.DEBUG


class TestCorrelationIdFilter:
    """Tests for CorrelationIdFilter."""

    def _record(self, **extra):
        record = logging.LogRecord("n", logging.INFO, __file__, 1, "msg", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_defaults_missing_id(self):
        record = self._record()
        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "-"

    def test_keeps_existing_id(self):
        record = self._record(correlation_id="abc")
        CorrelationIdFilter().filter(record)
        assert record.correlation_id == "abc"
