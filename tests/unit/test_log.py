"""Unit tests for logging setup."""

import json
import logging
import sys

import pytest

from datatypes.collections import Stack
from datatypes.exceptions import ParameterOutOfRangeError
from datatypes.log import DatatypesJSONFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestJSONFormatter:
    """Test the JSON formatter."""

    def test_includes_extra_fields(self):
        """Test extra fields end up in the JSON object."""
        record = logging.LogRecord("datatypes.test", logging.INFO, __file__, 1, "hello", None, None)
        record.entity_id = 5
        data = json.loads(DatatypesJSONFormatter().format(record))
        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["logger"] == "datatypes.test"
        assert data["entity_id"] == 5

    def test_exception_info(self):
        """Test exceptions are serialized."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "datatypes.test", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )
        data = json.loads(DatatypesJSONFormatter().format(record))
        assert data["exception"]["type"] == "ValueError"
        assert data["exception"]["message"] == "boom"


class TestSetupLogging:
    """Test root logger configuration."""

    def test_json_handler(self, restore_root_logger):
        """Test a single console handler with the JSON formatter is installed."""
        setup_logging("DEBUG", "json")
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, DatatypesJSONFormatter)

    def test_file_handler(self, restore_root_logger, tmp_path):
        """Test a file handler is added when a path is given."""
        log_file = tmp_path / "datatypes.log"
        setup_logging("INFO", "text", str(log_file))
        assert len(restore_root_logger.handlers) == 2
        for handler in restore_root_logger.handlers:
            handler.close()

    def test_library_warnings_are_logged(self, caplog):
        """Test rejected pushes are logged as warnings."""
        stack = Stack(["a"], capacity=1)
        with caplog.at_level(logging.WARNING, logger="datatypes"):
            with pytest.raises(ParameterOutOfRangeError):
                stack.push("b")
        assert "capacity reached" in caplog.text
