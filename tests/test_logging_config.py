"""Tests for logging configuration."""

from __future__ import annotations

import io
import json
import logging
import sys

import pytest

from bufrepl.logging_config import JsonFormatter, configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_logger(monkeypatch):
    """Put the package logger back the way it was."""
    for name in ("BUFREPL_LOG_LEVEL", "BUFREPL_LOG_FORMAT", "BUFREPL_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    logger = logging.getLogger("bufrepl")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_text_output(self):
        stream = io.StringIO()
        configure_logging(level="DEBUG", stream=stream, force=True)

        get_logger("bufrepl.core.evaluator").debug("evaluated to %s", "int")
        line = stream.getvalue()
        assert "bufrepl.core.evaluator - DEBUG - evaluated to int" in line

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("BUFREPL_LOG_LEVEL", "error")
        configure_logging(stream=io.StringIO(), force=True)
        assert logging.getLogger("bufrepl").level == logging.ERROR

    def test_default_level_warning(self):
        configure_logging(stream=io.StringIO(), force=True)
        assert logging.getLogger("bufrepl").level == logging.WARNING

    def test_second_call_ignored(self):
        first = io.StringIO()
        configure_logging(level="INFO", stream=first, force=True)
        configure_logging(level="DEBUG", stream=io.StringIO())

        logger = logging.getLogger("bufrepl")
        assert logger.level == logging.INFO
        assert logger.handlers[0].stream is first

    def test_console_disabled(self):
        configure_logging(stream=False, force=True)
        handlers = logging.getLogger("bufrepl").handlers
        assert [type(h) for h in handlers] == [logging.NullHandler]

    def test_file_output(self, tmp_path):
        log_file = tmp_path / "bufrepl.log"
        configure_logging(level="INFO", file_path=str(log_file), stream=False, force=True)

        get_logger("bufrepl.test").info("to file")
        for handler in logging.getLogger("bufrepl").handlers:
            handler.close()
        assert "to file" in log_file.read_text()

    def test_json_output(self):
        stream = io.StringIO()
        configure_logging(level="INFO", format="json", stream=stream, force=True)

        get_logger("bufrepl.test").info("hello", extra={"snippet": "1+1"})
        data = json.loads(stream.getvalue())
        assert data["level"] == "INFO"
        assert data["logger"] == "bufrepl.test"
        assert data["message"] == "hello"
        assert data["extra"] == {"snippet": "1+1"}


class TestJsonFormatter:
    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "bufrepl", logging.ERROR, __file__, 1, "failed", None, exc_info=sys.exc_info()
            )
        data = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in data["exception"]
        assert "extra" not in data
