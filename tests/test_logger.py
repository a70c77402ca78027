"""Tests for layerenv.logger module."""

import io
import json
import logging
import os
from pathlib import Path
from unittest import mock

import pytest

from layerenv.logger import (
    Logger,
    StreamLogger,
    StructuredLogger,
    create_logger,
    get_logger,
    reset_loggers,
)


@pytest.fixture(autouse=True)
def _fresh_loggers():
    reset_loggers()
    yield
    reset_loggers()


class TestLoggerInterface:
    """Tests for the Logger abstract interface."""

    def test_logger_is_abstract(self):
        """Test that Logger cannot be instantiated directly."""
        with pytest.raises(TypeError):
            Logger()  # type: ignore

    @pytest.mark.parametrize("method", ["debug", "info", "warning", "error", "critical", "get_session_id"])
    def test_logger_has_required_methods(self, method):
        """Test that Logger defines all required abstract methods."""
        assert hasattr(Logger, method)


class TestStreamLogger:
    """Tests for the StreamLogger implementation."""

    def test_creates_full_session_id(self):
        """Test that StreamLogger creates a UUID session ID."""
        assert len(StreamLogger(output=io.StringIO()).get_session_id()) == 36

    def test_writes_level_message_and_fields(self):
        """Test that output includes level, message and keyword fields."""
        output = io.StringIO()
        logger = StreamLogger(name="test-stream", output=output)
        logger.info("Loaded env", sources=2, entries=5)

        line = output.getvalue()
        assert "[INFO]" in line
        assert "[test-stream]" in line
        assert "Loaded env" in line
        assert "(sources=2 entries=5)" in line
        assert logger.get_session_id()[:8] in line

    def test_can_disable_timestamp(self):
        """Test that output starts with the level without timestamps."""
        output = io.StringIO()
        StreamLogger(output=output, include_timestamp=False).warning("careful")
        assert output.getvalue().startswith("[WARNING]")

    def test_level_threshold(self):
        """Test that messages below the threshold are dropped."""
        output = io.StringIO()
        logger = StreamLogger(output=output, level="WARNING")
        logger.debug("hidden debug")
        logger.info("hidden info")
        logger.error("shown error")

        text = output.getvalue()
        assert "hidden" not in text
        assert "shown error" in text

    def test_all_levels(self):
        """Test that all log levels work."""
        output = io.StringIO()
        logger = StreamLogger(output=output)
        for method in ("debug", "info", "warning", "error", "critical"):
            getattr(logger, method)(f"{method} message")

        text = output.getvalue()
        for level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            assert f"[{level}]" in text


class TestStructuredLogger:
    """Tests for the StructuredLogger implementation."""

    def test_creates_short_session_id(self):
        """Test that StructuredLogger creates a truncated session ID."""
        logger = StructuredLogger(name="test-structured")
        assert len(logger.get_session_id()) == 8

    def test_default_level_is_warning(self):
        """Test that the library logger is quiet by default."""
        assert StructuredLogger(name="test-default-level").level == logging.WARNING

    def test_text_format(self, capsys):
        """Test that StructuredLogger outputs text format by default."""
        logger = StructuredLogger(name="test-text", level=logging.INFO)
        logger.info("Test message", source=".env")

        captured = capsys.readouterr()
        assert "INFO" in captured.err
        assert "Test message" in captured.err
        assert "test-text" in captured.err
        assert "source=.env" in captured.err

    def test_json_format(self, capsys):
        """Test that StructuredLogger can output JSON with extra fields."""
        logger = StructuredLogger(name="test-json", level=logging.INFO, json_format=True)
        logger.info("Merged env sources", sources=3, entries=12)

        log_entry = json.loads(capsys.readouterr().err.strip())
        assert log_entry["level"] == "INFO"
        assert log_entry["message"] == "Merged env sources"
        assert log_entry["logger"] == "test-json"
        assert log_entry["sources"] == 3
        assert log_entry["entries"] == 12
        assert "session_id" in log_entry

    def test_reserved_kwargs_are_prefixed(self, capsys):
        """Test that reserved LogRecord names do not break logging."""
        logger = StructuredLogger(name="test-reserved", level=logging.INFO, json_format=True)
        logger.info("Test", name="PORT")

        log_entry = json.loads(capsys.readouterr().err.strip())
        assert log_entry["_name"] == "PORT"

    def test_file_output(self, tmp_path: Path):
        """Test that StructuredLogger can write to a file."""
        log_file = tmp_path / "layerenv.log"
        logger = StructuredLogger(name="test-file", log_file=str(log_file))
        logger.warning("File test message")

        assert "File test message" in log_file.read_text()

    def test_bad_log_file_falls_back_to_console(self, tmp_path: Path, capsys):
        """Test that an unusable log file only prints a notice."""
        logger = StructuredLogger(name="test-bad-file", log_file=str(tmp_path / "missing" / "x.log"))
        logger.warning("still logged")

        err = capsys.readouterr().err
        assert "Failed to setup log file" in err
        assert "still logged" in err

    def test_reinitialising_does_not_duplicate(self, capsys):
        """Test that a second instance replaces the handlers."""
        StructuredLogger(name="test-dup")
        logger = StructuredLogger(name="test-dup")
        logger.warning("once")

        assert capsys.readouterr().err.count("once") == 1


class TestLoggerFactoryFunctions:
    """Tests for create_logger and get_logger factory functions."""

    def test_create_logger_returns_logger(self):
        """Test that create_logger returns a Logger instance."""
        assert isinstance(create_logger(name="test-factory"), Logger)

    def test_create_logger_respects_level(self, capsys):
        """Test that create_logger respects the level parameter."""
        logger = create_logger(name="test-level-factory", level=logging.ERROR)
        logger.warning("Should not appear")
        logger.error("Should appear")

        err = capsys.readouterr().err
        assert "Should not appear" not in err
        assert "Should appear" in err

    def test_create_logger_reads_env_level(self, capsys):
        """Test that the level is read from {PREFIX}_LOG_LEVEL."""
        with mock.patch.dict(os.environ, {"TEST_PROJECT_LOG_LEVEL": "DEBUG"}):
            logger = create_logger("test-project")
            logger.debug("Debug appears")

        assert "Debug appears" in capsys.readouterr().err

    def test_create_logger_reads_env_json(self, capsys):
        """Test that JSON format is read from {PREFIX}_LOG_JSON."""
        with mock.patch.dict(os.environ, {"TEST_JSON_ENV_LOG_JSON": "true"}):
            logger = create_logger("test-json-env")
            logger.warning("JSON env test")

        log_entry = json.loads(capsys.readouterr().err.strip())
        assert log_entry["message"] == "JSON env test"

    def test_default_level_is_warning(self, capsys):
        """Test that info is suppressed by default."""
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop("TEST_DEFAULT_LEVEL_LOG_LEVEL", None)
            logger = create_logger("test-default-level")
        logger.info("Info should not appear")
        logger.warning("Warning should appear")

        err = capsys.readouterr().err
        assert "Info should not appear" not in err
        assert "Warning should appear" in err

    def test_get_logger_is_cached(self):
        """Test that get_logger returns the same instance per name."""
        assert get_logger("test-cached") is get_logger("test-cached")
        assert get_logger("test-cached") is not get_logger("test-other")

    def test_reset_loggers(self):
        """Test that reset_loggers forgets cached instances."""
        first = get_logger("test-reset")
        reset_loggers()
        assert get_logger("test-reset") is not first
