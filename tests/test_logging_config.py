"""Tests for logging configuration and formatters."""

import io
import json
import logging

import pytest

from cv_normalizer.config.models import LoggingConfig
from cv_normalizer.logging import ComponentLoggerAdapter, get_logger
from cv_normalizer.logging.config import (
    ContextualFilter,
    JSONFormatter,
    KeyValueFormatter,
    configure_logging,
)
from cv_normalizer.logging.context import clear_log_context, log_context


@pytest.fixture(autouse=True)
def clean_context():
    """Clear logging context before and after each test."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def logger():
    """Create a test logger with handler for capturing output."""
    test_logger = logging.getLogger("test_logger")
    test_logger.setLevel(logging.DEBUG)
    test_logger.handlers.clear()

    yield test_logger

    test_logger.handlers.clear()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after configure_logging."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_basic(logger):
    """Test JSONFormatter produces valid JSON with mandatory fields."""
    formatter = JSONFormatter()
    record = logger.makeRecord("test", logging.INFO, "test.py", 1, "Test message", (), None)

    log_obj = json.loads(formatter.format(record))

    assert log_obj["level"] == "INFO"
    assert log_obj["message"] == "Test message"
    assert log_obj["logger"] == "test"
    assert "timestamp" in log_obj


def test_json_formatter_with_extra_fields(logger):
    """Test JSONFormatter includes extra fields."""
    formatter = JSONFormatter()
    record = logger.makeRecord(
        "test",
        logging.INFO,
        "test.py",
        1,
        "Test message",
        (),
        None,
        extra={"event": "normalization.section.unknown_shape", "skipped": 2, "flag": True},
    )

    log_obj = json.loads(formatter.format(record))

    assert log_obj["event"] == "normalization.section.unknown_shape"
    assert log_obj["skipped"] == 2
    assert log_obj["flag"] is True
    assert "name" not in log_obj


def test_timestamp_format_in_json(logger):
    """Test that JSON formatter produces ISO-8601 UTC timestamps."""
    record = logger.makeRecord("test", logging.INFO, "test.py", 1, "Test message", (), None)

    timestamp = json.loads(JSONFormatter().format(record))["timestamp"]

    assert timestamp.endswith("Z")
    assert "T" in timestamp
    assert len(timestamp) == 24  # 2025-11-04T10:30:00.123Z


def test_contextual_filter_adds_static_and_context_fields(logger):
    """Test ContextualFilter adds service, environment and context fields."""
    log_filter = ContextualFilter(service="test-service", environment="test")

    with log_context(normalization_id="abc123", category="skills"):
        record = logger.makeRecord("test", logging.INFO, "test.py", 1, "Test message", (), None)
        log_filter.filter(record)

    assert record.service == "test-service"
    assert record.environment == "test"
    assert record.normalization_id == "abc123"
    assert record.category == "skills"


def test_explicit_extra_wins_over_context(logger):
    """Test a field passed via extra is not overwritten by the context."""
    log_filter = ContextualFilter()

    with log_context(category="skills"):
        record = logger.makeRecord(
            "test", logging.INFO, "test.py", 1, "msg", (), None, extra={"category": "education"}
        )
        log_filter.filter(record)

    assert record.category == "education"


def test_key_value_formatter_with_extras(logger):
    """Test KeyValueFormatter includes extra fields as key=value pairs."""
    formatter = KeyValueFormatter("%(levelname)s %(name)s: %(message)s")
    record = logger.makeRecord(
        "test",
        logging.INFO,
        "test.py",
        1,
        "Normalized profile",
        (),
        None,
        extra={"event": "normalization.profile.normalized", "note": "two words", "ok": True},
    )

    output = formatter.format(record)

    assert output.startswith("INFO test: Normalized profile")
    assert "event=normalization.profile.normalized" in output
    assert 'note="two words"' in output
    assert "ok=true" in output


def test_configure_logging_invalid_level():
    """Test configure_logging rejects invalid log level."""
    with pytest.raises(ValueError, match="Invalid log level"):
        configure_logging(LoggingConfig.model_construct(level="LOUD", format="json"))


def test_configure_logging_invalid_format():
    """Test configure_logging rejects invalid format type."""
    with pytest.raises(ValueError, match="Invalid log format"):
        configure_logging(LoggingConfig.model_construct(level="INFO", format="xml"))


def test_configure_logging_json_format(restore_root_logger):
    """Test configure_logging with JSON format writes JSON lines."""
    stream = io.StringIO()
    configure_logging(LoggingConfig(level="DEBUG", format="json"), environment="test", stream=stream)

    assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)
    assert restore_root_logger.level == logging.DEBUG

    first_line = json.loads(stream.getvalue().splitlines()[0])
    assert first_line["event"] == "logging.configured"
    assert first_line["service"] == "cv-normalizer"
    assert first_line["environment"] == "test"


def test_configure_logging_key_value_format(restore_root_logger):
    """Test configure_logging with key-value format (the default)."""
    configure_logging(stream=io.StringIO())

    assert isinstance(restore_root_logger.handlers[0].formatter, KeyValueFormatter)
    assert restore_root_logger.level == logging.INFO


def test_get_logger_with_component():
    """Test get_logger tags records with the component."""
    adapter = get_logger("cv_normalizer.test", component="aggregator")

    assert isinstance(adapter, ComponentLoggerAdapter)
    msg, kwargs = adapter.process("hello", {"extra": {"event": "x"}})
    assert kwargs["extra"] == {"component": "aggregator", "event": "x"}


def test_get_logger_without_component():
    """Test get_logger returns a plain logger when no component is given."""
    assert isinstance(get_logger("cv_normalizer.test"), logging.Logger)
