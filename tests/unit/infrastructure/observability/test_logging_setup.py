"""Tests for structured logging."""

import json
import logging

from seedshelf.infrastructure.observability.logging import (
    CompactExceptionFormatter,
    CorrelationIdFilter,
    CustomJsonFormatter,
    configure_logging,
    get_correlation_id,
    set_correlation_id,
)


class TestCorrelationId:
    """Test correlation ID functionality."""

    def test_set_and_get_correlation_id(self) -> None:
        """Test setting and getting correlation ID."""
        test_id = "test-123-abc"
        result = set_correlation_id(test_id)
        assert result == test_id
        assert get_correlation_id() == test_id

    def test_set_correlation_id_generates_uuid_when_none(self) -> None:
        """Test that setting None generates a UUID."""
        result = set_correlation_id(None)
        assert len(result) == 36
        assert get_correlation_id() == result

    def test_filter_injects_correlation_id(self) -> None:
        """Test the filter copies the context ID onto the record."""
        set_correlation_id("session-42")
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "session-42"


class TestLoggingConfiguration:
    """Test logging configuration."""

    def test_configure_logging_debug_level(self) -> None:
        """Test configuring logging with DEBUG level."""
        configure_logging(log_level="DEBUG", json_format=False, app_name="test-app")
        assert logging.getLogger("test").getEffectiveLevel() <= logging.DEBUG

    def test_configure_logging_info_level(self) -> None:
        """Test configuring logging with INFO level."""
        configure_logging(log_level="INFO", json_format=False, app_name="test-app")
        assert logging.getLogger("test").getEffectiveLevel() == logging.INFO

    def test_configure_logging_json_format(self) -> None:
        """Test JSON format installs the JSON formatter."""
        configure_logging(log_level="INFO", json_format=True, app_name="test-app")
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, CustomJsonFormatter)

    def test_configure_logging_text_format(self) -> None:
        """Test text format installs the compact formatter."""
        configure_logging(log_level="INFO", json_format=False, app_name="test-app")
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, CompactExceptionFormatter)

    def test_reconfigure_does_not_stack_handlers(self) -> None:
        """Test calling configure_logging twice keeps one handler."""
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1


class TestFormatters:
    """Test the custom formatters."""

    def test_json_formatter_fields(self) -> None:
        """Test JSON output carries level, logger and correlation ID."""
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
        record = logging.LogRecord("seedshelf.test", logging.WARNING, __file__, 7, "hello", None, None)
        record.correlation_id = "abc"

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "hello"
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "seedshelf.test"
        assert payload["correlation_id"] == "abc"

    def test_json_formatter_omits_empty_optional_fields(self) -> None:
        """Test records without correlation ID or exception stay lean."""
        formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
        record = logging.LogRecord("seedshelf.test", logging.INFO, __file__, 7, "plain", None, None)

        payload = json.loads(formatter.format(record))

        assert "correlation_id" not in payload
        assert "exc_info" not in payload
        assert "stack_info" not in payload

    def test_compact_exception_chain(self) -> None:
        """Test chained exceptions are listed root cause first."""
        try:
            try:
                raise KeyError("root")
            except KeyError as exc:
                raise ValueError("outer") from exc
        except ValueError as exc:
            text = CompactExceptionFormatter().formatException((type(exc), exc, exc.__traceback__))

        lines = [line for line in text.splitlines() if line.startswith("╰─►")]
        assert lines == ["╰─► KeyError: 'root'", "╰─► ValueError: outer"]
