"""Tests for log formatters"""

import json
from datetime import datetime

import pytest

from log_appender import BASIC_LOG_FORMATTER, BasicLogFormatter, LogLevel
from log_appender.core.log_record import LogRecord
from log_appender.formatters import Formatter, JSONFormatter, format_timestamp


def make_record(**overrides) -> LogRecord:
    fields = dict(
        level=LogLevel.INFO,
        message="hello",
        logger_name="app",
        time=datetime(2023, 1, 2, 3, 4, 5, 600000),
        sequence_number=7,
    )
    fields.update(overrides)
    return LogRecord(**fields)


class TestFormatTimestamp:
    """Test the yyMMdd HH:mm:ss.S timestamp rendering."""

    def test_default_precision(self):
        assert format_timestamp(datetime(2023, 1, 2, 3, 4, 5, 600000)) == "230102 03:04:05.6"

    def test_fraction_is_truncated(self):
        assert format_timestamp(datetime(2023, 1, 2, 3, 4, 5, 699999)) == "230102 03:04:05.6"

    def test_afternoon_uses_24_hour_clock(self):
        assert format_timestamp(datetime(1999, 12, 31, 23, 59, 59)) == "991231 23:59:59.0"

    def test_millisecond_precision(self):
        value = datetime(2023, 1, 2, 3, 4, 5, 123456)
        assert format_timestamp(value, fraction_digits=3) == "230102 03:04:05.123"

    @pytest.mark.parametrize("digits", [0, 7])
    def test_invalid_precision(self, digits):
        with pytest.raises(ValueError):
            format_timestamp(datetime.now(), fraction_digits=digits)


class TestBasicLogFormatter:
    """Test BasicLogFormatter output."""

    def test_plain_record(self):
        assert BASIC_LOG_FORMATTER.format(make_record()) == "230102 03:04:05.6 INFO 7 app hello"

    def test_error_suffix(self):
        output = BASIC_LOG_FORMATTER.format(make_record(error="boom"))
        assert output == "230102 03:04:05.6 INFO 7 app hello, error: boom"

    def test_stack_trace_suffix(self):
        output = BASIC_LOG_FORMATTER.format(make_record(stack_trace="at main()"))
        assert output.endswith(", stackTrace: at main()")
        assert ", error:" not in output

    def test_error_and_stack_trace(self):
        output = BASIC_LOG_FORMATTER.format(
            make_record(error=ValueError("bad"), stack_trace="at main()")
        )
        assert output == (
            "230102 03:04:05.6 INFO 7 app hello, error: bad, stackTrace: at main()"
        )

    def test_callable(self):
        record = make_record(level=LogLevel.WARN)
        assert BASIC_LOG_FORMATTER(record) == BASIC_LOG_FORMATTER.format(record)
        assert " WARN " in BASIC_LOG_FORMATTER(record)

    def test_instances_are_interchangeable(self):
        record = make_record()
        assert BasicLogFormatter().format(record) == BASIC_LOG_FORMATTER.format(record)

    def test_is_formatter(self):
        assert isinstance(BASIC_LOG_FORMATTER, Formatter)

    def test_repr(self):
        assert repr(BASIC_LOG_FORMATTER) == "BasicLogFormatter()"


class TestJSONFormatter:
    """Test JSONFormatter output."""

    def test_compact_output(self):
        output = JSONFormatter().format(make_record())
        data = json.loads(output)

        assert "\n" not in output
        assert data["level"] == "INFO"
        assert data["message"] == "hello"
        assert data["logger_name"] == "app"
        assert data["sequence_number"] == 7
        assert "error" not in data
        assert "stack_trace" not in data

    def test_error_included(self):
        data = json.loads(JSONFormatter().format(make_record(error=KeyError("k"))))
        assert data["error"] == "'k'"

    def test_indent(self):
        formatter = JSONFormatter(indent=2)
        assert "\n" in formatter.format(make_record())
        assert formatter.indent == 2

    def test_non_ascii(self):
        record = make_record(message="héllo")
        assert "héllo" in JSONFormatter().format(record)
        assert "\\u00e9" in JSONFormatter(ensure_ascii=True).format(record)


class TestCustomFormatter:
    """Test the abstract formatter contract."""

    def test_cannot_instantiate_base(self):
        with pytest.raises(TypeError):
            Formatter()

    def test_non_string_formatter(self):
        class LevelFormatter(Formatter[LogLevel]):
            def format(self, record):
                return record.level

        assert LevelFormatter()(make_record(level=LogLevel.ERROR)) is LogLevel.ERROR
