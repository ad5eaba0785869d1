"""Tests for structured error logging and classification."""

import logging
from unittest.mock import patch

import colorlog
import pytest

from irc_syntax.errors import (
    ConfigError,
    InternalError,
    MalformedLineError,
    TooFewItemsError,
)
from irc_syntax.errors.handling import classify_error, log_error
from irc_syntax.logging_config import (
    ErrorAggregator,
    LoggerConfigurator,
    error_aggregator,
    log_structured_error,
)


class TestClassifyError:
    @pytest.mark.parametrize(
        "error, expected",
        [
            (MalformedLineError("x", line=""), "malformed"),
            (TooFewItemsError("x", key=1, actual=0), "arity"),
            (ConfigError("x"), "config"),
            (InternalError("x"), "internal"),
            (OSError("x"), "io"),
            (RuntimeError("x"), "unknown"),
        ],
    )
    def test_categories(self, error, expected):
        assert classify_error(error) == expected


class TestLogError:
    def test_logs_and_aggregates(self, caplog):
        caplog.set_level(logging.ERROR)
        error = TooFewItemsError("Too few items", key=366, actual=1)
        log_error("Failed to parse line", error, context={"line_number": 3})

        message = caplog.records[-1].getMessage()
        assert message.startswith("[ARITY] Failed to parse line: Too few items")
        assert "key=366" in message
        assert "line_number=3" in message
        assert error_aggregator.get_error_summary()["arity"]["total_count"] == 1

    def test_internal_error_data_is_copied(self):
        data = {"a": 1}
        error = InternalError("x", data=data)
        data["a"] = 2
        assert error.data == {"a": 1}


class TestErrorAggregator:
    def test_caps_entries_per_type(self):
        aggregator = ErrorAggregator(max_per_type=2)
        for i in range(5):
            aggregator.record_error("arity", f"m{i}")
        summary = aggregator.get_error_summary()
        assert summary["arity"]["total_count"] == 2
        assert summary["arity"]["last_occurrence"]["message"] == "m4"

    def test_summary_report(self, caplog):
        caplog.set_level(logging.INFO)
        aggregator = ErrorAggregator()
        aggregator.log_summary_report()
        assert "No errors recorded" in caplog.text
        aggregator.record_error("malformed", "empty line")
        aggregator.log_summary_report()
        assert "malformed: 1 total" in caplog.text

    def test_structured_error_without_exception(self, caplog):
        caplog.set_level(logging.WARNING)
        log_structured_error("config", "bad value", level=logging.WARNING)
        assert caplog.records[-1].getMessage() == "[CONFIG] bad value"


class TestLoggerConfigurator:
    def test_configures_colorlog_handler(self, monkeypatch):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        monkeypatch.delenv("DEBUG", raising=False)
        root.handlers = []
        try:
            level = LoggerConfigurator({"debug": True}).configure()
            assert level == logging.DEBUG
            assert root.level == logging.DEBUG
            assert any(
                isinstance(h.formatter, colorlog.ColoredFormatter) for h in root.handlers
            )
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)

    def test_info_level_by_default(self, monkeypatch):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        monkeypatch.delenv("DEBUG", raising=False)
        root.handlers = []
        try:
            assert LoggerConfigurator().configure() == logging.INFO
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)

    def test_report_on_exit_registers_summary(self, monkeypatch, caplog):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        monkeypatch.delenv("DEBUG", raising=False)
        root.handlers = []
        try:
            with patch("irc_syntax.logging_config.atexit") as atexit_mock:
                LoggerConfigurator({"report_on_exit": True}).configure()
                LoggerConfigurator().configure()
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)
        atexit_mock.register.assert_called_once()
        report = atexit_mock.register.call_args.args[0]
        caplog.set_level(logging.INFO)
        report()
        assert "No errors recorded in current session" in caplog.text
