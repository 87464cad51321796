"""Tests for structlog configuration."""

import json
import logging

import structlog

from solid_app.logging.config import configure_logging, get_logger, get_principle_logger
import solid_app.logging


class TestLoggingConfig:
    """Test logging setup helpers."""

    def teardown_method(self):
        configure_logging(level="WARNING", cache_logger_on_first_use=False)

    def test_json_output(self, caplog):
        """Test that JSON rendering produces parseable records."""
        configure_logging(level="DEBUG", format_json=True, cache_logger_on_first_use=False)

        with caplog.at_level(logging.DEBUG):
            get_logger("solid_app.test").info("hello", answer=42)

        record = json.loads(caplog.records[-1].getMessage())
        assert record["event"] == "hello"
        assert record["answer"] == 42
        assert record["level"] == "info"

    def test_principle_binding(self):
        """Test that principle loggers carry the principle name."""
        with structlog.testing.capture_logs() as logs:
            get_principle_logger("solid_app.test", "open_closed").info("bound")

        assert logs[0]["principle"] == "open_closed"

    def test_package_exports(self):
        """Test that the logging package re-exports every helper."""
        assert solid_app.logging.get_principle_logger is get_principle_logger
        assert "get_principle_logger" in solid_app.logging.__all__
