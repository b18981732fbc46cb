"""Tests for progress reporters and logging setup."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from redlist_ids.logging import configure_logging
from redlist_ids.reporting import LoggingReporter, NullReporter, default_reporter


class TestLoggingReporter:
    def test_checkpoints_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        reporter = LoggingReporter()
        with caplog.at_level(logging.INFO, logger="redlist_ids"):
            reporter.lookup_started("Panthera uncia")
            reporter.not_found("Foo bar")
            reporter.check_failed("0")
        messages = [r.getMessage() for r in caplog.records]
        assert messages[0] == "Retrieving data for taxon 'Panthera uncia'"
        assert "Foo bar" in messages[1]
        assert "'0'" in messages[2]

    def test_custom_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        reporter = LoggingReporter(logging.getLogger("custom"))
        with caplog.at_level(logging.INFO, logger="custom"):
            reporter.lookup_started("x")
        assert caplog.records[0].name == "custom"


def test_default_reporter() -> None:
    assert isinstance(default_reporter(), LoggingReporter)
    assert isinstance(default_reporter(verbose=False), NullReporter)


def test_null_reporter_is_silent(caplog: pytest.LogCaptureFixture) -> None:
    reporter = NullReporter()
    with caplog.at_level(logging.DEBUG):
        reporter.lookup_started("x")
        reporter.not_found("x")
        reporter.check_failed("1")
    assert caplog.records == []


def test_configure_logging_passes_level() -> None:
    with patch("redlist_ids.logging.logging.basicConfig") as mock_config:
        configure_logging(level=logging.WARNING, force=True)
    kwargs = mock_config.call_args.kwargs
    assert kwargs["level"] == logging.WARNING
    assert kwargs["force"] is True
    assert "%(name)s" in kwargs["format"]
