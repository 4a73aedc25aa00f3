"""Unit tests for the flow notification tasks."""

import logging

import pytest

from flows.utils.notifications import log_error, log_info, log_warning

LOGGER = "flows.utils.notifications"


class TestNotifications:
    """Test message formatting, log levels and failure behavior."""

    def test_info_with_context(self, caplog, capsys):
        """Verify info lines carry the context and are echoed to the console."""
        caplog.set_level(logging.INFO, logger=LOGGER)
        log_info.fn("Assigned screeners", context={"assigned_rows": 5})

        record = caplog.records[-1]
        assert record.levelno == logging.INFO
        assert record.getMessage() == "INFO: Assigned screeners | Context: {'assigned_rows': 5}"
        assert "✓ INFO: Assigned screeners" in capsys.readouterr().out

    def test_warning_without_context(self, caplog):
        """Verify a warning without context has no Context suffix."""
        caplog.set_level(logging.INFO, logger=LOGGER)
        log_warning.fn("No assignees for JP bucket")

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "WARNING: No assignees for JP bucket"

    def test_error_raises(self, caplog):
        """Verify log_error logs at ERROR and raises with the formatted message."""
        caplog.set_level(logging.INFO, logger=LOGGER)
        with pytest.raises(RuntimeError, match=r"ERROR: Raw Data file is empty"):
            log_error.fn("Raw Data file is empty or corrupted.", context={"error_type": "EmptySheetError"})

        assert caplog.records[-1].levelno == logging.ERROR
