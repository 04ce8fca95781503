"""Tests for structlog configuration."""

from __future__ import annotations

import pytest

from stocktake.core.logging_config import configure_logging, get_logger


def test_accepts_lowercase_level():
    configure_logging("warning")


def test_unknown_level_raises():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("bogus")


def test_events_go_to_stderr(capsys):
    configure_logging("INFO")
    get_logger("stocktake.test").info("report_stored", products=2)
    out, err = capsys.readouterr()
    assert out == ""
    assert "report_stored" in err
