"""Tests for diagnostic logging setup."""

import logging
import sys
from polylog.harness import Harness
from polylog.adapters import MemorySink
from polylog.logging_setup import configure_logging


class ShortSink(MemorySink):
    """Sink that never returns anything."""

    def read_all(self) -> list[str]:
        return []


def test_configure_logging_single_stderr_handler():
    """Repeated calls leave exactly one stderr handler."""
    configure_logging(logging.DEBUG)
    logger = configure_logging(logging.INFO)

    assert logger.name == "polylog"
    assert len(logger.handlers) == 1
    handler = logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr
    assert handler.level == logging.INFO
    assert logger.level == logging.INFO
    assert logger.propagate is False


def test_configure_logging_default_level():
    """Default level is WARNING."""
    logger = configure_logging()

    assert logger.level == logging.WARNING
    assert logger.handlers[0].level == logging.WARNING


def test_mismatch_warning_on_stderr(capsys):
    """Verification failures are logged to stderr with file:line."""
    configure_logging(logging.WARNING)
    harness = Harness()
    harness.add(ShortSink())

    harness.run(["a"])

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[WARNING] polylog.harness" in captured.err
    assert "ShortSink" in captured.err
    assert "(harness.py:" in captured.err


def test_success_logs_nothing_at_default_level(capsys):
    """A clean run emits no diagnostics."""
    configure_logging()
    harness = Harness()
    harness.add(MemorySink())

    harness.run(["a"])

    assert capsys.readouterr().err == ""


def test_mismatch_warning_record(caplog, monkeypatch):
    """The mismatch record carries WARNING level and the sink name."""
    monkeypatch.setattr(logging.getLogger("polylog"), "propagate", True)
    harness = Harness()
    harness.add(ShortSink())

    with caplog.at_level(logging.WARNING, logger="polylog.harness"):
        harness.run(["a"])

    assert any(
        record.levelname == "WARNING" and "ShortSink" in record.getMessage()
        for record in caplog.records
    )
