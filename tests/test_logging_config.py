"""Tests for arith logging setup."""

from __future__ import annotations

import io
import logging

from arith.logging_config import LOGGER_NAME, configure_logging


def test_configure_logging_verbose_writes_messages_to_stream() -> None:
    """Verbose mode should emit bare INFO messages to the given stream."""
    stream = io.StringIO()

    configure_logging(True, stream)
    logging.getLogger(LOGGER_NAME).info("Registered function %s()", "answer")

    assert stream.getvalue() == "Registered function answer()\n"


def test_configure_logging_quiet_drops_info() -> None:
    """Quiet mode should install no handlers and suppress INFO."""
    logger = logging.getLogger(LOGGER_NAME)

    configure_logging(True, io.StringIO())
    configure_logging(False)

    assert logger.handlers == []
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_configure_logging_replaces_previous_handler() -> None:
    """Reconfiguring should not duplicate handlers."""
    first = io.StringIO()
    second = io.StringIO()

    configure_logging(True, first)
    configure_logging(True, second)
    logging.getLogger(LOGGER_NAME).info("once")

    assert len(logging.getLogger(LOGGER_NAME).handlers) == 1
    assert first.getvalue() == ""
    assert second.getvalue() == "once\n"
