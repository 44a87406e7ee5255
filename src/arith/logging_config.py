"""Logging configuration for the arith CLI."""

from __future__ import annotations

import logging
import sys
from typing import TextIO


LOGGER_NAME = "arith"
LOG_FORMAT = "%(message)s"


def configure_logging(verbose: bool, stream: TextIO | None = None) -> None:
    """Configure logging output based on verbosity.

    Verbose logs go to stderr unless another stream is given, so results
    printed to stdout (`--out json` in particular) stay machine readable.

    Args:
        verbose: Whether to enable INFO logging
        stream: Destination for log records, stderr when omitted
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    logger.handlers.clear()

    if not verbose:
        logger.setLevel(logging.WARNING)
        return

    logger.setLevel(logging.INFO)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
