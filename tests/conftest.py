"""Shared fixtures for arith tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from arith.expression_language import Number, NumericFunction
from arith.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_arith_logger() -> Iterator[None]:
    """Undo logging changes made by --verbose runs."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def _clamp(value: Number, low: Number, high: Number) -> Number:
    return max(low, min(high, value))


@pytest.fixture
def math_functions() -> dict[str, NumericFunction]:
    """Registry with a handful of deterministic math helpers."""
    return {
        "max": lambda *args: max(args),
        "min": lambda *args: min(args),
        "abs": lambda x: abs(x),
        "add": lambda a, b: a + b,
        "pow": lambda base, exp: base**exp,
        "random": lambda: 42,
        "clamp": _clamp,
    }
