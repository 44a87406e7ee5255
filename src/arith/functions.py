"""Builtin and config-defined functions for expression evaluation."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from arith.expression_language import FunctionRegistry, Number, NumericFunction
from arith.expression_language.compiler import compile_expression_text


logger = logging.getLogger("arith")


def _func_abs(value: Number) -> Number:
    """Return the absolute value."""
    return abs(value)


def _func_max(*values: Number) -> Number:
    """Return the largest argument."""
    return max(values)


def _func_min(*values: Number) -> Number:
    """Return the smallest argument."""
    return min(values)


def _func_sum(*values: Number) -> Number:
    """Return the sum of all arguments (0 when called without any)."""
    return sum(values)


def _func_pow(base: Number, exponent: Number) -> Number:
    """Raise base to a non-negative exponent."""
    if exponent < 0:
        raise ValueError("pow exponent must be non-negative")
    return base**exponent


def _func_clamp(value: Number, low: Number, high: Number) -> Number:
    """Limit value to the closed range [low, high]."""
    if low > high:
        raise ValueError("clamp lower bound exceeds upper bound")
    return max(low, min(high, value))


def _func_sign(value: Number) -> int:
    """Return -1, 0 or 1 depending on the sign of value."""
    return (value > 0) - (value < 0)


BUILTIN_FUNCTIONS: dict[str, NumericFunction] = {
    "abs": _func_abs,
    "clamp": _func_clamp,
    "max": _func_max,
    "min": _func_min,
    "pow": _func_pow,
    "sign": _func_sign,
    "sum": _func_sum,
}


def expression_function(name: str, text: str, functions: FunctionRegistry) -> NumericFunction:
    """Build a zero-argument function from expression text.

    The text is parsed once; each call evaluates it against `functions`.

    Raises:
        ExpressionError: If the text cannot be lexed or parsed
    """
    compiled = compile_expression_text(text)

    def _function(*args: Number) -> Number:
        if args:
            raise TypeError(f"{name}() takes no arguments ({len(args)} given)")
        return compiled(functions)

    return _function


def build_registry(use_builtins: bool, custom: Mapping[str, str]) -> dict[str, NumericFunction]:
    """Merge builtin functions with expression-defined custom functions.

    Custom functions may call builtins and custom functions defined before
    them, in mapping order. A custom name shadows a builtin of the same name.
    """
    registry: dict[str, NumericFunction] = dict(BUILTIN_FUNCTIONS) if use_builtins else {}
    for name, text in custom.items():
        registry[name] = expression_function(name, text, dict(registry))
        logger.info("Registered function %s() = %s", name, text)
    return registry
