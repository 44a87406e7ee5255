"""Tree-walking evaluation of arithmetic expression ASTs."""

from __future__ import annotations

from typing_extensions import TypeAliasType

import logging
from collections.abc import Mapping
from math import isfinite, trunc
from typing import Protocol, assert_never

from arith.expression_language.ast import (
    BinaryOp,
    BinaryOperator,
    FunctionCall,
    IntegerLiteral,
    Node,
    UnaryOp,
)
from arith.expression_language.errors import (
    DivisionByZeroError,
    EvaluationError,
    FunctionInvocationError,
    UnknownFunctionError,
)
from arith.expression_language.numbers import Number, format_number


class NumericFunction(Protocol):
    """Registry function interface."""

    def __call__(self, *args: Number) -> Number:
        """Compute a number from positional numeric arguments."""
        ...


FunctionRegistry = TypeAliasType("FunctionRegistry", Mapping[str, NumericFunction])


logger = logging.getLogger("arith")

_EMPTY_REGISTRY: FunctionRegistry = {}


def _is_number(value: object) -> bool:
    """Return whether value is a usable int or float (bools excluded)."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def truncating_divide(left: Number, right: Number) -> int:
    """Divide and truncate the quotient toward zero.

    Integer operands are divided exactly so large values keep full precision.
    """
    if right == 0:
        raise DivisionByZeroError()
    if isinstance(left, int) and isinstance(right, int):
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    return trunc(left / right)


def _apply_binary_operator(operator: BinaryOperator, left: Number, right: Number) -> Number:
    match operator:
        case "+":
            return left + right
        case "-":
            return left - right
        case "*":
            return left * right
        case "/":
            return truncating_divide(left, right)
        case _:
            assert_never(operator)


class Evaluator:
    """Evaluate ASTs against a read-only function registry."""

    def __init__(self, functions: FunctionRegistry | None = None) -> None:
        self.functions = _EMPTY_REGISTRY if functions is None else functions

    def evaluate(self, node: Node) -> Number:
        """Compute the numeric value of an AST."""
        match node:
            case IntegerLiteral(value):
                return value
            case UnaryOp(operator, operand):
                value = self.evaluate(operand)
                return -value if operator == "-" else value
            case BinaryOp():
                return self._evaluate_binary_op(node)
            case FunctionCall():
                return self._evaluate_function_call(node)
            case _:
                assert_never(node)

    def _evaluate_binary_op(self, node: BinaryOp) -> Number:
        left = self.evaluate(node.left)
        right = self.evaluate(node.right)
        # Mixed int/float arithmetic can overflow the float range.
        try:
            result = _apply_binary_operator(node.operator, left, right)
        except OverflowError as exc:
            raise EvaluationError(f"Numeric overflow in '{node.operator}': {exc}") from exc
        if isinstance(result, float) and not isfinite(result):
            raise EvaluationError(f"Numeric overflow in '{node.operator}': result is {result}")
        return result

    def _evaluate_function_call(self, node: FunctionCall) -> Number:
        function = self.functions.get(node.name)
        if function is None:
            raise UnknownFunctionError(node.name)

        arguments = [self.evaluate(argument) for argument in node.arguments]
        try:
            result = function(*arguments)
        except Exception as exc:
            logger.info(
                "Function %s(%s) failed: %s",
                node.name,
                ", ".join(format_number(argument) for argument in arguments),
                exc,
            )
            raise FunctionInvocationError(node.name, exc) from exc

        if not _is_number(result):
            cause: Exception = TypeError(f"returned non-numeric value {result!r}")
            raise FunctionInvocationError(node.name, cause) from cause
        if isinstance(result, float) and not isfinite(result):
            cause = ValueError(f"returned non-finite value {result!r}")
            raise FunctionInvocationError(node.name, cause) from cause
        return result


def evaluate_node(node: Node, functions: FunctionRegistry | None = None) -> Number:
    """Evaluate an AST with an optional function registry."""
    return Evaluator(functions).evaluate(node)
