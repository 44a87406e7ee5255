"""Errors for expression lexing, parsing and evaluation."""

from __future__ import annotations


class ExpressionError(Exception):
    """Base exception for expression language failures."""


class LexError(ExpressionError):
    """Raised when the source text contains an unrecognized character."""

    def __init__(self, character: str, offset: int) -> None:
        super().__init__(f"Invalid character {character!r} at offset {offset}")
        self.character = character
        self.offset = offset


class ParseError(ExpressionError):
    """Raised when the token stream does not match the grammar."""

    def __init__(
        self,
        message: str,
        offset: int,
        expected: str | None = None,
        actual: str | None = None,
    ) -> None:
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset
        self.expected = expected
        self.actual = actual


class EvaluationError(ExpressionError):
    """Base exception for failures while evaluating a parsed expression."""


class DivisionByZeroError(EvaluationError):
    """Raised when the right operand of a division evaluates to zero."""

    def __init__(self) -> None:
        super().__init__("Division by zero")


class UnknownFunctionError(EvaluationError):
    """Raised when a call names a function missing from the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown function: {name}")
        self.name = name


class FunctionInvocationError(EvaluationError):
    """Raised when a registry function fails during invocation."""

    def __init__(self, name: str, cause: Exception) -> None:
        super().__init__(f"Error calling function {name}: {cause}")
        self.name = name
        self.cause = cause
