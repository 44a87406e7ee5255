"""Token kinds and token values produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from arith.expression_language.numbers import format_integer


class TokenKind(StrEnum):
    """Lexical token kinds."""

    INTEGER = "INTEGER"
    PLUS = "PLUS"
    MINUS = "MINUS"
    MUL = "MUL"
    DIV = "DIV"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    IDENTIFIER = "IDENTIFIER"
    COMMA = "COMMA"
    EOF = "EOF"


PUNCTUATION: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MUL,
    "/": TokenKind.DIV,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single token with its payload and source offset."""

    kind: TokenKind
    value: int | str
    offset: int

    def __str__(self) -> str:
        if self.kind == TokenKind.EOF:
            return f"{self.kind} @{self.offset}"
        return f"{self.kind} {self.display_value} @{self.offset}"

    @property
    def display_value(self) -> str:
        """Payload as text; INTEGER payloads of any length are supported."""
        if isinstance(self.value, int):
            return format_integer(self.value)
        return self.value
