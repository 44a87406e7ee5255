"""On-demand lexer for arithmetic expression text."""

from __future__ import annotations

from collections.abc import Iterator

from parsy import Parser, char_from, regex

from arith.expression_language.errors import LexError
from arith.expression_language.numbers import parse_digits
from arith.expression_language.tokens import PUNCTUATION, Token, TokenKind


_WHITESPACE: Parser = regex(r"\s+")
_INTEGER: Parser = regex(r"[0-9]+").map(
    lambda digits: (TokenKind.INTEGER, parse_digits(digits))
)
_IDENTIFIER: Parser = regex(r"[A-Za-z_][A-Za-z0-9_]*").map(
    lambda name: (TokenKind.IDENTIFIER, name)
)
_SYMBOL: Parser = char_from("".join(PUNCTUATION)).map(lambda char: (PUNCTUATION[char], char))

# Order matters: digits are tried before identifiers, identifiers before symbols.
_TOKEN: Parser = _INTEGER | _IDENTIFIER | _SYMBOL


class Lexer:
    """Turn source text into tokens, one token per `next_token` call.

    The lexer only keeps a cursor into the text. Once the end of the text is
    reached every further call returns an EOF token positioned at the end.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0

    def __iter__(self) -> Iterator[Token]:
        """Yield remaining tokens, ending with (and including) EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenKind.EOF:
                return

    def next_token(self) -> Token:
        """Scan and return the next token."""
        self._skip_whitespace()
        start = self.position
        if start >= len(self.text):
            return Token(TokenKind.EOF, "", len(self.text))

        result = _TOKEN(self.text, start)
        if not result.status:
            raise LexError(self.text[start], start)

        kind, value = result.value
        self.position = result.index
        return Token(kind, value, start)

    def tokenize(self) -> list[Token]:
        """Return all remaining tokens including the final EOF."""
        return list(self)

    def _skip_whitespace(self) -> None:
        result = _WHITESPACE(self.text, self.position)
        if result.status:
            self.position = result.index


def tokenize(text: str) -> list[Token]:
    """Tokenize the full text."""
    return Lexer(text).tokenize()
