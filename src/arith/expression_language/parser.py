"""Recursive descent parser for arithmetic expressions.

Grammar, from lowest to highest precedence::

    expression  := term ( ('+' | '-') term )*
    term        := factor ( ('*' | '/') factor )*
    factor      := ('+' | '-') factor
                 | INTEGER
                 | IDENTIFIER '(' arguments ')'
                 | '(' expression ')'
    arguments   := (expression (',' expression)*)?
"""

from __future__ import annotations

from typing import cast

from arith.expression_language.ast import (
    BinaryOp,
    BinaryOperator,
    FunctionCall,
    IntegerLiteral,
    Node,
    UnaryOp,
    UnaryOperator,
)
from arith.expression_language.errors import ParseError
from arith.expression_language.lexer import Lexer
from arith.expression_language.tokens import Token, TokenKind


_ADDITIVE_OPERATORS: dict[TokenKind, BinaryOperator] = {
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
}
_MULTIPLICATIVE_OPERATORS: dict[TokenKind, BinaryOperator] = {
    TokenKind.MUL: "*",
    TokenKind.DIV: "/",
}
_UNARY_OPERATORS: dict[TokenKind, UnaryOperator] = {
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
}


class Parser:
    """Build one AST from a token stream."""

    def __init__(self, source: str | Lexer) -> None:
        self.lexer = Lexer(source) if isinstance(source, str) else source
        self.current = self.lexer.next_token()

    def parse(self) -> Node:
        """Parse a complete expression, rejecting trailing input."""
        node = self._expression()
        if self.current.kind != TokenKind.EOF:
            raise ParseError(
                f"Unexpected trailing input: expected {TokenKind.EOF}, got {self.current.kind}",
                self.current.offset,
                expected=TokenKind.EOF,
                actual=self.current.kind,
            )
        return node

    def _eat(self, kind: TokenKind) -> Token:
        """Consume the current token if it has the expected kind."""
        token = self.current
        if token.kind != kind:
            raise ParseError(
                f"Expected {kind}, got {token.kind}",
                token.offset,
                expected=kind,
                actual=token.kind,
            )
        self.current = self.lexer.next_token()
        return token

    def _expression(self) -> Node:
        node = self._term()
        while self.current.kind in _ADDITIVE_OPERATORS:
            operator = _ADDITIVE_OPERATORS[self._eat(self.current.kind).kind]
            node = BinaryOp(operator, node, self._term())
        return node

    def _term(self) -> Node:
        node = self._factor()
        while self.current.kind in _MULTIPLICATIVE_OPERATORS:
            operator = _MULTIPLICATIVE_OPERATORS[self._eat(self.current.kind).kind]
            node = BinaryOp(operator, node, self._factor())
        return node

    def _factor(self) -> Node:
        token = self.current

        if token.kind in _UNARY_OPERATORS:
            self._eat(token.kind)
            return UnaryOp(_UNARY_OPERATORS[token.kind], self._factor())

        if token.kind == TokenKind.INTEGER:
            self._eat(TokenKind.INTEGER)
            return IntegerLiteral(cast(int, token.value))

        if token.kind == TokenKind.IDENTIFIER:
            return self._function_call()

        if token.kind == TokenKind.LPAREN:
            self._eat(TokenKind.LPAREN)
            node = self._expression()
            self._eat(TokenKind.RPAREN)
            return node

        raise ParseError(
            f"Unexpected token {token.kind}",
            token.offset,
            expected="operand",
            actual=token.kind,
        )

    def _function_call(self) -> FunctionCall:
        name_token = self._eat(TokenKind.IDENTIFIER)
        name = cast(str, name_token.value)
        if self.current.kind != TokenKind.LPAREN:
            raise ParseError(
                f"Unexpected identifier {name!r}: variables are not supported",
                name_token.offset,
                expected=TokenKind.LPAREN,
                actual=self.current.kind,
            )
        self._eat(TokenKind.LPAREN)
        arguments = self._arguments()
        self._eat(TokenKind.RPAREN)
        return FunctionCall(name, arguments)

    def _arguments(self) -> tuple[Node, ...]:
        if self.current.kind == TokenKind.RPAREN:
            return ()
        arguments = [self._expression()]
        while self.current.kind == TokenKind.COMMA:
            self._eat(TokenKind.COMMA)
            arguments.append(self._expression())
        return tuple(arguments)


def parse_expression(text: str) -> Node:
    """Parse expression text into an AST."""
    return Parser(text).parse()
