"""AST nodes for arithmetic expressions."""

from __future__ import annotations

from typing_extensions import TypeAliasType

from dataclasses import dataclass
from typing import Literal, assert_never, get_args


BinaryOperator = TypeAliasType("BinaryOperator", Literal["+", "-", "*", "/"])
UnaryOperator = TypeAliasType("UnaryOperator", Literal["+", "-"])

BINARY_OPERATORS: frozenset[str] = frozenset(get_args(BinaryOperator.__value__))
UNARY_OPERATORS: frozenset[str] = frozenset(get_args(UnaryOperator.__value__))


@dataclass(frozen=True, slots=True)
class Expr:
    """Base AST expression type."""


@dataclass(frozen=True, slots=True)
class IntegerLiteral(Expr):
    """Non-negative integer literal."""

    value: int


@dataclass(frozen=True, slots=True)
class BinaryOp(Expr):
    """Binary arithmetic operation."""

    operator: BinaryOperator
    left: Node
    right: Node


@dataclass(frozen=True, slots=True)
class UnaryOp(Expr):
    """Unary sign operation."""

    operator: UnaryOperator
    operand: Node


@dataclass(frozen=True, slots=True)
class FunctionCall(Expr):
    """Call of a registry function with ordered arguments."""

    name: str
    arguments: tuple[Node, ...]


Node = TypeAliasType("Node", IntegerLiteral | BinaryOp | UnaryOp | FunctionCall)


def integer(value: int) -> IntegerLiteral:
    """Build an integer literal node."""
    return IntegerLiteral(value)


def binary(operator: str, left: Node, right: Node) -> BinaryOp:
    """Build a binary operation node, rejecting unknown operators."""
    if operator not in BINARY_OPERATORS:
        raise ValueError(f"Unsupported binary operator: {operator}")
    return BinaryOp(operator, left, right)  # type: ignore[arg-type]


def unary(operator: str, operand: Node) -> UnaryOp:
    """Build a unary operation node, rejecting unknown operators."""
    if operator not in UNARY_OPERATORS:
        raise ValueError(f"Unsupported unary operator: {operator}")
    return UnaryOp(operator, operand)  # type: ignore[arg-type]


def call(name: str, *arguments: Node) -> FunctionCall:
    """Build a function call node."""
    return FunctionCall(name, tuple(arguments))


def node_to_dict(node: Node) -> dict[str, object]:
    """Convert an AST into a JSON-compatible dictionary tree."""
    match node:
        case IntegerLiteral(value):
            return {"type": "IntegerLiteral", "value": value}
        case BinaryOp(operator, left, right):
            return {
                "type": "BinaryOp",
                "operator": operator,
                "left": node_to_dict(left),
                "right": node_to_dict(right),
            }
        case UnaryOp(operator, operand):
            return {"type": "UnaryOp", "operator": operator, "operand": node_to_dict(operand)}
        case FunctionCall(name, arguments):
            return {
                "type": "FunctionCall",
                "name": name,
                "arguments": [node_to_dict(argument) for argument in arguments],
            }
        case _:
            assert_never(node)
