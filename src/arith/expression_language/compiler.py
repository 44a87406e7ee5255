"""Compiler entrypoints for arithmetic expressions."""

from __future__ import annotations

from typing_extensions import TypeAliasType

from collections.abc import Callable

from arith.expression_language.ast import Node
from arith.expression_language.evaluator import FunctionRegistry, Number, evaluate_node
from arith.expression_language.parser import parse_expression


CompiledExpression = TypeAliasType("CompiledExpression", Callable[[FunctionRegistry | None], Number])


def compile_expr(node: Node) -> CompiledExpression:
    """Compile an AST into a callable taking a function registry."""

    def _compiled(functions: FunctionRegistry | None = None) -> Number:
        return evaluate_node(node, functions)

    return _compiled


def compile_expression_text(text: str) -> CompiledExpression:
    """Parse and compile expression text."""
    node = parse_expression(text)
    return compile_expr(node)


def evaluate(expression: str, functions: FunctionRegistry | None = None) -> Number:
    """Lex, parse and evaluate expression text."""
    return evaluate_node(parse_expression(expression), functions)
