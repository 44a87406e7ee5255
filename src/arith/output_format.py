"""Output format abstraction and format-specific renderers."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import StrEnum
from typing import assert_never, cast

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.tree import Tree

from arith.color import bright_blue, bright_green, dim_white, magenta
from arith.expression_language import (
    BinaryOp,
    FunctionCall,
    IntegerLiteral,
    Node,
    Number,
    Token,
    TokenKind,
    UnaryOp,
    node_to_dict,
)
from arith.expression_language.numbers import format_integer, format_number, is_long_integer


DEFAULT_OUTPUT_THEME = "github-dark"
_LONG_INTEGER_MARKER = "\x00long-integer:"


class OutputFormat(StrEnum):
    """Supported output formats."""

    TEXT = "text"
    JSON = "json"


class OutputFormatError(RuntimeError):
    """Raised when output formatting fails."""


@dataclass(frozen=True)
class OutputOperation:
    """One prepared output operation."""

    kind: str
    text: str | None = None
    renderable: object | None = None
    markup: bool = False


@dataclass(frozen=True)
class PreparedOutput:
    """Prepared output operations ready for console rendering."""

    operations: tuple[OutputOperation, ...]


def parse_output_format(value: str) -> OutputFormat:
    """Normalize and validate an --out value."""
    normalized = value.strip().lower()
    try:
        return OutputFormat(normalized)
    except ValueError as exc:
        available = ", ".join(fmt.value for fmt in OutputFormat)
        raise OutputFormatError(
            f"Unsupported output format: {value}. Available formats: {available}"
        ) from exc


def build_console(color_enabled: bool) -> Console:
    """Build a Rich console honoring the color setting."""
    return Console(no_color=not color_enabled, force_terminal=color_enabled, highlight=False)


def _write_plain_output(console: Console, text: str) -> None:
    """Write plain output directly to console stream."""
    console.file.write(f"{text}\n")
    console.file.flush()


def print_prepared_output(console: Console, prepared_output: PreparedOutput) -> None:
    """Print already prepared output operations."""
    for operation in prepared_output.operations:
        if operation.kind == "plain_write":
            if operation.text is not None:
                _write_plain_output(console, operation.text)
            continue
        if operation.renderable is not None:
            console.print(operation.renderable)
            continue
        console.print(operation.text if operation.text is not None else "", markup=operation.markup)


def _replace_long_integers(payload: object, replacements: dict[str, str]) -> object:
    """Swap ints too long for json.dumps with unique placeholder strings."""
    if is_long_integer(payload):
        marker = f"{_LONG_INTEGER_MARKER}{len(replacements)}"
        replacements[json.dumps(marker)] = format_integer(cast(int, payload))
        return marker
    if isinstance(payload, dict):
        return {key: _replace_long_integers(value, replacements) for key, value in payload.items()}
    if isinstance(payload, list):
        return [_replace_long_integers(item, replacements) for item in payload]
    return payload


def dumps_json(payload: object) -> str:
    """Serialize payload as JSON, writing ints of any length as plain numbers."""
    replacements: dict[str, str] = {}
    text = json.dumps(_replace_long_integers(payload, replacements), ensure_ascii=True)
    for marker, digits in replacements.items():
        text = text.replace(marker, digits, 1)
    return text


def _prepare_json(payload: object, color_enabled: bool) -> PreparedOutput:
    """Prepare JSON output with syntax highlighting when enabled."""
    text = dumps_json(payload)
    if color_enabled:
        renderable = Syntax(
            text, "json", theme=DEFAULT_OUTPUT_THEME, line_numbers=False, word_wrap=True
        )
        return PreparedOutput(
            operations=(OutputOperation(kind="console_print", renderable=renderable),)
        )
    return PreparedOutput(operations=(OutputOperation(kind="plain_write", text=text),))


def _prepare_lines(lines: list[str], color_enabled: bool) -> PreparedOutput:
    """Prepare text lines, as markup when colors are enabled."""
    if color_enabled:
        return PreparedOutput(
            operations=tuple(
                OutputOperation(kind="console_print", text=line, markup=True) for line in lines
            )
        )
    return PreparedOutput(
        operations=tuple(OutputOperation(kind="plain_write", text=line) for line in lines)
    )


def prepare_result(
    expression: str,
    result: Number,
    output_format: OutputFormat,
    color_enabled: bool,
) -> PreparedOutput:
    """Prepare output for an evaluated expression."""
    if output_format == OutputFormat.JSON:
        return _prepare_json({"expression": expression, "result": result}, color_enabled)
    return _prepare_lines([bright_green(format_number(result), color_enabled)], color_enabled)


def _format_token_line(token: Token, color_enabled: bool) -> str:
    """Format one token as `KIND value @offset`."""
    parts = [magenta(token.kind, color_enabled)]
    if token.kind != TokenKind.EOF:
        value = token.display_value
        parts.append(escape(value) if color_enabled else value)
    parts.append(dim_white(f"@{token.offset}", color_enabled))
    return " ".join(parts)


def prepare_tokens(
    tokens: list[Token],
    output_format: OutputFormat,
    color_enabled: bool,
) -> PreparedOutput:
    """Prepare output for a token listing."""
    if output_format == OutputFormat.JSON:
        payload = [
            {"kind": str(token.kind), "value": token.value, "offset": token.offset}
            for token in tokens
        ]
        return _prepare_json(payload, color_enabled)
    lines = [_format_token_line(token, color_enabled) for token in tokens]
    return _prepare_lines(lines, color_enabled)


def _node_label(node: Node, color_enabled: bool) -> str:
    """Build a tree label for one AST node."""
    match node:
        case IntegerLiteral(value):
            detail = format_integer(value)
        case BinaryOp(operator, _, _) | UnaryOp(operator, _):
            detail = operator
        case FunctionCall(name, _):
            detail = f"{name}()"
        case _:
            assert_never(node)
    kind = bright_blue(type(node).__name__, color_enabled)
    return f"{kind} {escape(detail) if color_enabled else detail}"


def _node_children(node: Node) -> tuple[Node, ...]:
    """Return child nodes in evaluation order."""
    match node:
        case BinaryOp(_, left, right):
            return (left, right)
        case UnaryOp(_, operand):
            return (operand,)
        case FunctionCall(_, arguments):
            return arguments
    return ()


def build_ast_tree(node: Node, color_enabled: bool) -> Tree:
    """Build a Rich tree mirroring the AST."""
    tree = Tree(_node_label(node, color_enabled), highlight=False)
    _add_children(tree, node, color_enabled)
    return tree


def _add_children(branch: Tree, node: Node, color_enabled: bool) -> None:
    for child in _node_children(node):
        _add_children(branch.add(_node_label(child, color_enabled)), child, color_enabled)


def prepare_ast(node: Node, output_format: OutputFormat, color_enabled: bool) -> PreparedOutput:
    """Prepare output for a parsed AST."""
    if output_format == OutputFormat.JSON:
        return _prepare_json(node_to_dict(node), color_enabled)
    return PreparedOutput(
        operations=(
            OutputOperation(kind="console_print", renderable=build_ast_tree(node, color_enabled)),
        )
    )
