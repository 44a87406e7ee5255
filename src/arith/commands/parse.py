"""Parse command printing the AST of an expression."""

from __future__ import annotations

from dataclasses import dataclass

import click
import typer

from arith import config as config_module
from arith.color import should_use_color
from arith.expression_language import ExpressionError, parse_expression
from arith.output_format import (
    OutputFormat,
    OutputFormatError,
    build_console,
    parse_output_format,
    prepare_ast,
    print_prepared_output,
)


@dataclass
class ParseArgs:
    """Arguments for the parse command."""

    expression: str
    config: str
    color_flag: bool | None
    out: str


def run_parse(args: ParseArgs) -> None:
    """Run the parse command."""
    color_enabled = should_use_color(args.color_flag)
    console = build_console(color_enabled)
    try:
        output_format = parse_output_format(args.out)
    except OutputFormatError as exc:
        raise click.UsageError(str(exc)) from exc

    try:
        node = parse_expression(args.expression)
    except ExpressionError as exc:
        raise click.UsageError(str(exc)) from exc

    print_prepared_output(console, prepare_ast(node, output_format, color_enabled))


def register(app: typer.Typer) -> None:
    """Register the parse command."""

    @app.command("parse")
    def parse_command(
        expression: str = typer.Argument(..., metavar="EXPRESSION", help="Expression to parse"),
        config: str = typer.Option(
            config_module.DEFAULT_CONFIG_NAME,
            "--config",
            metavar="FILE",
            help="Config file name to load from current directory",
        ),
        color_flag: bool | None = typer.Option(
            None,
            "--color/--no-color",
            help="Force colored output",
        ),
        out: str = typer.Option(
            OutputFormat.TEXT,
            "--out",
            help="Output format: text or json",
        ),
    ) -> None:
        """Print the syntax tree of an expression."""
        args = ParseArgs(expression=expression, config=config, color_flag=color_flag, out=out)
        config_module.log_applied_config_defaults("parse")
        config_module.log_command_arguments(args, "parse")
        run_parse(args)
