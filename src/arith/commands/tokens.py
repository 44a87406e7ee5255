"""Tokens command listing the lexer output for an expression."""

from __future__ import annotations

from dataclasses import dataclass

import click
import typer

from arith import config as config_module
from arith.color import should_use_color
from arith.expression_language import LexError, Lexer
from arith.output_format import (
    OutputFormat,
    OutputFormatError,
    build_console,
    parse_output_format,
    prepare_tokens,
    print_prepared_output,
)


@dataclass
class TokensArgs:
    """Arguments for the tokens command."""

    expression: str
    config: str
    color_flag: bool | None
    out: str


def run_tokens(args: TokensArgs) -> None:
    """Run the tokens command."""
    color_enabled = should_use_color(args.color_flag)
    console = build_console(color_enabled)
    try:
        output_format = parse_output_format(args.out)
    except OutputFormatError as exc:
        raise click.UsageError(str(exc)) from exc

    try:
        tokens = Lexer(args.expression).tokenize()
    except LexError as exc:
        raise click.UsageError(str(exc)) from exc

    print_prepared_output(console, prepare_tokens(tokens, output_format, color_enabled))


def register(app: typer.Typer) -> None:
    """Register the tokens command."""

    @app.command("tokens")
    def tokens_command(
        expression: str = typer.Argument(..., metavar="EXPRESSION", help="Expression to tokenize"),
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
        """List the tokens of an expression."""
        args = TokensArgs(expression=expression, config=config, color_flag=color_flag, out=out)
        config_module.log_applied_config_defaults("tokens")
        config_module.log_command_arguments(args, "tokens")
        run_tokens(args)
