"""Eval command computing the value of an expression."""

from __future__ import annotations

from dataclasses import dataclass

import click
import typer

from arith import config as config_module
from arith.color import should_use_color
from arith.expression_language import EvaluationError, ExpressionError, compile_expression_text
from arith.functions import build_registry
from arith.output_format import (
    OutputFormat,
    OutputFormatError,
    build_console,
    parse_output_format,
    prepare_result,
    print_prepared_output,
)


@dataclass
class EvalArgs:
    """Arguments for the eval command."""

    expression: str
    config: str
    color_flag: bool | None
    out: str
    use_builtins: bool


def run_eval(args: EvalArgs) -> None:
    """Run the eval command."""
    color_enabled = should_use_color(args.color_flag)
    console = build_console(color_enabled)
    try:
        output_format = parse_output_format(args.out)
    except OutputFormatError as exc:
        raise click.UsageError(str(exc)) from exc

    try:
        compiled = compile_expression_text(args.expression)
        functions = build_registry(args.use_builtins, config_module.CONFIG_FUNCTIONS)
    except ExpressionError as exc:
        raise click.UsageError(str(exc)) from exc

    try:
        result = compiled(functions)
    except EvaluationError as exc:
        raise click.UsageError(str(exc)) from exc

    print_prepared_output(
        console, prepare_result(args.expression, result, output_format, color_enabled)
    )


def register(app: typer.Typer) -> None:
    """Register the eval command."""

    @app.command("eval")
    def eval_command(
        expression: str = typer.Argument(
            ...,
            metavar="EXPRESSION",
            help="Arithmetic expression (use `--` before expressions starting with '-')",
        ),
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
        use_builtins: bool = typer.Option(
            True,
            "--builtins/--no-builtins",
            help="Make builtin functions (abs, max, min, pow, ...) available",
        ),
    ) -> None:
        """Evaluate an arithmetic expression."""
        args = EvalArgs(
            expression=expression,
            config=config,
            color_flag=color_flag,
            out=out,
            use_builtins=use_builtins,
        )
        config_module.log_applied_config_defaults("eval")
        config_module.log_command_arguments(args, "eval")
        run_eval(args)
