#!/usr/bin/env python
"""CLI interface for arith - arithmetic expression evaluation."""

from __future__ import annotations

import sys

import typer

from arith import config, logging_config
from arith.commands import eval as eval_command
from arith.commands import parse, tokens


app = typer.Typer(
    help="Evaluate arithmetic expressions with integer literals and function calls.",
    no_args_is_help=True,
)


DEFAULT_VERBOSE: dict[str, bool] = {"value": False}


def _resolve_verbose(verbose: bool | None) -> bool:
    if verbose is None:
        return DEFAULT_VERBOSE["value"]
    return verbose


@app.callback()
def main_callback(
    verbose: bool | None = typer.Option(
        None,
        "--verbose",
        "-v",
        help="Enable verbose logging output",
    ),
) -> None:
    """Global CLI options."""
    if verbose is None and not DEFAULT_VERBOSE["value"]:
        return
    logging_config.configure_logging(_resolve_verbose(verbose))


eval_command.register(app)
tokens.register(app)
parse.register(app)


def main() -> None:
    """Main CLI entry point."""
    loaded_config = config.load_cli_config(sys.argv)
    defaults = dict(loaded_config.defaults)
    DEFAULT_VERBOSE["value"] = bool(defaults.pop("verbose", False))
    config.CONFIG_DEFAULTS.clear()
    config.CONFIG_DEFAULTS.update(defaults)
    config.CONFIG_FUNCTIONS.clear()
    config.CONFIG_FUNCTIONS.update(loaded_config.functions)

    command = typer.main.get_command(app)
    default_map = config.build_default_map(defaults) if defaults else None
    command.main(
        args=sys.argv[1:],
        prog_name="arith",
        standalone_mode=True,
        default_map=default_map,
    )


if __name__ == "__main__":
    main()
