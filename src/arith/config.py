"""Configuration handling for the arith CLI."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TypeGuard, cast

import typer

from arith.expression_language import ExpressionError, parse_expression
from arith.output_format import OutputFormat


DEFAULT_CONFIG_NAME = ".arith.json"

COMMAND_OPTION_NAMES = {
    "color_flag",
    "out",
    "use_builtins",
    "verbose",
}


CONFIG_DEFAULTS: dict[str, object] = {}
CONFIG_FUNCTIONS: dict[str, str] = {}


DEST_TO_OPTION_NAME: dict[str, str] = {
    "color_flag": "--color/--no-color",
    "out": "--out",
    "use_builtins": "--builtins/--no-builtins",
    "verbose": "--verbose",
}

_FUNCTION_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


logger = logging.getLogger("arith")


@dataclass
class LoadedCliConfig:
    """Fully parsed CLI config payload."""

    defaults: dict[str, object]
    functions: dict[str, str]


def load_config(filepath: str) -> tuple[dict[str, object], bool]:
    """Load config from JSON file.

    Args:
        filepath: Path to config file

    Returns:
        Tuple of (config dict, malformed flag)
    """
    try:
        with open(filepath, encoding="utf-8") as f:
            config = json.load(f)
    except FileNotFoundError:
        return ({}, False)
    except OSError:
        return ({}, True)
    except json.JSONDecodeError:
        return ({}, True)

    if not isinstance(config, dict):
        return ({}, True)

    return (config, False)


def is_string_dict(value: object) -> TypeGuard[dict[str, str]]:
    """Check if value is dict[str, str]."""
    return isinstance(value, dict) and all(
        isinstance(key, str) and isinstance(item, str) for key, item in value.items()
    )


def is_valid_function_definition(name: str, text: str) -> bool:
    """Check that a config function has an identifier name and parseable body."""
    if _FUNCTION_NAME.fullmatch(name) is None:
        return False
    try:
        parse_expression(text)
    except ExpressionError:
        return False
    return True


def parse_toggle_defaults(
    config: dict[str, object],
    on_key: str,
    off_key: str,
    dest: str,
) -> tuple[dict[str, object], bool]:
    """Parse an --x/--no-x pair of boolean config flags.

    Both flags must be booleans and may not both be true.
    """
    defaults: dict[str, object] = {}
    on_value = config.get(on_key)
    off_value = config.get(off_key)

    if on_key in config and not isinstance(on_value, bool):
        return ({}, False)
    if off_key in config and not isinstance(off_value, bool):
        return ({}, False)
    if on_value is True and off_value is True:
        return ({}, False)

    if on_value is True:
        defaults[dest] = True
    if off_value is True:
        defaults[dest] = False

    return (defaults, True)


def validate_str_option(key: str, value: object) -> str | None:
    """Validate string option value."""
    if not isinstance(value, str):
        return None
    if key == "--out" and value.strip().lower() not in {fmt.value for fmt in OutputFormat}:
        return None
    return value


def parse_config_sections(
    raw_config: dict[str, object],
) -> tuple[dict[str, object], dict[str, str]] | None:
    """Parse top-level config sections.

    Accepted shape:
      {
        "defaults": { ... },
        "functions": {"name": "expression"}
      }
    """
    allowed_keys = {"defaults", "functions"}
    if any(key not in allowed_keys for key in raw_config):
        return None

    defaults_section = raw_config.get("defaults", {})
    if not isinstance(defaults_section, dict):
        return None

    functions_section = raw_config.get("functions", {})
    if not is_string_dict(functions_section):
        return None
    if not all(
        is_valid_function_definition(name, text) for name, text in functions_section.items()
    ):
        return None

    return (cast(dict[str, object], defaults_section), dict(functions_section))


def build_config_defaults(config: dict[str, object]) -> dict[str, object] | None:
    """Validate config values and build defaults.

    Args:
        config: Raw "defaults" section

    Returns:
        Defaults keyed by command parameter name, or None if malformed
    """
    defaults: dict[str, object] = {}
    toggles = (
        ("--color", "--no-color", "color_flag"),
        ("--builtins", "--no-builtins", "use_builtins"),
    )
    toggle_keys: set[str] = set()
    for on_key, off_key, dest in toggles:
        toggle_defaults, valid = parse_toggle_defaults(config, on_key, off_key, dest)
        if not valid:
            return None
        defaults.update(toggle_defaults)
        toggle_keys.update((on_key, off_key))

    bool_options = {"--verbose": "verbose"}
    str_options = {"--out": "out"}

    for key, value in config.items():
        if key in toggle_keys:
            continue
        if key in bool_options:
            if not isinstance(value, bool):
                return None
            defaults[bool_options[key]] = value
        elif key in str_options:
            str_value = validate_str_option(key, value)
            if str_value is None:
                return None
            defaults[str_options[key]] = str_value
        else:
            return None

    return defaults


def parse_config_argument(argv: list[str]) -> str:
    """Parse only the --config argument from argv."""
    for idx, arg in enumerate(argv[1:], start=1):
        if arg == "--config" and idx + 1 < len(argv):
            return argv[idx + 1]
        if arg.startswith("--config="):
            return arg.split("=", 1)[1]
    return DEFAULT_CONFIG_NAME


def load_cli_config(argv: list[str]) -> LoadedCliConfig:
    """Load config defaults from the configured file path."""
    config_name = parse_config_argument(argv)
    config_path = Path(config_name)
    if not config_path.is_absolute():
        config_path = Path.cwd() / config_name
    config, load_error = load_config(str(config_path))

    if load_error:
        raise typer.BadParameter("Malformed config")

    config_sections = parse_config_sections(config)
    if config_sections is None:
        raise typer.BadParameter("Malformed config")

    defaults_config, functions = config_sections

    defaults = build_config_defaults(defaults_config)
    if defaults is None:
        raise typer.BadParameter("Malformed config")

    filtered_defaults = {
        key: value for key, value in defaults.items() if key in COMMAND_OPTION_NAMES
    }
    return LoadedCliConfig(defaults=filtered_defaults, functions=functions)


def build_default_map(defaults: dict[str, object]) -> dict[str, dict[str, object]]:
    """Build Click default_map for Typer commands."""
    eval_defaults = {key: value for key, value in defaults.items() if key != "verbose"}
    inspect_defaults = {
        key: value for key, value in eval_defaults.items() if key != "use_builtins"
    }
    return {
        "eval": eval_defaults,
        "tokens": dict(inspect_defaults),
        "parse": dict(inspect_defaults),
    }


def _format_log_entry(name: str, value: object) -> str:
    """Format one name/value pair for logging."""
    return f"{name}={value!r}"


def log_applied_config_defaults(command_name: str) -> None:
    """Log config defaults and functions loaded from the config file."""
    if not logger.isEnabledFor(logging.INFO):
        return

    entries: list[str] = []
    for dest, default_value in sorted(CONFIG_DEFAULTS.items(), key=lambda item: item[0]):
        option_name = DEST_TO_OPTION_NAME.get(dest)
        if option_name is None:
            continue
        entries.append(_format_log_entry(option_name, default_value))

    if CONFIG_FUNCTIONS:
        entries.append(_format_log_entry("functions", sorted(CONFIG_FUNCTIONS)))

    if entries:
        logger.info("Config defaults applied (%s): %s", command_name, ", ".join(entries))


def log_command_arguments(args: object, command_name: str) -> None:
    """Log all final argument values used to run a command."""
    if not logger.isEnabledFor(logging.INFO):
        return

    try:
        arg_items = vars(args).items()
    except TypeError:
        return

    entries = [
        _format_log_entry(arg_name, arg_value)
        for arg_name, arg_value in sorted(arg_items, key=lambda item: item[0])
    ]
    logger.info("Command arguments (%s): %s", command_name, ", ".join(entries))
