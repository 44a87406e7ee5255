"""Tests for arith.config helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import SimpleNamespace

import pytest
import typer

from arith import config


def test_load_config_missing_file_returns_empty(tmp_path: Path) -> None:
    """Missing config should return empty config without error."""
    missing = tmp_path / "missing.json"
    data, malformed = config.load_config(str(missing))

    assert data == {}
    assert malformed is False


def test_load_config_directory_path_is_malformed(tmp_path: Path) -> None:
    """Directory path should be treated as malformed config."""
    config_dir = tmp_path / "cfgdir"
    config_dir.mkdir()
    data, malformed = config.load_config(str(config_dir))

    assert data == {}
    assert malformed is True


def test_load_config_non_dict_is_malformed(tmp_path: Path) -> None:
    """Non-object JSON should be marked malformed."""
    config_path = tmp_path / "config.json"
    config_path.write_text("[1, 2, 3]", encoding="utf-8")

    data, malformed = config.load_config(str(config_path))

    assert data == {}
    assert malformed is True


def test_parse_toggle_defaults_conflict() -> None:
    """Conflicting toggle flags should be rejected."""
    defaults, valid = config.parse_toggle_defaults(
        {"--color": True, "--no-color": True}, "--color", "--no-color", "color_flag"
    )

    assert defaults == {}
    assert valid is False


def test_parse_toggle_defaults_invalid_value() -> None:
    """Non-boolean toggle flag should be rejected."""
    defaults, valid = config.parse_toggle_defaults(
        {"--color": "yes"}, "--color", "--no-color", "color_flag"
    )

    assert defaults == {}
    assert valid is False


def test_parse_toggle_defaults_off_value() -> None:
    """The off flag stores False under the destination name."""
    defaults, valid = config.parse_toggle_defaults(
        {"--no-builtins": True}, "--builtins", "--no-builtins", "use_builtins"
    )

    assert defaults == {"use_builtins": False}
    assert valid is True


def test_build_config_defaults_applies_values() -> None:
    """Config defaults should map option names to parameter names."""
    raw: dict[str, object] = {
        "--no-color": True,
        "--no-builtins": True,
        "--out": "json",
        "--verbose": True,
    }

    defaults = config.build_config_defaults(raw)

    assert defaults == {
        "color_flag": False,
        "use_builtins": False,
        "out": "json",
        "verbose": True,
    }


@pytest.mark.parametrize(
    "raw",
    [
        {"--out": "yaml"},
        {"--out": 3},
        {"--verbose": "yes"},
        {"--max-results": 5},
        {"--builtins": 1},
    ],
)
def test_build_config_defaults_rejects_invalid_entry(raw: dict[str, object]) -> None:
    """Invalid values or unknown keys should cause config defaults to be rejected."""
    assert config.build_config_defaults(raw) is None


def test_parse_config_sections_accepts_defaults_and_functions() -> None:
    """Both sections are optional and returned separately."""
    sections = config.parse_config_sections(
        {"defaults": {"--out": "json"}, "functions": {"answer": "6 * 7"}}
    )

    assert sections == ({"--out": "json"}, {"answer": "6 * 7"})
    assert config.parse_config_sections({}) == ({}, {})


@pytest.mark.parametrize(
    "raw",
    [
        {"extra": {}},
        {"defaults": []},
        {"functions": {"answer": 42}},
        {"functions": {"bad name": "1"}},
        {"functions": {"broken": "1 +"}},
        {"functions": {"answer": "6 $ 7"}},
    ],
)
def test_parse_config_sections_rejects_malformed(raw: dict[str, object]) -> None:
    """Unknown sections and invalid function definitions are rejected."""
    assert config.parse_config_sections(raw) is None


def test_is_valid_function_definition() -> None:
    """Function names must be identifiers and bodies must parse."""
    assert config.is_valid_function_definition("tax_rate", "max(1, 2) * 3") is True
    assert config.is_valid_function_definition("1abc", "1") is False
    assert config.is_valid_function_definition("x", "(1") is False


def test_validate_str_option() -> None:
    """--out accepts known formats only."""
    assert config.validate_str_option("--out", "text") == "text"
    assert config.validate_str_option("--out", "JSON") == "JSON"
    assert config.validate_str_option("--out", "gfm") is None
    assert config.validate_str_option("--out", None) is None


def test_parse_config_argument_prefers_cli_value() -> None:
    """--config argument should override default config name."""
    argv = ["arith", "eval", "--config", "custom.json", "1"]

    assert config.parse_config_argument(argv) == "custom.json"


def test_parse_config_argument_supports_equals_form() -> None:
    """--config=FILE format should be parsed."""
    argv = ["arith", "eval", "--config=inline.json", "1"]

    assert config.parse_config_argument(argv) == "inline.json"


def test_parse_config_argument_default() -> None:
    """Default config name should be used when not specified."""
    assert config.parse_config_argument(["arith", "eval", "1"]) == ".arith.json"


def test_load_cli_config_reads_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """load_cli_config should load defaults and functions from config file."""
    config_path = tmp_path / ".arith.json"
    config_path.write_text(
        json.dumps({"defaults": {"--out": "json"}, "functions": {"answer": "42"}}),
        encoding="utf-8",
    )

    monkeypatch.chdir(config_path.parent)
    loaded = config.load_cli_config(["arith"])

    assert loaded.defaults == {"out": "json"}
    assert loaded.functions == {"answer": "42"}


def test_load_cli_config_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A missing config file yields empty defaults."""
    monkeypatch.chdir(tmp_path)

    loaded = config.load_cli_config(["arith"])

    assert loaded == config.LoadedCliConfig(defaults={}, functions={})


def test_load_cli_config_malformed_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Malformed config should raise a BadParameter error."""
    config_path = tmp_path / ".arith.json"
    config_path.write_text("{bad json", encoding="utf-8")

    monkeypatch.chdir(config_path.parent)
    with pytest.raises(typer.BadParameter, match="Malformed config"):
        config.load_cli_config(["arith"])


@pytest.mark.parametrize(
    "payload",
    [
        {"defaults": {"--out": "yaml"}},
        {"functions": {"broken": "1 +"}},
        {"unknown": True},
    ],
)
def test_load_cli_config_invalid_content(
    payload: dict[str, object], tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Invalid config content should raise a BadParameter error."""
    (tmp_path / "custom.json").write_text(json.dumps(payload), encoding="utf-8")

    monkeypatch.chdir(tmp_path)
    with pytest.raises(typer.BadParameter, match="Malformed config"):
        config.load_cli_config(["arith", "--config", "custom.json"])


def test_build_default_map_splits_commands() -> None:
    """verbose is global and use_builtins only applies to eval."""
    default_map = config.build_default_map(
        {"verbose": True, "out": "json", "use_builtins": False, "color_flag": True}
    )

    assert default_map["eval"] == {"out": "json", "use_builtins": False, "color_flag": True}
    assert default_map["tokens"] == {"out": "json", "color_flag": True}
    assert default_map["parse"] == {"out": "json", "color_flag": True}


def test_log_applied_config_defaults(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Applied defaults and function names should be logged at INFO."""
    monkeypatch.setattr(config, "CONFIG_DEFAULTS", {"out": "json", "ignored": 1})
    monkeypatch.setattr(config, "CONFIG_FUNCTIONS", {"answer": "42"})
    caplog.set_level(logging.INFO, logger="arith")

    config.log_applied_config_defaults("eval")

    assert "Config defaults applied (eval)" in caplog.text
    assert "--out='json'" in caplog.text
    assert "functions=['answer']" in caplog.text
    assert "ignored" not in caplog.text


def test_log_command_arguments(caplog: pytest.LogCaptureFixture) -> None:
    """Command arguments should be logged sorted by name."""
    caplog.set_level(logging.INFO, logger="arith")

    config.log_command_arguments(SimpleNamespace(out="text", expression="1"), "eval")

    assert "Command arguments (eval): expression='1', out='text'" in caplog.text


def test_log_command_arguments_silent_below_info(caplog: pytest.LogCaptureFixture) -> None:
    """Nothing is logged when INFO is disabled."""
    caplog.set_level(logging.WARNING, logger="arith")

    config.log_command_arguments(SimpleNamespace(out="text"), "eval")

    assert caplog.text == ""
