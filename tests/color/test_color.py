"""Tests for arith.color utilities."""

from __future__ import annotations

import sys

import pytest

from arith import color


def test_should_use_color_respects_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Explicit color flag should override TTY detection."""
    monkeypatch.setattr(sys.stdout, "isatty", lambda: False)

    assert color.should_use_color(True) is True
    assert color.should_use_color(False) is False


def test_should_use_color_uses_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    """When flag is None, use TTY detection."""
    monkeypatch.setattr(sys.stdout, "isatty", lambda: True)

    assert color.should_use_color(None) is True


def test_colorize_noop_when_disabled() -> None:
    """colorize should return original text when disabled."""
    assert color.colorize("hello", "green", False) == "hello"


def test_colorize_wraps_when_enabled() -> None:
    """colorize should wrap text with color codes when enabled."""
    assert color.colorize("hello", "green", True) == "[green]hello[/]"


def test_colorize_escapes_markup() -> None:
    """Markup in the text itself must not be interpreted."""
    assert color.colorize("[x]", "green", True) == "[green]\\[x][/]"


def test_named_helpers_use_their_styles() -> None:
    """Named helpers wrap text in their fixed style."""
    assert color.bright_green("1", True) == "[bright_green]1[/]"
    assert color.magenta("PLUS", True) == "[magenta]PLUS[/]"
    assert color.dim_white("@0", True) == "[dim white]@0[/]"
    assert color.bright_blue("BinaryOp", True) == "[bright_blue]BinaryOp[/]"
    assert color.bright_green("1", False) == "1"
