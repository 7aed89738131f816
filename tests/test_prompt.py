"""Tests for the interactive prompt helpers (ui/prompt.py)."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from pomodoro_cli.ui.prompt import ConsolePrompter, is_yes, normalize_answer


@pytest.mark.parametrize("answer", ["e", "E", " e ", "evet", "y", "YES"])
def test_yes_answers(answer):
    assert is_yes(answer)


@pytest.mark.parametrize("answer", ["h", "hayir", "n", "no", "", "maybe"])
def test_everything_else_is_no(answer):
    assert not is_yes(answer)


def test_normalize_handles_none():
    assert normalize_answer(None) == ""


def test_console_prompter_trims_and_lowercases(monkeypatch):
    console = Console(file=StringIO())
    monkeypatch.setattr("builtins.input", lambda *args: "  E \n")

    answer = ConsolePrompter(console).ask("Start break? (e/h)")

    assert answer == "e"
    assert "Start break? (e/h)" in console.file.getvalue()


def test_console_prompter_empty_answer(monkeypatch):
    console = Console(file=StringIO())
    monkeypatch.setattr("builtins.input", lambda *args: "")

    assert ConsolePrompter(console).ask("New work duration in minutes") == ""
