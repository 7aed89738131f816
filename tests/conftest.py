"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real log/config/stats files.
"""

from __future__ import annotations

import logging
from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point the log and config directories at *tmp_path* for every test."""
    import pomodoro_cli.utils.logger as logger_mod
    from pomodoro_cli.config import get_config_manager

    log_dir = tmp_path / "logs"
    config_dir = tmp_path / "config"

    logger_mod._logger = None
    get_config_manager.cache_clear()
    with patch("pomodoro_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
        with patch("pomodoro_cli.config.user_config_dir", return_value=str(config_dir)):
            yield tmp_path

    for handler in logging.getLogger("pomodoro_cli").handlers[:]:
        handler.close()
    logging.getLogger("pomodoro_cli").handlers.clear()
    logger_mod._logger = None
    get_config_manager.cache_clear()


# ---------------------------------------------------------------------------
# Collaborator doubles
# ---------------------------------------------------------------------------


class ScriptedPrompter:
    """Answers prompts from a fixed list and records the questions asked."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.questions: list[str] = []

    def ask(self, question: str) -> str:
        self.questions.append(question)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {question!r}")
        return self.answers.pop(0).strip().lower()


@pytest.fixture()
def console():
    """A rich Console writing to an in-memory buffer."""
    return Console(file=StringIO(), force_terminal=False, width=100)


@pytest.fixture()
def stats_path(tmp_path):
    return tmp_path / "data" / "stats.json"


@pytest.fixture()
def make_prompter():
    """Factory for :class:`ScriptedPrompter` instances."""
    return ScriptedPrompter
