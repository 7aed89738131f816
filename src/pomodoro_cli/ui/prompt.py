"""Line-based question/answer prompts used between Pomodoro phases."""

from typing import Protocol

from rich.console import Console
from rich.prompt import Prompt

from pomodoro_cli.utils.ui.console import get_console

YES_ANSWERS = frozenset({"e", "evet", "y", "yes"})


class Prompter(Protocol):
    """Anything that can ask a question and return the user's answer."""

    def ask(self, question: str) -> str: ...


class ConsolePrompter:
    """Reads answers from stdin through the shared rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or get_console()

    def ask(self, question: str) -> str:
        answer = Prompt.ask(question, console=self.console, default="", show_default=False)
        return normalize_answer(answer)


def normalize_answer(answer: str | None) -> str:
    """Trim and lower-case an answer before matching."""
    return (answer or "").strip().lower()


def is_yes(answer: str) -> bool:
    return normalize_answer(answer) in YES_ANSWERS
