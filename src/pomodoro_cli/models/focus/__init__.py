"""Focus mode - Pomodoro timer system for Pomodoro CLI."""

from .countdown import CountdownState, render_progress_bar, run_countdown
from .notifier import DesktopNotifier
from .session import Phase, PomodoroSession, SessionConfig
from .stats import StatsStore

__all__ = [
    "CountdownState",
    "DesktopNotifier",
    "Phase",
    "PomodoroSession",
    "SessionConfig",
    "StatsStore",
    "render_progress_bar",
    "run_countdown",
]
