"""Countdown timer with a one-line progress bar display."""

import math
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from rich.console import Console
from rich.live import Live
from rich.text import Text

from pomodoro_cli.utils.ui.console import get_console

BAR_WIDTH = 20
FILLED = "█"
EMPTY = "-"


def render_progress_bar(total_minutes: int, elapsed_seconds: int) -> str:
    """Render elapsed/total as a fixed-width bar of filled and empty glyphs."""
    total_seconds = total_minutes * 60
    if total_seconds <= 0:
        filled = BAR_WIDTH
    else:
        # Half units round up, not to even
        filled = math.floor(elapsed_seconds * BAR_WIDTH / total_seconds + 0.5)
        filled = max(0, min(BAR_WIDTH, filled))
    return FILLED * filled + EMPTY * (BAR_WIDTH - filled)


@dataclass
class CountdownState:
    """Clock state for a single phase.

    ``tick`` holds all per-second logic so callers decide how ticks are
    delivered (real sleep, event loop, or a test stepping simulated time).
    """

    total_minutes: int
    minutes: int = field(init=False)
    seconds: int = field(init=False, default=0)
    elapsed: int = field(init=False, default=0)

    def __post_init__(self):
        self.minutes = self.total_minutes

    @property
    def finished(self) -> bool:
        return self.minutes == 0 and self.seconds == 0

    def tick(self) -> bool:
        """Advance one second. Returns True once the clock reads 00:00."""
        if self.finished:
            return True

        self.elapsed += 1
        if self.seconds == 0:
            self.minutes -= 1
            self.seconds = 59
        else:
            self.seconds -= 1
        return self.finished

    @property
    def remaining(self) -> str:
        return f"{self.minutes:02d}:{self.seconds:02d}"


def format_countdown(label: str, state: CountdownState) -> str:
    """Format the single status line shown while a countdown runs."""
    bar = render_progress_bar(state.total_minutes, state.elapsed)
    return f"{label}: [{bar}] {state.remaining}"


def run_countdown(
    minutes: int,
    label: str,
    *,
    console: Console | None = None,
    sleep: Callable[[float], None] | None = None,
) -> CountdownState:
    """
    Block until *minutes* have been counted down, redrawing one line per second.

    Returns the final state, which always reads 00:00.
    """
    console = console or get_console()
    sleep = sleep or time.sleep
    state = CountdownState(minutes)

    with Live(
        Text(format_countdown(label, state)),
        console=console,
        auto_refresh=False,
        transient=False,
    ) as live:
        done = state.finished
        while not done:
            sleep(1)
            done = state.tick()
            live.update(Text(format_countdown(label, state)), refresh=True)

    return state
