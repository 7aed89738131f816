"""Interactive Pomodoro session: alternating work and break phases."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from enum import Enum

from rich.console import Console
from rich.panel import Panel

from pomodoro_cli.models.focus.countdown import run_countdown
from pomodoro_cli.models.focus.notifier import DesktopNotifier
from pomodoro_cli.models.focus.stats import StatsStore
from pomodoro_cli.ui.prompt import Prompter, is_yes
from pomodoro_cli.utils.logger import get_logger
from pomodoro_cli.utils.ui.console import get_console


class Phase(Enum):
    WORK = "work"
    ASK_CONTINUE_BREAK = "ask_continue_break"
    ASK_RESIZE = "ask_resize"
    BREAK = "break"
    ASK_CONTINUE_NEXT = "ask_continue_next"
    TERMINATED = "terminated"


@dataclass
class SessionConfig:
    """Work and break durations in minutes, adjustable between cycles."""

    work_minutes: int = 25
    break_minutes: int = 5


def parse_minutes(answer: str, fallback: int) -> int:
    """Parse a positive minute count, keeping *fallback* for anything else."""
    try:
        value = int(answer.strip())
    except (AttributeError, ValueError):
        return fallback
    return value if value > 0 else fallback


class PomodoroSession:
    """
    Runs the work/break state machine until the user stops.

    Exactly one phase is active at a time; every transition is driven either
    by a finished countdown or by a single prompt answer.
    """

    def __init__(
        self,
        config: SessionConfig,
        *,
        prompter: Prompter,
        stats_store: StatsStore,
        notifier: DesktopNotifier,
        countdown: Callable[..., object] | None = None,
        console: Console | None = None,
        today: Callable[[], date] = date.today,
    ):
        self.config = config
        self.prompter = prompter
        self.stats_store = stats_store
        self.notifier = notifier
        self.countdown = countdown or run_countdown
        self.console = console or get_console()
        self.today = today
        self.phase = Phase.WORK
        self.completed = 0
        self._logger = get_logger()

    def step(self) -> Phase:
        """Execute the current phase once and move to the next one."""
        handler = {
            Phase.WORK: self._work,
            Phase.ASK_CONTINUE_BREAK: self._ask_continue_break,
            Phase.ASK_RESIZE: self._ask_resize,
            Phase.BREAK: self._break,
            Phase.ASK_CONTINUE_NEXT: self._ask_continue_next,
        }.get(self.phase)
        if handler is None:
            return self.phase

        next_phase = handler()
        self._logger.debug("Phase %s -> %s", self.phase.value, next_phase.value)
        self.phase = next_phase
        return next_phase

    def run(self) -> int:
        """Run until the user declines to continue. Returns completed work phases."""
        self._logger.info(
            "Session started (work=%d, break=%d)",
            self.config.work_minutes,
            self.config.break_minutes,
        )
        while self.phase is not Phase.TERMINATED:
            self.step()

        self.show_completion_banner()
        self._logger.info("Session finished with %d pomodoro(s)", self.completed)
        return self.completed

    def _work(self) -> Phase:
        minutes = self.config.work_minutes
        self.console.clear()
        self.console.print(
            f"[bold green]🍅 Pomodoro started: {minutes} min of work.[/bold green]"
        )
        self.countdown(minutes, "Remaining", console=self.console)

        self.notifier.notify("Work session finished!")
        self.stats_store.record_today(self.today())
        self.completed += 1
        return Phase.ASK_CONTINUE_BREAK

    def _ask_continue_break(self) -> Phase:
        if is_yes(self.prompter.ask("Start break? (e/h)")):
            return Phase.ASK_RESIZE
        return Phase.TERMINATED

    def _ask_resize(self) -> Phase:
        if not is_yes(self.prompter.ask("Keep the same durations? (e/h)")):
            new_work = self.prompter.ask("New work duration in minutes")
            new_break = self.prompter.ask("New break duration in minutes")
            self.config.work_minutes = parse_minutes(new_work, self.config.work_minutes)
            self.config.break_minutes = parse_minutes(
                new_break, self.config.break_minutes
            )
            self._logger.info(
                "Durations changed to work=%d, break=%d",
                self.config.work_minutes,
                self.config.break_minutes,
            )
        return Phase.BREAK

    def _break(self) -> Phase:
        minutes = self.config.break_minutes
        self.console.clear()
        self.console.print(f"[bold cyan]☕ Break started: {minutes} min[/bold cyan]")
        self.countdown(minutes, "Break", console=self.console)

        self.notifier.notify("Break finished!")
        return Phase.ASK_CONTINUE_NEXT

    def _ask_continue_next(self) -> Phase:
        if is_yes(self.prompter.ask("Start a new Pomodoro? (e/h)")):
            return Phase.WORK
        return Phase.TERMINATED

    def show_completion_banner(self) -> None:
        self.console.clear()
        self.console.print(
            Panel(
                f"""[bold green]🎉 Pomodoro session complete![/bold green]

Pomodoros completed: {self.completed}""",
                border_style="green",
                padding=(1, 2),
            )
        )
