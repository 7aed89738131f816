"""Pomodoro timer commands for Pomodoro CLI."""

from pathlib import Path

import typer

from pomodoro_cli.config import get_config_manager
from pomodoro_cli.models.focus.notifier import DesktopNotifier
from pomodoro_cli.models.focus.session import PomodoroSession, SessionConfig
from pomodoro_cli.models.focus.stats import StatsStore
from pomodoro_cli.ui.prompt import ConsolePrompter
from pomodoro_cli.utils.exit_codes import ERROR_IO, INTERRUPTED
from pomodoro_cli.utils.logger import get_logger
from pomodoro_cli.utils.ui.console import get_console

console = get_console()

STATS_FILE_OPTION = typer.Option(
    None,
    "--stats-file",
    envvar="POMODORO_STATS_FILE",
    help="Stats JSON file (default: ./data/stats.json)",
)


def start(
    work: int | None = typer.Option(
        None,
        "--calis",
        "-c",
        "--work",
        min=1,
        help="Work duration in minutes (default: 25)",
    ),
    rest: int | None = typer.Option(
        None,
        "--mola",
        "-m",
        "--break",
        min=1,
        help="Break duration in minutes (default: 5)",
    ),
    stats_file: Path | None = STATS_FILE_OPTION,
    no_notify: bool = typer.Option(
        False, "--no-notify", help="Disable desktop notifications"
    ),
) -> None:
    """Start an interactive Pomodoro session."""
    config_manager = get_config_manager()
    config = config_manager.config

    session_config = SessionConfig(
        work_minutes=work or config.timer.work_minutes,
        break_minutes=rest or config.timer.break_minutes,
    )
    notifier = DesktopNotifier.from_config(config.notifications, console=console)
    if no_notify:
        notifier.enabled = False

    stats_path = config_manager.stats_path(stats_file)
    session = PomodoroSession(
        session_config,
        prompter=ConsolePrompter(console),
        stats_store=StatsStore(stats_path, console=console),
        notifier=notifier,
        console=console,
    )

    try:
        session.run()
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️  Session interrupted[/yellow]")
        raise typer.Exit(INTERRUPTED) from None
    except OSError as e:
        get_logger().error("Could not write stats file %s: %s", stats_path, e)
        console.print(f"[red]✗ Could not write stats file {stats_path}: {e}[/red]")
        raise typer.Exit(ERROR_IO) from e


def stats(stats_file: Path | None = STATS_FILE_OPTION) -> None:
    """Show daily Pomodoro statistics."""
    stats_path = get_config_manager().stats_path(stats_file)
    try:
        daily = StatsStore(stats_path, console=console).load()
    except OSError as e:
        console.print(f"[red]✗ Could not read stats file {stats_path}: {e}[/red]")
        raise typer.Exit(ERROR_IO) from e

    console.print("[yellow]📊 Daily Pomodoros:[/yellow]")
    for day, count in daily.items():
        console.print(f"{day}: {count} Pomodoro", highlight=False)
