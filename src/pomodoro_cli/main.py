"""Main entry point for Pomodoro CLI."""

import typer

from pomodoro_cli import __version__
from pomodoro_cli.commands import timer
from pomodoro_cli.utils.typer_helpers import SuggestingGroup
from pomodoro_cli.utils.ui.console import get_console

# Create main app with custom group class
app = typer.Typer(
    name="pomodoro",
    cls=SuggestingGroup,
    help="A command-line Pomodoro timer with daily stats",
    no_args_is_help=True,
)

console = get_console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]Pomodoro CLI[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


@app.callback()
def callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """A command-line Pomodoro timer with daily stats."""


app.command("start")(timer.start)
app.command("stats")(timer.stats)


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
