"""Daily completion stats persisted as a flat JSON object."""

import json
import os
from datetime import date
from pathlib import Path

from rich.console import Console

from pomodoro_cli.utils.logger import get_logger
from pomodoro_cli.utils.ui.console import get_console

Stats = dict[str, int]


class StatsStore:
    """Reads and writes the ``{"YYYY-MM-DD": count}`` stats file."""

    def __init__(self, path: Path, console: Console | None = None):
        self.path = Path(path)
        self.console = console or get_console()

    def ensure_file(self) -> None:
        """Create the parent directory and an empty ``{}`` file if missing."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self.path.write_text("{}", encoding="utf-8")

    def load(self) -> Stats:
        """Load stats. Returns an empty mapping when the file is empty or corrupted.

        Entries whose count is not a non-negative integer are dropped with a
        warning; the remaining days are kept.
        """
        self.ensure_file()
        try:
            raw = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            self._warn_corrupted(f"not UTF-8 text ({e.reason})")
            return {}
        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            self._warn_corrupted(f"invalid JSON ({e.msg})")
            return {}

        if not isinstance(data, dict):
            self._warn_corrupted(f"expected an object, got {type(data).__name__}")
            return {}

        stats = {day: count for day, count in data.items() if _is_count(count)}
        if len(stats) != len(data):
            bad_days = sorted(set(data) - set(stats))
            self._warn_corrupted(
                f"invalid counts for {', '.join(bad_days)}",
                outcome=f"skipping invalid counts ({len(bad_days)})",
            )
        return stats

    def save(self, stats: Stats) -> None:
        """Write the full mapping, replacing the file in one step where possible."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(stats, f, indent=2)
            os.replace(tmp_path, self.path)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise

    @staticmethod
    def record_completion(stats: Stats, day: str) -> Stats:
        """Return a copy of *stats* with *day* incremented by one."""
        updated = dict(stats)
        updated[day] = updated.get(day, 0) + 1
        return updated

    def record_today(self, today: date | None = None) -> int:
        """Load, increment today's count, save. Returns the new count."""
        day = (today or date.today()).isoformat()
        stats = self.record_completion(self.load(), day)
        self.save(stats)
        get_logger().info("Recorded pomodoro for %s (total %d)", day, stats[day])
        return stats[day]

    def _warn_corrupted(
        self, reason: str, outcome: str = "starting from empty stats"
    ) -> None:
        get_logger().warning("Stats file %s unreadable: %s", self.path, reason)
        self.console.print(
            f"[yellow]⚠ Could not parse {self.path.name}, {outcome}.[/yellow]"
        )


def _is_count(value) -> bool:
    # bool is an int subclass but never a valid count
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
