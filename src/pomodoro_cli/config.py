"""Configuration management for Pomodoro CLI."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field

_APP_DIR = "pomodoro-cli"
_DEFAULT_ICON = Path(__file__).parent / "assets" / "logo.png"


class TimerConfig(BaseModel):
    """Default phase durations in minutes."""

    work_minutes: int = Field(default=25, ge=1)
    break_minutes: int = Field(default=5, ge=1)


class NotificationConfig(BaseModel):
    """Desktop notification settings."""

    enabled: bool = Field(default=True)
    title: str = Field(default="Pomodoro Timer")
    app_name: str = Field(default="Pomodoro CLI")
    icon: str = Field(default=str(_DEFAULT_ICON))
    sound: bool = Field(default=True)
    timeout: int = Field(default=10)


class StatsConfig(BaseModel):
    """Stats file location. ``None`` means ``<cwd>/data/stats.json``."""

    file: Optional[str] = Field(default=None)


class Config(BaseModel):
    """Main configuration."""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)
    stats: StatsConfig = Field(default_factory=StatsConfig)


def default_stats_path() -> Path:
    """Stats file under the current working directory, resolved at call time."""
    return Path.cwd() / "data" / "stats.json"


class ConfigManager:
    """Loads and saves the Pomodoro CLI configuration file."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir or Path(user_config_dir(_APP_DIR))
        self.config_file = self.config_dir / "config.json"
        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file, falling back to defaults."""
        if self.config_file.exists():
            try:
                with open(self.config_file, encoding="utf-8") as f:
                    data = json.load(f)
                return Config(**data)
            except Exception:
                # If config is corrupted, return default
                return Config()
        return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)
        self._config = config

    def stats_path(self, override: Optional[Path] = None) -> Path:
        """Resolve the stats file: explicit override, then config, then cwd."""
        if override is not None:
            return Path(override)
        if self.config.stats.file:
            return Path(self.config.stats.file).expanduser()
        return default_stats_path()


@lru_cache(maxsize=1)
def get_config_manager() -> ConfigManager:
    """Get the process-wide ConfigManager."""
    return ConfigManager()
