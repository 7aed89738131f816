"""Tests for configuration management."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from pomodoro_cli.config import Config, ConfigManager, default_stats_path


def test_default_config():
    """Test default configuration."""
    config = Config()
    assert config.timer.work_minutes == 25
    assert config.timer.break_minutes == 5
    assert config.notifications.enabled is True
    assert config.notifications.title == "Pomodoro Timer"
    assert config.stats.file is None


def test_default_icon_is_bundled():
    """The default notification icon ships with the package."""
    assert Path(Config().notifications.icon).is_file()


def test_durations_must_be_positive():
    with pytest.raises(ValidationError):
        Config(timer={"work_minutes": 0})


def test_missing_file_gives_defaults(tmp_path):
    manager = ConfigManager(config_dir=tmp_path / "config")
    assert manager.config == Config()


def test_config_save_load(tmp_path):
    """Test saving and loading configuration."""
    manager = ConfigManager(config_dir=tmp_path / "config")
    config = Config(timer={"work_minutes": 50, "break_minutes": 10})

    manager.save_config(config)

    reloaded = ConfigManager(config_dir=tmp_path / "config").config
    assert reloaded.timer.work_minutes == 50
    assert reloaded.timer.break_minutes == 10


def test_saved_config_is_indented_json(tmp_path):
    manager = ConfigManager(config_dir=tmp_path)
    manager.save_config()

    data = json.loads(manager.config_file.read_text())
    assert data["timer"] == {"work_minutes": 25, "break_minutes": 5}
    assert "\n  " in manager.config_file.read_text()


def test_corrupted_config_returns_default(tmp_path):
    (tmp_path / "config.json").write_text("{not json")

    assert ConfigManager(config_dir=tmp_path).load_config() == Config()


def test_invalid_values_return_default(tmp_path):
    (tmp_path / "config.json").write_text('{"timer": {"work_minutes": -1}}')

    assert ConfigManager(config_dir=tmp_path).load_config() == Config()


class TestStatsPath:
    def test_override_wins(self, tmp_path):
        manager = ConfigManager(config_dir=tmp_path)
        manager.save_config(Config(stats={"file": "/elsewhere/stats.json"}))

        assert manager.stats_path(tmp_path / "x.json") == tmp_path / "x.json"

    def test_config_file_setting(self, tmp_path):
        manager = ConfigManager(config_dir=tmp_path)
        manager.save_config(Config(stats={"file": str(tmp_path / "mine.json")}))

        assert manager.stats_path() == tmp_path / "mine.json"

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        manager = ConfigManager(config_dir=tmp_path / "config")

        assert manager.stats_path() == tmp_path / "data" / "stats.json"
        assert default_stats_path() == tmp_path / "data" / "stats.json"
