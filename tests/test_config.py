"""
Tests for configuration loading.
"""

from datetime import time
from pathlib import Path

import pytest

from slotfinder.config import AppConfig, WorkdayConfig, load_config


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestWorkdayConfig:
    """Tests for the workday window section."""

    def test_defaults(self):
        workday = WorkdayConfig().to_workday()

        assert workday.start_time == time(7, 0)
        assert workday.end_time == time(19, 0)
        assert workday.minutes == 720

    def test_parses_time_strings(self):
        config = WorkdayConfig(start_time="09:30", end_time="17:00")

        assert config.start_time == time(9, 30)
        assert config.to_workday().minutes == 450

    def test_rejects_inverted_window(self):
        with pytest.raises(ValueError, match="end_time must be later"):
            WorkdayConfig(start_time="17:00", end_time="09:00")


class TestAppConfig:
    """Tests for the application configuration."""

    def test_defaults(self):
        config = AppConfig()

        assert config.duration_minutes == 30
        assert config.on_invalid_record == "skip"
        assert config.calendar_file is None

    def test_rejects_non_positive_duration(self):
        with pytest.raises(ValueError, match="duration_minutes"):
            AppConfig(duration_minutes=0)

    def test_rejects_unknown_policy(self):
        with pytest.raises(ValueError):
            AppConfig(on_invalid_record="ignore")

    def test_load_from_yaml(self, tmp_path):
        config_path = _write(
            tmp_path / "config.yaml",
            'workday:\n  start_time: "08:00"\n  end_time: "18:00"\n'
            "calendar_file: team.csv\n"
            "duration_minutes: 45\n"
            "on_invalid_record: abort\n",
        )

        config = AppConfig.load_from_yaml(config_path)

        assert config.workday.start_time == time(8, 0)
        assert config.duration_minutes == 45
        assert config.on_invalid_record == "abort"
        assert config.calendar_file == tmp_path / "team.csv"

    def test_unquoted_times_are_rejected(self, tmp_path):
        """YAML reads 19:00 as the integer 1140, which must not pass as a time."""
        config_path = _write(tmp_path / "config.yaml", "workday:\n  end_time: 19:00\n")

        with pytest.raises(ValueError, match="quoted strings"):
            AppConfig.load_from_yaml(config_path)

    def test_empty_yaml_uses_defaults(self, tmp_path):
        config = AppConfig.load_from_yaml(_write(tmp_path / "config.yaml", ""))

        assert config == AppConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(_write(tmp_path / "config.yaml", "workday: [unclosed\n"))

    def test_non_mapping_root(self, tmp_path):
        with pytest.raises(ValueError, match="mapping at the root"):
            AppConfig.load_from_yaml(_write(tmp_path / "config.yaml", "- a\n- b\n"))


def test_load_config_falls_back_to_defaults(tmp_path, monkeypatch):
    """Without an explicit or discoverable file, defaults are used."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("slotfinder.config.get_default_config_path", lambda: tmp_path / "config.yaml")

    assert load_config() == AppConfig()


def test_load_config_requires_explicit_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")
