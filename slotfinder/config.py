"""
Configuration management using Pydantic models loaded from YAML.
"""

from datetime import time
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.models import Workday


class WorkdayConfig(BaseModel):
    """The schedulable window of the day."""
    start_time: time = time(7, 0)
    end_time: time = time(19, 0)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def reject_numeric_times(cls, value):
        """Ensure times are given as HH:MM strings, not numbers."""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            raise ValueError('times must be quoted strings such as "07:00"')
        return value

    @model_validator(mode="after")
    def validate_window_order(self) -> "WorkdayConfig":
        """Ensure the configured window opens before it closes."""
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be later than start_time")
        return self

    def to_workday(self) -> Workday:
        """Build the domain Workday for this window."""
        return Workday(start_time=self.start_time, end_time=self.end_time)


class AppConfig(BaseModel):
    """Application configuration."""
    workday: WorkdayConfig = Field(default_factory=WorkdayConfig)
    calendar_file: Optional[Path] = None
    duration_minutes: int = 30
    on_invalid_record: Literal["skip", "abort"] = "skip"
    has_header: bool = False

    @field_validator("duration_minutes")
    @classmethod
    def validate_duration(cls, value: int) -> int:
        """Ensure the default meeting duration is positive."""
        if value <= 0:
            raise ValueError("duration_minutes must be greater than zero")
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        config = cls(**data)

        # Relative calendar paths are resolved against the config file location
        if config.calendar_file is not None and not config.calendar_file.is_absolute():
            config.calendar_file = config_path.parent / config.calendar_file

        return config


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path


def load_config(config_file: Optional[Path] = None) -> AppConfig:
    """
    Load the configuration, falling back to defaults.

    An explicitly requested file must exist; when none is given and no
    default config.yaml is found, the built-in defaults are used.
    """
    if config_file is not None:
        return AppConfig.load_from_yaml(config_file)

    config_path = get_default_config_path()
    if config_path.exists():
        return AppConfig.load_from_yaml(config_path)

    return AppConfig()
