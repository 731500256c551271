"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

REMINDER_BACKENDS = ("local", "macos")


@dataclass
class PathsConfig:
    """Path settings."""
    inbox_file: Path = Path("inbox.yaml")
    state_file: Path = Path("state/store.yaml")
    reminders_file: Path = Path("state/reminders.yaml")


@dataclass
class RemindersConfig:
    """Reminder backend settings."""
    backend: str = "local"


@dataclass
class Settings:
    """Application settings."""

    # Secrets (from environment only)
    slack_webhook_url: Optional[str] = None

    # Config sections
    paths: PathsConfig = field(default_factory=PathsConfig)
    reminders: RemindersConfig = field(default_factory=RemindersConfig)

    @property
    def inbox_file(self) -> Path:
        return self.paths.inbox_file

    @property
    def state_file(self) -> Path:
        return self.paths.state_file

    @property
    def reminders_file(self) -> Path:
        return self.paths.reminders_file

    @property
    def reminder_backend(self) -> str:
        return self.reminders.backend


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)

    settings = Settings(
        slack_webhook_url=os.getenv("SLACK_WEBHOOK_URL") or None,
    )

    if "paths" in config:
        for key, value in config["paths"].items():
            setattr(settings.paths, key, Path(value))

    if "reminders" in config:
        for key, value in config["reminders"].items():
            setattr(settings.reminders, key, value)

    if settings.reminders.backend not in REMINDER_BACKENDS:
        raise ValueError(
            f"Unsupported reminder backend: {settings.reminders.backend} "
            f"(expected one of {', '.join(REMINDER_BACKENDS)})"
        )

    return settings
