"""Pydantic model for command-line settings."""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel, frozen=True):
    """Runtime configuration loaded from environment variables."""

    project_dir: str = "."
    agent_dir_name: str = ".agent"
    log_level: str = "WARNING"
    no_color: bool = False

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            msg = f"Unknown log level '{value}'. Valid: {', '.join(LOG_LEVELS)}"
            raise ValueError(msg)
        return level

    @field_validator("agent_dir_name")
    @classmethod
    def _check_agent_dir_name(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value or value in (".", ".."):
            msg = f"Agent folder name must be a single path segment, got '{value}'"
            raise ValueError(msg)
        return value


def _is_true(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes")


def load_settings() -> Settings:
    """Load settings from the environment, reading a `.env` file first."""
    load_dotenv(find_dotenv(usecwd=True))

    return Settings(
        project_dir=os.getenv("AG_CSHARP_PROJECT_DIR", "."),
        agent_dir_name=os.getenv("AG_CSHARP_AGENT_DIR_NAME", ".agent"),
        log_level=os.getenv("AG_CSHARP_LOG_LEVEL", "WARNING"),
        # https://no-color.org: any non-empty NO_COLOR disables colour
        no_color=bool(os.getenv("NO_COLOR")) or _is_true(os.getenv("AG_CSHARP_NO_COLOR")),
    )
