"""
Application settings loaded from environment variables.
It centralizes cross-cutting concerns like settings and logging used by the dashboard.
Keeping these helpers isolated reduces duplication and keeps domain modules focused on business logic.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    PROJECT_NAME: str = "protocol-vs-banks"
    ENV: str = "local"
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in VALID_LOG_LEVELS:
            supported = ", ".join(sorted(VALID_LOG_LEVELS))
            raise ValueError(f"LOG_LEVEL must be one of {supported}, got: {value!r}")
        return normalized

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.LOG_LEVEL)


def load_settings(*, load_env: bool = True) -> Settings:
    """Load and validate environment settings from `.env` and process environment."""

    if load_env:
        load_dotenv()

    try:
        return Settings.model_validate(dict(os.environ))
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor for application settings."""

    return load_settings()
