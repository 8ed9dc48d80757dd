"""Runtime settings loaded from environment variables."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class SuggestionScope(str, Enum):
    """Which configured slots the suggestion engine avoids."""
    ALL_DAYS = "all_days"
    SAME_DAY = "same_day"


class Settings(BaseSettings):
    """Settings loaded from ``SCHEDULE_VALIDATOR_*`` environment variables.

    For local use, put them in a .env file in the working directory.
    """

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Behaviour
    suggestion_scope: SuggestionScope = Field(
        default=SuggestionScope.ALL_DAYS,
        description="Breaks checked when suggesting a replacement slot",
    )
    storage_days: bool = Field(
        default=False,
        description="Input day numbers use the 0-6 stored format (0=Sunday)",
    )

    model_config = {
        "env_prefix": "SCHEDULE_VALIDATOR_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
