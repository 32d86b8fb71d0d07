"""Configuration management for the character sheet engine.

Centralized settings built on pydantic-settings, read from environment
variables and an optional ``.env`` file.

Example:
    >>> from charsheet.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'INFO'

Environment Variables:
    CHARSHEET_APP_NAME: Name attached to every log entry
    CHARSHEET_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    CHARSHEET_JSON_LOGS: Emit JSON log lines instead of console output
    CHARSHEET_LOG_FILE: Also write log lines to this file
    CHARSHEET_DICE__SEED: Seed for the default random source
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from charsheet.core.exceptions import ConfigurationError


class DiceSettings(BaseModel):
    """Configuration for dice rolling.

    Attributes:
        seed: Seed for the default random source. ``None`` draws from
            system entropy.
    """

    seed: int | None = Field(
        default=None,
        description="Seed for reproducible rolls",
    )


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Name attached to every log entry.
        log_level: Application logging level.
        json_logs: Render logs as JSON.
        log_file: Optional file that receives a copy of every log line.
        dice: Dice rolling settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHARSHEET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="charsheet",
        description="Application name used in log context",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )
    log_file: str | None = Field(
        default=None,
        description="Path of an additional log file",
    )

    dice: DiceSettings = Field(default_factory=DiceSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If configuration values are invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "DiceSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
