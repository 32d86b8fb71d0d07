"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        CharsheetError: Base exception for all application errors.
        InvalidDiceExpression: Malformed dice notation.
        SpellSlotError: Spell slot cannot be expended.
        ClassActionError: Class action is unknown or has no uses left.
        RecordDecodeError: API character record cannot be decoded.
        ConfigurationError: Configuration-related errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        log_context: Scope log context keys to a block.
"""

from __future__ import annotations

from charsheet.core.config import (
    DiceSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from charsheet.core.exceptions import (
    CharsheetError,
    ClassActionError,
    ConfigurationError,
    InvalidDiceExpression,
    RecordDecodeError,
    RulesEngineError,
    SpellSlotError,
)
from charsheet.core.logging import (
    configure_logging,
    get_logger,
    log_context,
)


__all__ = [
    # Exceptions
    "CharsheetError",
    "RulesEngineError",
    "InvalidDiceExpression",
    "SpellSlotError",
    "ClassActionError",
    "RecordDecodeError",
    "ConfigurationError",
    # Configuration
    "Settings",
    "DiceSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "log_context",
]
