"""Custom exception hierarchy for the character sheet rules engine.

All exceptions inherit from CharsheetError, enabling unified error handling
at the application boundary while preserving domain-specific context in a
``details`` mapping.

Example:
    >>> from charsheet.core.exceptions import InvalidDiceExpression
    >>> raise InvalidDiceExpression("Unrecognised dice notation", expression="2x6")
"""

from __future__ import annotations

from typing import Any


class CharsheetError(Exception):
    """Base exception for all character sheet errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Rules Engine Domain Exceptions
# =============================================================================


class RulesEngineError(CharsheetError):
    """Base exception for errors raised by the rules engine."""


class InvalidDiceExpression(RulesEngineError):
    """Raised when a dice string is not in ``NdM`` or ``dM`` notation."""

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the error with the offending expression.

        Args:
            message: Human-readable error description.
            expression: The dice expression that failed to parse.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if expression is not None:
            combined_details["expression"] = expression
        super().__init__(message, details=combined_details)
        self.expression = expression


class SpellSlotError(RulesEngineError):
    """Raised when a spell slot cannot be expended or does not exist."""

    def __init__(
        self,
        message: str,
        *,
        level: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if level is not None:
            combined_details["level"] = level
        super().__init__(message, details=combined_details)


class ClassActionError(RulesEngineError):
    """Raised when a class action does not exist or has no uses left."""

    def __init__(
        self,
        message: str,
        *,
        action_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.action_id = action_id
        combined_details = details or {}
        if action_id is not None:
            combined_details["action_id"] = action_id
        super().__init__(message, details=combined_details)


# =============================================================================
# Boundary Exceptions
# =============================================================================


class RecordDecodeError(CharsheetError):
    """Raised when an API character record cannot be decoded.

    This covers string-encoded JSON sub-structures (skills, weapons, coins,
    items, spell slots, class actions, spells, details) that are malformed
    or have the wrong shape.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the decode error with the failing field.

        Args:
            message: Human-readable error description.
            field_name: Record key whose value could not be decoded.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        super().__init__(message, details=combined_details)


class ConfigurationError(CharsheetError):
    """Raised when application configuration is invalid or missing."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with the offending key.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


__all__ = [
    "CharsheetError",
    "RulesEngineError",
    "InvalidDiceExpression",
    "SpellSlotError",
    "ClassActionError",
    "RecordDecodeError",
    "ConfigurationError",
]
