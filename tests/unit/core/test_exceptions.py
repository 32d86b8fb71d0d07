"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from charsheet.core.exceptions import (
    CharsheetError,
    ClassActionError,
    ConfigurationError,
    InvalidDiceExpression,
    RecordDecodeError,
    RulesEngineError,
    SpellSlotError,
)


class TestCharsheetError:
    """Tests for the base CharsheetError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = CharsheetError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = CharsheetError(
            "Test error",
            details={"key": "value", "count": 42},
        )
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        exc = CharsheetError("Test", details={"x": 1})
        repr_str = repr(exc)
        assert "CharsheetError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestRulesEngineExceptions:
    """Tests for rules engine exceptions."""

    def test_invalid_dice_expression(self) -> None:
        """Test InvalidDiceExpression keeps the offending expression."""
        exc = InvalidDiceExpression("Bad dice", expression="2x6")
        assert exc.expression == "2x6"
        assert exc.details["expression"] == "2x6"
        assert "expression='2x6'" in str(exc)

    def test_invalid_dice_expression_without_expression(self) -> None:
        exc = InvalidDiceExpression("Bad dice")
        assert exc.expression is None
        assert exc.details == {}

    def test_spell_slot_error_with_level(self) -> None:
        exc = SpellSlotError("No slots", level=3, details={"used": 2})
        assert exc.details == {"used": 2, "level": 3}

    def test_class_action_error_keeps_id(self) -> None:
        exc = ClassActionError("No uses left", action_id="rage")

        assert exc.action_id == "rage"
        assert str(exc) == "No uses left [action_id='rage']"


class TestBoundaryExceptions:
    """Tests for record decoding and configuration exceptions."""

    def test_record_decode_error_field_name(self) -> None:
        exc = RecordDecodeError("Bad JSON", field_name="weapons")
        assert exc.details["field_name"] == "weapons"

    def test_configuration_error_with_key(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Missing config", config_key="DICE__SEED")
        assert exc.details["config_key"] == "DICE__SEED"


class TestExceptionHierarchy:
    """Tests for exception inheritance hierarchy."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            RulesEngineError,
            InvalidDiceExpression,
            SpellSlotError,
            ClassActionError,
            RecordDecodeError,
            ConfigurationError,
        ],
    )
    def test_all_inherit_from_base(self, exc_class: type[CharsheetError]) -> None:
        """Test all exceptions inherit from CharsheetError."""
        assert issubclass(exc_class, CharsheetError)

    def test_engine_errors_share_base(self) -> None:
        assert issubclass(InvalidDiceExpression, RulesEngineError)
        assert issubclass(SpellSlotError, RulesEngineError)
        assert issubclass(ClassActionError, RulesEngineError)
        assert not issubclass(RecordDecodeError, RulesEngineError)

    def test_catch_by_base(self) -> None:
        """Test catching exceptions by base class."""
        with pytest.raises(CharsheetError):
            raise InvalidDiceExpression("Test", expression="d")
