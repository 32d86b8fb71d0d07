"""Tests for ability modifier and proficiency arithmetic."""

from __future__ import annotations

import math

import pytest

from charsheet.engine.abilities import (
    ability_modifier,
    ability_modifiers,
    clamp_level,
    modifier,
    proficiency_bonus,
    proficiency_modifier,
)
from charsheet.models import Ability, AbilityScores, ProficiencyLevel


class TestModifier:
    """Tests for the modifier function."""

    def test_modifier_at_10(self) -> None:
        """Score of 10 gives modifier of 0."""
        assert modifier(10) == 0

    def test_modifier_at_9_floors(self) -> None:
        """Score of 9 floors to -1 rather than truncating to 0."""
        assert modifier(9) == -1

    def test_modifier_at_20(self) -> None:
        assert modifier(20) == 5

    def test_modifier_at_0(self) -> None:
        assert modifier(0) == -5

    def test_modifier_at_99(self) -> None:
        assert modifier(99) == 44

    def test_negative_score_uses_floor(self) -> None:
        """Negative scores follow the same floor formula."""
        assert modifier(-1) == -6

    @pytest.mark.parametrize("score", range(0, 100))
    def test_matches_floor_formula(self, score: int) -> None:
        assert modifier(score) == math.floor((score - 10) / 2)

    @pytest.mark.parametrize(
        "score,expected",
        [
            (1, -5), (3, -4), (7, -2), (8, -1), (11, 0),
            (12, 1), (15, 2), (16, 3), (18, 4), (30, 10),
        ],
    )
    def test_modifier_table(self, score: int, expected: int) -> None:
        assert modifier(score) == expected


class TestAbilityModifiers:
    """Tests for modifiers derived from AbilityScores."""

    def test_single_ability(self, sample_abilities: AbilityScores) -> None:
        assert ability_modifier(sample_abilities, Ability.STR) == 2
        assert ability_modifier(sample_abilities, Ability.CHA) == -1

    def test_all_modifiers_in_order(self, sample_abilities: AbilityScores) -> None:
        modifiers = ability_modifiers(sample_abilities)

        assert list(modifiers) == list(Ability)
        assert modifiers == {
            Ability.STR: 2,
            Ability.DEX: 3,
            Ability.CON: 1,
            Ability.INT: 0,
            Ability.WIS: 1,
            Ability.CHA: -1,
        }

    def test_modifier_follows_score_change(self, sample_abilities: AbilityScores) -> None:
        """Modifiers are recomputed from the score, never cached."""
        stronger = sample_abilities.model_copy(update={"strength": 18})

        assert ability_modifier(stronger, Ability.STR) == 4
        assert ability_modifier(sample_abilities, Ability.STR) == 2


class TestProficiencyBonus:
    """Tests for the level-derived proficiency bonus."""

    @pytest.mark.parametrize(
        "level,expected",
        [(1, 2), (4, 2), (5, 3), (8, 3), (9, 4), (12, 4), (13, 5), (16, 5), (17, 6), (20, 6)],
    )
    def test_bonus_by_level(self, level: int, expected: int) -> None:
        assert proficiency_bonus(level) == expected

    @pytest.mark.parametrize("level", range(1, 21))
    def test_matches_formula(self, level: int) -> None:
        assert proficiency_bonus(level) == math.floor((level - 1) / 4) + 2

    @pytest.mark.parametrize("level,expected", [(-3, 1), (0, 1), (1, 1), (20, 20), (25, 20)])
    def test_clamp_level(self, level: int, expected: int) -> None:
        assert clamp_level(level) == expected


class TestProficiencyModifier:
    """Tests for the proficiency multiplier."""

    def test_none(self) -> None:
        assert proficiency_modifier(5, ProficiencyLevel.NONE) == 0

    def test_proficient(self) -> None:
        assert proficiency_modifier(5, ProficiencyLevel.PROFICIENT) == 3

    def test_expertise(self) -> None:
        assert proficiency_modifier(5, ProficiencyLevel.EXPERTISE) == 6

    def test_jack_of_all_trades_rounds_down(self) -> None:
        assert proficiency_modifier(5, ProficiencyLevel.JACK_OF_ALL_TRADES) == 1
        assert proficiency_modifier(9, ProficiencyLevel.JACK_OF_ALL_TRADES) == 2

    def test_accepts_plain_strings(self) -> None:
        """API values compare equal to the enum members."""
        assert proficiency_modifier(1, "expertise") == 4  # type: ignore[arg-type]

    @pytest.mark.parametrize("level", range(1, 21))
    def test_monotonic_ordering(self, level: int) -> None:
        """none <= jack-of-all-trades <= proficient <= expertise."""
        values = [
            proficiency_modifier(level, proficiency)
            for proficiency in (
                ProficiencyLevel.NONE,
                ProficiencyLevel.JACK_OF_ALL_TRADES,
                ProficiencyLevel.PROFICIENT,
                ProficiencyLevel.EXPERTISE,
            )
        ]
        assert values == sorted(values)
