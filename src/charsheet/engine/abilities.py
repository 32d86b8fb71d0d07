"""Ability modifier and proficiency bonus arithmetic."""

from __future__ import annotations

from charsheet.core.constants import MAX_CHARACTER_LEVEL, MIN_CHARACTER_LEVEL
from charsheet.models.character import AbilityScores
from charsheet.models.enums import Ability, ProficiencyLevel


def modifier(score: int) -> int:
    """Calculate the ability modifier from an ability score.

    Uses floor division, so odd scores below 10 round down:

        >>> modifier(10)
        0
        >>> modifier(9)
        -1
        >>> modifier(20)
        5
    """
    return (score - 10) // 2


def ability_modifier(abilities: AbilityScores, ability: Ability) -> int:
    """Modifier of one ability from a set of scores."""
    return modifier(abilities.get_score(ability))


def ability_modifiers(abilities: AbilityScores) -> dict[Ability, int]:
    """All six modifiers keyed by ability, in sheet order."""
    return {ability: ability_modifier(abilities, ability) for ability in Ability}


def clamp_level(level: int) -> int:
    """Clamp a level into the playable range before deriving bonuses."""
    return max(MIN_CHARACTER_LEVEL, min(MAX_CHARACTER_LEVEL, level))


def proficiency_bonus(level: int) -> int:
    """Proficiency bonus for a character level.

    The level is not validated; clamp it with ``clamp_level`` first.

        >>> proficiency_bonus(1), proficiency_bonus(5), proficiency_bonus(20)
        (2, 3, 6)
    """
    return (level - 1) // 4 + 2


def proficiency_modifier(level: int, proficiency: ProficiencyLevel) -> int:
    """Bonus a proficiency level contributes at a given character level.

    Args:
        level: Character level.
        proficiency: How trained the character is.

    Returns:
        0 for none, half the proficiency bonus (rounded down) for
        jack-of-all-trades, the full bonus when proficient and double
        the bonus for expertise.
    """
    bonus = proficiency_bonus(level)
    if proficiency == ProficiencyLevel.PROFICIENT:
        return bonus
    if proficiency == ProficiencyLevel.EXPERTISE:
        return bonus * 2
    if proficiency == ProficiencyLevel.JACK_OF_ALL_TRADES:
        return bonus // 2
    return 0


__all__ = [
    "modifier",
    "ability_modifier",
    "ability_modifiers",
    "clamp_level",
    "proficiency_bonus",
    "proficiency_modifier",
]
