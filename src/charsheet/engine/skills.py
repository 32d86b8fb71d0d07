"""Skill totals, passive scores and skill checks.

The 18 skills are partitioned into five governing-ability groups by the
fixed table in ``charsheet.models.enums.SKILL_ABILITIES``; Constitution
governs no skill.
"""

from __future__ import annotations

from dataclasses import dataclass

from charsheet.core.constants import D20_SIDES, PASSIVE_SCORE_BASE
from charsheet.core.logging import get_logger
from charsheet.engine.abilities import ability_modifier, proficiency_modifier
from charsheet.engine.random_source import RandomSource
from charsheet.models.character import Character, Skill
from charsheet.models.enums import SKILL_ABILITIES, Ability, ProficiencyLevel, SkillName


logger = get_logger(__name__)


@dataclass(frozen=True)
class SkillCheckResult:
    """Outcome of a rolled skill check.

    Attributes:
        roll: The natural d20 result.
        modifier: The skill total added to the roll.
        total: ``roll + modifier``.
    """

    roll: int
    modifier: int
    total: int


@dataclass(frozen=True)
class SkillLine:
    """One row of the skills table, with every derived value resolved."""

    name: SkillName
    ability: Ability
    proficiency: ProficiencyLevel
    other: int
    ability_modifier: int
    proficiency_modifier: int
    total: int
    passive: int


def skill_groups() -> list[tuple[Ability, tuple[SkillName, ...]]]:
    """Skills grouped by governing ability, in sheet display order.

    Returns:
        Five ``(ability, skills)`` pairs: Strength, Dexterity,
        Intelligence, Wisdom, Charisma.
    """
    groups: dict[Ability, list[SkillName]] = {}
    for skill_name, ability in SKILL_ABILITIES.items():
        groups.setdefault(ability, []).append(skill_name)
    return [(ability, tuple(names)) for ability, names in groups.items()]


def skill_total(ability_modifier: int, level: int, skill: Skill) -> int:
    """Total bonus for a skill check.

    Args:
        ability_modifier: Modifier of the skill's governing ability.
        level: Character level.
        skill: The skill record (proficiency and other bonus).

    Returns:
        ``ability_modifier + proficiency_modifier(level, proficiency) + other``.
    """
    return ability_modifier + proficiency_modifier(level, skill.proficiency) + skill.other


def passive_score(skill_total: int) -> int:
    """Passive score for a skill total (total + 10)."""
    return skill_total + PASSIVE_SCORE_BASE


def roll_skill_check(total: int, rng: RandomSource) -> SkillCheckResult:
    """Roll a d20 and add a skill total.

    Args:
        total: The skill total to add.
        rng: Source of the d20 roll.

    Returns:
        SkillCheckResult with the natural roll and the final total.
    """
    roll = rng.randint(1, D20_SIDES)
    result = SkillCheckResult(roll=roll, modifier=total, total=roll + total)
    logger.debug("Skill check rolled", roll=roll, modifier=total, total=result.total)
    return result


def resolve_skill(character: Character, name: SkillName) -> SkillLine:
    """Resolve one skill of a character into a table row.

    Skills the character never edited resolve with no proficiency and no
    other bonus.
    """
    skill = character.get_skill(name)
    ability_mod = ability_modifier(character.abilities, skill.ability)
    total = skill_total(ability_mod, character.level, skill)
    return SkillLine(
        name=skill.name,
        ability=skill.ability,
        proficiency=skill.proficiency,
        other=skill.other,
        ability_modifier=ability_mod,
        proficiency_modifier=proficiency_modifier(character.level, skill.proficiency),
        total=total,
        passive=passive_score(total),
    )


def resolve_skills(character: Character) -> list[SkillLine]:
    """Resolve all 18 skills of a character, grouped by ability."""
    return [
        resolve_skill(character, name)
        for _, names in skill_groups()
        for name in names
    ]


def roll_character_skill(
    character: Character,
    name: SkillName,
    rng: RandomSource,
) -> SkillCheckResult:
    """Roll a skill check for a character's skill."""
    return roll_skill_check(resolve_skill(character, name).total, rng)


__all__ = [
    "SkillCheckResult",
    "SkillLine",
    "skill_groups",
    "skill_total",
    "passive_score",
    "roll_skill_check",
    "resolve_skill",
    "resolve_skills",
    "roll_character_skill",
]
