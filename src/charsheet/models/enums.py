"""Enumeration types for the character sheet engine.

Abilities, skills, proficiency levels, weapon stats and load states. The
string values match what the character API stores, so records decode
straight into these enums.
"""

from __future__ import annotations

from enum import StrEnum


class Ability(StrEnum):
    """The six core ability scores."""

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def full_name(self) -> str:
        """Get the full name of the ability.

        Returns:
            Full ability name (e.g., 'Strength' for STR).
        """
        return self.value.capitalize()

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation (e.g., 'STR')."""
        return self.name


class SkillName(StrEnum):
    """The 18 skills shown on the sheet.

    Values are the display names the API uses to key skill records.
    """

    # Strength skills
    ATHLETICS = "Athletics"

    # Dexterity skills
    ACROBATICS = "Acrobatics"
    SLEIGHT_OF_HAND = "Sleight of Hand"
    STEALTH = "Stealth"

    # Intelligence skills
    ARCANA = "Arcana"
    HISTORY = "History"
    INVESTIGATION = "Investigation"
    NATURE = "Nature"
    RELIGION = "Religion"

    # Wisdom skills
    ANIMAL_HANDLING = "Animal Handling"
    INSIGHT = "Insight"
    MEDICINE = "Medicine"
    PERCEPTION = "Perception"
    SURVIVAL = "Survival"

    # Charisma skills
    DECEPTION = "Deception"
    INTIMIDATION = "Intimidation"
    PERFORMANCE = "Performance"
    PERSUASION = "Persuasion"

    @property
    def ability(self) -> Ability:
        """Get the governing ability for this skill.

        Returns:
            The Ability this skill is checked with.
        """
        return SKILL_ABILITIES[self]


SKILL_ABILITIES: dict[SkillName, Ability] = {
    # Strength
    SkillName.ATHLETICS: Ability.STR,
    # Dexterity
    SkillName.ACROBATICS: Ability.DEX,
    SkillName.SLEIGHT_OF_HAND: Ability.DEX,
    SkillName.STEALTH: Ability.DEX,
    # Intelligence
    SkillName.ARCANA: Ability.INT,
    SkillName.HISTORY: Ability.INT,
    SkillName.INVESTIGATION: Ability.INT,
    SkillName.NATURE: Ability.INT,
    SkillName.RELIGION: Ability.INT,
    # Wisdom
    SkillName.ANIMAL_HANDLING: Ability.WIS,
    SkillName.INSIGHT: Ability.WIS,
    SkillName.MEDICINE: Ability.WIS,
    SkillName.PERCEPTION: Ability.WIS,
    SkillName.SURVIVAL: Ability.WIS,
    # Charisma
    SkillName.DECEPTION: Ability.CHA,
    SkillName.INTIMIDATION: Ability.CHA,
    SkillName.PERFORMANCE: Ability.CHA,
    SkillName.PERSUASION: Ability.CHA,
}


class ProficiencyLevel(StrEnum):
    """How trained a character is in a skill.

    Ordered by the size of the bonus it grants: none, jack-of-all-trades
    (half), proficient (full), expertise (double).
    """

    NONE = "none"
    PROFICIENT = "proficient"
    EXPERTISE = "expertise"
    JACK_OF_ALL_TRADES = "jack-of-all-trades"

    @property
    def display_name(self) -> str:
        """Human-readable label (e.g., 'Jack Of All Trades')."""
        return self.value.replace("-", " ").title()


class WeaponStat(StrEnum):
    """Ability governing a weapon's attack and damage modifier.

    FINESSE uses the better of Strength and Dexterity.
    """

    STR = "STR"
    DEX = "DEX"
    CON = "CON"
    INT = "INT"
    WIS = "WIS"
    CHA = "CHA"
    FINESSE = "Finesse"

    @property
    def ability(self) -> Ability | None:
        """The single ability this stat maps to, or None for FINESSE."""
        if self is WeaponStat.FINESSE:
            return None
        return Ability[self.value]


class AttackType(StrEnum):
    """How a weapon is used to attack."""

    MELEE = "melee"
    RANGED = "ranged"
    THROWN = "thrown"


class LoadState(StrEnum):
    """Encumbrance band of a character's carried weight."""

    NORMAL = "normal"
    ENCUMBERED_WARNING = "encumbered-warning"
    OVERLOADED = "overloaded"


__all__ = [
    "Ability",
    "SkillName",
    "SKILL_ABILITIES",
    "ProficiencyLevel",
    "WeaponStat",
    "AttackType",
    "LoadState",
]
