"""Pydantic V2 schemas for the character sheet rules engine.

Submodules:
    enums: Enumeration types (Ability, SkillName, ProficiencyLevel, ...)
    character: Sheet records (AbilityScores, Skill, Weapon, Spell, Character, ...)
    records: Decoding and encoding of API character records

Example:
    >>> from charsheet.models import AbilityScores, Character, SkillName
    >>> hero = Character(name="Tamsin", abilities=AbilityScores(strength=14))
    >>> hero.get_skill(SkillName.ATHLETICS).ability
    <Ability.STR: 'strength'>
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from charsheet.models.enums import (
    SKILL_ABILITIES,
    Ability,
    AttackType,
    LoadState,
    ProficiencyLevel,
    SkillName,
    WeaponStat,
)

# =============================================================================
# Sheet Records
# =============================================================================
from charsheet.models.character import (
    AbilityScore,
    AbilityScores,
    Character,
    CharacterDetails,
    ClassAction,
    Coins,
    Item,
    Level,
    Skill,
    Spell,
    SpellSlot,
    Weapon,
    default_spell_slots,
)

# =============================================================================
# API Record Boundary
# =============================================================================
from charsheet.models.records import (
    character_from_record,
    character_to_record,
)


__all__ = [
    # Enums
    "Ability",
    "SkillName",
    "SKILL_ABILITIES",
    "ProficiencyLevel",
    "WeaponStat",
    "AttackType",
    "LoadState",
    # Records
    "AbilityScore",
    "Level",
    "AbilityScores",
    "Skill",
    "Weapon",
    "Coins",
    "Item",
    "SpellSlot",
    "default_spell_slots",
    "Spell",
    "ClassAction",
    "CharacterDetails",
    "Character",
    # Boundary
    "character_from_record",
    "character_to_record",
]
