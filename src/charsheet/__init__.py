"""charsheet - derived stats and dice resolution for tabletop character sheets.

The rules layer behind a character sheet web client: ability modifiers,
proficiency, skill totals, carried weight, spell slots, class action uses,
and weapon attacks with a full damage breakdown. Every function is pure;
rolls draw from an injected RandomSource.

Example:
    >>> from charsheet import (
    ...     AbilityScores, Character, ProficiencyLevel, Skill, SkillName, build_sheet,
    ... )
    >>> hero = Character(
    ...     name="Tamsin",
    ...     level=5,
    ...     abilities=AbilityScores(strength=14),
    ...     skills=[Skill(name=SkillName.ATHLETICS,
    ...                   proficiency=ProficiencyLevel.PROFICIENT, other=1)],
    ... )
    >>> build_sheet(hero).skill(SkillName.ATHLETICS).total
    6

Modules:
    core: Configuration, logging, constants and exceptions.
    models: Pydantic V2 sheet records and API record conversion.
    engine: The rules engine.
"""

from __future__ import annotations

# Core
from charsheet.core.config import Settings, get_settings
from charsheet.core.exceptions import CharsheetError, InvalidDiceExpression
from charsheet.core.logging import configure_logging, get_logger

# Models
from charsheet.models import (
    Ability,
    AbilityScores,
    AttackType,
    Character,
    ClassAction,
    Coins,
    Item,
    LoadState,
    ProficiencyLevel,
    Skill,
    SkillName,
    Spell,
    SpellSlot,
    Weapon,
    WeaponStat,
    character_from_record,
    character_to_record,
)

# Engine
from charsheet.engine import (
    AttackResult,
    CharacterSheet,
    RandomSource,
    SeededRandomSource,
    build_sheet,
    expend_class_action,
    doubled_dice,
    modifier,
    parse_dice,
    passive_score,
    proficiency_bonus,
    proficiency_modifier,
    resolve_attack,
    roll_dice,
    roll_skill_check,
    skill_total,
)


__version__ = "0.1.0"

__all__ = [
    # Core
    "Settings",
    "get_settings",
    "CharsheetError",
    "InvalidDiceExpression",
    "configure_logging",
    "get_logger",
    # Models
    "Ability",
    "AbilityScores",
    "AttackType",
    "Character",
    "ClassAction",
    "Coins",
    "Item",
    "LoadState",
    "ProficiencyLevel",
    "Skill",
    "SkillName",
    "Spell",
    "SpellSlot",
    "Weapon",
    "WeaponStat",
    "character_from_record",
    "character_to_record",
    # Engine
    "RandomSource",
    "SeededRandomSource",
    "AttackResult",
    "CharacterSheet",
    "build_sheet",
    "expend_class_action",
    "modifier",
    "proficiency_bonus",
    "proficiency_modifier",
    "skill_total",
    "passive_score",
    "roll_skill_check",
    "parse_dice",
    "roll_dice",
    "doubled_dice",
    "resolve_attack",
    "__version__",
]
