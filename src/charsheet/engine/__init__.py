"""Rules engine for the character sheet.

Stateless, pure functions over explicit arguments. Rolling functions take a
RandomSource and never touch a global generator.

Submodules:
    random_source: RandomSource protocol and a seedable implementation
    abilities: Ability modifiers and proficiency bonuses
    skills: Skill totals, passive scores and skill checks
    inventory: Carried weight, carrying capacity and load bands
    dice: Dice notation parsing and rolling
    combat: Weapon to-hit, damage and attack resolution
    spellcasting: Spell slot bookkeeping
    class_actions: Limited-use class action bookkeeping
    sheet: One-call resolution of a whole character sheet

Example:
    >>> from charsheet.engine import SeededRandomSource, build_sheet, resolve_attack
    >>> sheet = build_sheet(character)
    >>> result = resolve_attack(weapon, character.level, character.abilities,
    ...                         SeededRandomSource(seed=1))
"""

from __future__ import annotations

# =============================================================================
# Randomness
# =============================================================================
from charsheet.engine.random_source import (
    RandomSource,
    SeededRandomSource,
    default_random_source,
)

# =============================================================================
# Abilities & Proficiency
# =============================================================================
from charsheet.engine.abilities import (
    ability_modifier,
    ability_modifiers,
    clamp_level,
    modifier,
    proficiency_bonus,
    proficiency_modifier,
)

# =============================================================================
# Skills
# =============================================================================
from charsheet.engine.skills import (
    SkillCheckResult,
    SkillLine,
    passive_score,
    resolve_skill,
    resolve_skills,
    roll_character_skill,
    roll_skill_check,
    skill_groups,
    skill_total,
)

# =============================================================================
# Inventory
# =============================================================================
from charsheet.engine.inventory import (
    LoadSummary,
    carrying_capacity,
    coins_weight,
    items_weight,
    load_percentage,
    load_state,
    summarize_load,
    total_weight,
)

# =============================================================================
# Dice & Combat
# =============================================================================
from charsheet.engine.dice import (
    DiceRoll,
    DiceSpec,
    doubled_dice,
    parse_dice,
    roll_d20,
    roll_dice,
    roll_dice_detailed,
)
from charsheet.engine.combat import (
    AttackResult,
    DamageBreakdown,
    ToHitBreakdown,
    critical_dice,
    damage_bonus,
    resolve_attack,
    stat_modifier,
    to_hit_breakdown,
    to_hit_bonus,
)

# =============================================================================
# Spellcasting
# =============================================================================
from charsheet.engine.spellcasting import (
    SpellSlotLine,
    default_spell_slots,
    expend_spell_slot,
    is_over_used,
    remaining,
    reset_spell_slots,
    set_spell_slot,
    spell_slot_lines,
)

# =============================================================================
# Class Actions
# =============================================================================
from charsheet.engine.class_actions import (
    ClassActionLine,
    class_action_lines,
    expend_class_action,
    remaining_uses,
    reset_class_actions,
    set_class_action_uses,
)

# =============================================================================
# Character Sheet
# =============================================================================
from charsheet.engine.sheet import (
    CharacterSheet,
    WeaponLine,
    build_sheet,
    format_modifier,
    hit_die_for_class,
    weapon_line,
)


__all__ = [
    # Randomness
    "RandomSource",
    "SeededRandomSource",
    "default_random_source",
    # Abilities
    "modifier",
    "ability_modifier",
    "ability_modifiers",
    "clamp_level",
    "proficiency_bonus",
    "proficiency_modifier",
    # Skills
    "SkillCheckResult",
    "SkillLine",
    "skill_groups",
    "skill_total",
    "passive_score",
    "roll_skill_check",
    "resolve_skill",
    "resolve_skills",
    "roll_character_skill",
    # Inventory
    "LoadSummary",
    "coins_weight",
    "items_weight",
    "total_weight",
    "carrying_capacity",
    "load_percentage",
    "load_state",
    "summarize_load",
    # Dice
    "DiceSpec",
    "DiceRoll",
    "parse_dice",
    "roll_dice",
    "roll_dice_detailed",
    "doubled_dice",
    "roll_d20",
    # Combat
    "ToHitBreakdown",
    "DamageBreakdown",
    "AttackResult",
    "stat_modifier",
    "to_hit_breakdown",
    "to_hit_bonus",
    "damage_bonus",
    "critical_dice",
    "resolve_attack",
    # Spellcasting
    "SpellSlotLine",
    "default_spell_slots",
    "remaining",
    "is_over_used",
    "reset_spell_slots",
    "expend_spell_slot",
    "set_spell_slot",
    "spell_slot_lines",
    # Class actions
    "ClassActionLine",
    "remaining_uses",
    "reset_class_actions",
    "expend_class_action",
    "set_class_action_uses",
    "class_action_lines",
    # Sheet
    "WeaponLine",
    "CharacterSheet",
    "format_modifier",
    "hit_die_for_class",
    "weapon_line",
    "build_sheet",
]
