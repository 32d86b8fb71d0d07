"""One-call resolution of every derived value on a character sheet.

``build_sheet`` is what a view calls after each edit: it takes the raw
character and returns the numbers to display, so no view computes rules
itself and nothing derived is ever stored.

Example:
    >>> sheet = build_sheet(character)
    >>> sheet.proficiency_bonus, sheet.passive_perception
    (3, 13)
"""

from __future__ import annotations

from dataclasses import dataclass

from charsheet.core.constants import DEFAULT_HIT_DIE, HIT_DIE_BY_CLASS
from charsheet.core.logging import get_logger, log_context
from charsheet.engine.abilities import ability_modifiers, clamp_level, proficiency_bonus
from charsheet.engine.class_actions import ClassActionLine, class_action_lines
from charsheet.engine.combat import ToHitBreakdown, damage_bonus, to_hit_breakdown
from charsheet.engine.inventory import LoadSummary, summarize_load
from charsheet.engine.skills import SkillLine, resolve_skills
from charsheet.engine.spellcasting import SpellSlotLine, spell_slot_lines
from charsheet.models.character import AbilityScores, Character, Spell, Weapon
from charsheet.models.enums import Ability, AttackType, SkillName


logger = get_logger(__name__)


@dataclass(frozen=True)
class WeaponLine:
    """One row of the weapons table."""

    name: str
    attack_type: AttackType
    to_hit: ToHitBreakdown
    damage_bonus: int
    damage_dice: str
    damage_type: str
    crit_on: int

    @property
    def to_hit_display(self) -> str:
        return format_modifier(self.to_hit.total)

    @property
    def damage_display(self) -> str:
        """Damage as written on a sheet, e.g. '1d8+3 slashing'."""
        if self.damage_dice:
            text = self.damage_dice
            if self.damage_bonus:
                text += format_modifier(self.damage_bonus)
        else:
            text = str(self.damage_bonus)
        return f"{text} {self.damage_type}".strip()


@dataclass(frozen=True)
class CharacterSheet:
    """Every derived value a character sheet displays."""

    name: str
    level: int
    hit_die: str
    proficiency_bonus: int
    ability_scores: dict[Ability, int]
    ability_modifiers: dict[Ability, int]
    skills: list[SkillLine]
    passive_perception: int
    load: LoadSummary
    weapons: list[WeaponLine]
    spell_slots: list[SpellSlotLine]
    class_actions: list[ClassActionLine]
    spells: list[Spell]

    def skill(self, name: SkillName) -> SkillLine:
        for line in self.skills:
            if line.name == name:
                return line
        raise KeyError(name)


def format_modifier(value: int) -> str:
    """Signed modifier text: '+3', '+0', '-1'."""
    return f"{value:+d}"


def hit_die_for_class(class_name: str) -> str:
    """Hit die of a class; unlisted classes use a d8."""
    return HIT_DIE_BY_CLASS.get(class_name.strip().title(), DEFAULT_HIT_DIE)


def weapon_line(weapon: Weapon, level: int, abilities: AbilityScores) -> WeaponLine:
    return WeaponLine(
        name=weapon.name,
        attack_type=weapon.attack_type,
        to_hit=to_hit_breakdown(weapon, level, abilities),
        damage_bonus=damage_bonus(weapon, abilities),
        damage_dice=weapon.damage_dice,
        damage_type=weapon.damage_type,
        crit_on=weapon.crit_on,
    )


def build_sheet(character: Character) -> CharacterSheet:
    """Resolve all derived values of a character.

    Args:
        character: The raw character.

    Returns:
        CharacterSheet ready for display.
    """
    with log_context(character_id=character.id, character=character.name):
        level = clamp_level(character.level)
        skills = resolve_skills(character)
        perception = next(line for line in skills if line.name == SkillName.PERCEPTION)

        sheet = CharacterSheet(
            name=character.name,
            level=level,
            hit_die=hit_die_for_class(character.class_name),
            proficiency_bonus=proficiency_bonus(level),
            ability_scores={
                ability: character.abilities.get_score(ability) for ability in Ability
            },
            ability_modifiers=ability_modifiers(character.abilities),
            skills=skills,
            passive_perception=perception.passive,
            load=summarize_load(character),
            weapons=[weapon_line(w, level, character.abilities) for w in character.weapons],
            spell_slots=spell_slot_lines(character.spell_slots),
            class_actions=class_action_lines(character.class_actions),
            spells=list(character.spells),
        )
        logger.debug("Character sheet built", level=level, load_state=sheet.load.state)
    return sheet


__all__ = [
    "WeaponLine",
    "CharacterSheet",
    "format_modifier",
    "hit_die_for_class",
    "weapon_line",
    "build_sheet",
]
