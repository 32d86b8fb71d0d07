"""Weapon attack and damage resolution.

Critical hits roll extra dice on top of the normal damage roll: the
weapon's critical damage dice if it defines them, otherwise its damage dice
doubled. The flat damage bonus is added once, critical or not.

Example:
    >>> weapon = Weapon(name="Longsword", stat=WeaponStat.STR, proficient=True,
    ...                 damage_dice="1d8", damage_type="slashing")
    >>> result = resolve_attack(weapon, 5, AbilityScores(strength=16), rng)
    >>> result.to_hit.total
    6
"""

from __future__ import annotations

from dataclasses import dataclass

from charsheet.core.constants import FUMBLE_ROLL
from charsheet.core.logging import get_logger
from charsheet.engine.abilities import ability_modifier, proficiency_bonus
from charsheet.engine.dice import DiceRoll, doubled_dice, roll_d20, roll_dice_detailed
from charsheet.engine.random_source import RandomSource
from charsheet.models.character import AbilityScores, Weapon
from charsheet.models.enums import Ability, WeaponStat


logger = get_logger(__name__)


@dataclass(frozen=True)
class ToHitBreakdown:
    """Components of a weapon's attack bonus.

    Attributes:
        proficiency: Proficiency bonus, or 0 if not proficient.
        stat_modifier: Modifier of the governing stat.
        magic_bonus: Weapon enhancement bonus.
    """

    proficiency: int
    stat_modifier: int
    magic_bonus: int

    @property
    def total(self) -> int:
        return self.proficiency + self.stat_modifier + self.magic_bonus


@dataclass(frozen=True)
class DamageBreakdown:
    """Damage dealt by one attack, with each dice sub-roll.

    Attributes:
        normal: Roll of the weapon's damage dice, or None without dice.
        critical: Extra critical roll, or None when not a critical hit or
            there were no dice to roll.
        bonus: Flat damage bonus, added exactly once.
    """

    normal: DiceRoll | None
    critical: DiceRoll | None
    bonus: int

    @property
    def dice_total(self) -> int:
        return sum(r.total for r in (self.normal, self.critical) if r is not None)

    @property
    def total(self) -> int:
        return self.dice_total + self.bonus


@dataclass(frozen=True)
class AttackResult:
    """Full breakdown of a resolved attack.

    Attributes:
        weapon_name: Name of the weapon used.
        roll: Natural d20 result.
        to_hit: Attack bonus components.
        total: ``roll + to_hit.total``.
        is_critical: The roll met the weapon's critical threshold.
        is_fumble: The roll was a natural 1.
        damage: Damage breakdown.
        damage_type: The weapon's damage type label.
    """

    weapon_name: str
    roll: int
    to_hit: ToHitBreakdown
    total: int
    is_critical: bool
    is_fumble: bool
    damage: DamageBreakdown
    damage_type: str


def stat_modifier(stat: WeaponStat, abilities: AbilityScores) -> int:
    """Modifier a weapon gets from its governing stat.

    Finesse weapons use the better of Strength and Dexterity.
    """
    ability = WeaponStat(stat).ability
    if ability is None:
        return max(
            ability_modifier(abilities, Ability.STR),
            ability_modifier(abilities, Ability.DEX),
        )
    return ability_modifier(abilities, ability)


def to_hit_breakdown(weapon: Weapon, level: int, abilities: AbilityScores) -> ToHitBreakdown:
    return ToHitBreakdown(
        proficiency=proficiency_bonus(level) if weapon.proficient else 0,
        stat_modifier=stat_modifier(weapon.stat, abilities),
        magic_bonus=weapon.magic_bonus,
    )


def to_hit_bonus(weapon: Weapon, level: int, abilities: AbilityScores) -> int:
    """Attack bonus: proficiency (if proficient) + stat modifier + magic bonus."""
    return to_hit_breakdown(weapon, level, abilities).total


def damage_bonus(weapon: Weapon, abilities: AbilityScores) -> int:
    """Flat damage bonus: magic bonus, plus the stat modifier if it applies."""
    stat_bonus = stat_modifier(weapon.stat, abilities) if weapon.plus_stat else 0
    return weapon.magic_bonus + stat_bonus


def critical_dice(weapon: Weapon) -> str | None:
    """Dice rolled in addition to normal damage on a critical hit."""
    if weapon.crit_damage:
        return weapon.crit_damage
    if weapon.damage_dice:
        return doubled_dice(weapon.damage_dice)
    return None


def resolve_attack(
    weapon: Weapon,
    level: int,
    abilities: AbilityScores,
    rng: RandomSource,
) -> AttackResult:
    """Roll an attack with a weapon and resolve its damage.

    Draws from ``rng`` in a fixed order: the d20, then the normal damage
    dice, then the critical dice.

    Args:
        weapon: The weapon attacking.
        level: Attacker's character level.
        abilities: Attacker's ability scores.
        rng: Source of every die roll.

    Returns:
        AttackResult with the roll, bonus components and damage sub-rolls.

    Raises:
        InvalidDiceExpression: If the damage or critical dice are malformed.
    """
    roll = roll_d20(rng)
    to_hit = to_hit_breakdown(weapon, level, abilities)
    is_critical = roll >= weapon.crit_on
    is_fumble = roll == FUMBLE_ROLL

    normal = roll_dice_detailed(weapon.damage_dice, rng) if weapon.damage_dice else None
    critical = None
    if is_critical:
        extra = critical_dice(weapon)
        if extra:
            critical = roll_dice_detailed(extra, rng)

    damage = DamageBreakdown(
        normal=normal,
        critical=critical,
        bonus=damage_bonus(weapon, abilities),
    )
    result = AttackResult(
        weapon_name=weapon.name,
        roll=roll,
        to_hit=to_hit,
        total=roll + to_hit.total,
        is_critical=is_critical,
        is_fumble=is_fumble,
        damage=damage,
        damage_type=weapon.damage_type,
    )

    logger.debug(
        "Attack resolved",
        weapon=weapon.name,
        roll=roll,
        total=result.total,
        is_critical=is_critical,
        damage=damage.total,
    )
    return result


__all__ = [
    "ToHitBreakdown",
    "DamageBreakdown",
    "AttackResult",
    "stat_modifier",
    "to_hit_breakdown",
    "to_hit_bonus",
    "damage_bonus",
    "critical_dice",
    "resolve_attack",
]
