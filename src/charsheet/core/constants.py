"""Rules constants for the character sheet engine.

These values are part of the observable contract of the rules engine
(e.g. the encumbrance bands drive the colour of the weight bar), so they
are fixed here rather than exposed as configuration.
"""

from __future__ import annotations

# =============================================================================
# Ability Scores & Levels
# =============================================================================

MIN_ABILITY_SCORE = 0
"""Lowest ability score the sheet accepts."""

MAX_ABILITY_SCORE = 99
"""Highest ability score the sheet accepts."""

MIN_CHARACTER_LEVEL = 1
"""Minimum character level."""

MAX_CHARACTER_LEVEL = 20
"""Maximum character level."""

PASSIVE_SCORE_BASE = 10
"""Added to a skill total to produce its passive score."""

# =============================================================================
# Dice
# =============================================================================

D20_SIDES = 20
"""Sides on the die used for checks and attack rolls."""

DEFAULT_CRIT_ON = 20
"""Natural roll at or above which an attack is a critical hit."""

FUMBLE_ROLL = 1
"""Natural roll that is always a fumble."""

# =============================================================================
# Inventory
# =============================================================================

COIN_WEIGHT_LBS = 0.02
"""Weight of a single coin in pounds, regardless of denomination."""

CARRYING_CAPACITY_PER_STRENGTH = 15
"""Pounds of carrying capacity per point of Strength."""

ENCUMBRANCE_WARNING_PERCENT = 80.0
"""Load percentage above which the load is flagged as encumbered."""

OVERLOAD_PERCENT = 100.0
"""Load percentage above which the character is overloaded."""

MAX_COIN_COUNT = 9_999_999
"""Upper bound for any single coin count entered on the sheet."""

# =============================================================================
# Spellcasting
# =============================================================================

MIN_SPELL_LEVEL = 1
"""Lowest spell slot level."""

MAX_SPELL_LEVEL = 9
"""Highest spell slot level."""

# =============================================================================
# Classes
# =============================================================================

HIT_DIE_BY_CLASS = {
    "Fighter": "d10",
    "Paladin": "d10",
    "Ranger": "d10",
    "Wizard": "d6",
    "Sorcerer": "d6",
}

DEFAULT_HIT_DIE = "d8"
"""Hit die for classes not listed in HIT_DIE_BY_CLASS."""


__all__ = [
    "MIN_ABILITY_SCORE",
    "MAX_ABILITY_SCORE",
    "MIN_CHARACTER_LEVEL",
    "MAX_CHARACTER_LEVEL",
    "PASSIVE_SCORE_BASE",
    "D20_SIDES",
    "DEFAULT_CRIT_ON",
    "FUMBLE_ROLL",
    "COIN_WEIGHT_LBS",
    "CARRYING_CAPACITY_PER_STRENGTH",
    "ENCUMBRANCE_WARNING_PERCENT",
    "OVERLOAD_PERCENT",
    "MAX_COIN_COUNT",
    "MIN_SPELL_LEVEL",
    "MAX_SPELL_LEVEL",
    "HIT_DIE_BY_CLASS",
    "DEFAULT_HIT_DIE",
]
