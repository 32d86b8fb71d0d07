"""Carried weight, carrying capacity and encumbrance bands.

Load state bands on the unclamped load percentage:

    <= 80%          normal
    > 80%, <= 100%  encumbered-warning
    > 100%          overloaded

The display percentage is clamped to [0, 100] for progress bars.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from charsheet.core.constants import (
    CARRYING_CAPACITY_PER_STRENGTH,
    COIN_WEIGHT_LBS,
    ENCUMBRANCE_WARNING_PERCENT,
    OVERLOAD_PERCENT,
)
from charsheet.models.character import Character, Coins, Item
from charsheet.models.enums import LoadState


@dataclass(frozen=True)
class LoadSummary:
    """Everything the inventory weight bar displays.

    Attributes:
        coins_weight: Weight of the purse in pounds.
        items_weight: Weight of all inventory lines in pounds.
        total_weight: ``items_weight + coins_weight``.
        carrying_capacity: Capacity in pounds.
        percentage: Load percentage clamped to [0, 100].
        state: Encumbrance band.
    """

    coins_weight: float
    items_weight: float
    total_weight: float
    carrying_capacity: int
    percentage: float
    state: LoadState


def coins_weight(coins: Coins) -> float:
    """Weight of a purse: every coin weighs the same regardless of metal."""
    return coins.total_count * COIN_WEIGHT_LBS


def items_weight(items: Iterable[Item]) -> float:
    """Sum of quantity times unit weight over all inventory lines."""
    return sum((item.quantity * item.weight for item in items), 0.0)


def total_weight(items: Iterable[Item], coins: Coins) -> float:
    return items_weight(items) + coins_weight(coins)


def carrying_capacity(strength: int) -> int:
    """Carrying capacity in pounds (15 x Strength score)."""
    return CARRYING_CAPACITY_PER_STRENGTH * strength


def load_percentage(total_weight: float, carrying_capacity: int) -> float:
    """Load as a percentage of capacity, clamped to [0, 100] for display.

    A zero capacity shows as full whenever anything is carried.
    """
    if carrying_capacity <= 0:
        return OVERLOAD_PERCENT if total_weight > 0 else 0.0
    percentage = total_weight / carrying_capacity * 100
    return max(0.0, min(OVERLOAD_PERCENT, percentage))


def load_state(total_weight: float, carrying_capacity: int) -> LoadState:
    """Classify a load into its encumbrance band.

    Band edges are inclusive on the lower band: exactly 80% is normal and
    exactly 100% is encumbered-warning.
    """
    scaled_weight = total_weight * 100
    if scaled_weight <= carrying_capacity * ENCUMBRANCE_WARNING_PERCENT:
        return LoadState.NORMAL
    if scaled_weight <= carrying_capacity * OVERLOAD_PERCENT:
        return LoadState.ENCUMBERED_WARNING
    return LoadState.OVERLOADED


def summarize_load(character: Character) -> LoadSummary:
    """Resolve the inventory weight bar for a character."""
    purse = coins_weight(character.coins)
    carried = items_weight(character.items)
    weight = carried + purse
    capacity = carrying_capacity(character.abilities.strength)
    return LoadSummary(
        coins_weight=purse,
        items_weight=carried,
        total_weight=weight,
        carrying_capacity=capacity,
        percentage=load_percentage(weight, capacity),
        state=load_state(weight, capacity),
    )


__all__ = [
    "LoadSummary",
    "coins_weight",
    "items_weight",
    "total_weight",
    "carrying_capacity",
    "load_percentage",
    "load_state",
    "summarize_load",
]
