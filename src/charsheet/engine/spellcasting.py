"""Spell slot bookkeeping.

Slot lists are never mutated; every operation returns a new list so the
caller decides when to persist it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from charsheet.core.exceptions import SpellSlotError
from charsheet.core.logging import get_logger
from charsheet.models.character import SpellSlot, default_spell_slots


logger = get_logger(__name__)


@dataclass(frozen=True)
class SpellSlotLine:
    """One row of the spell slot table."""

    level: int
    used: int
    maximum: int
    remaining: int
    over_used: bool


def remaining(slot: SpellSlot) -> int:
    """Slots left at this level. Negative when more were used than exist."""
    return slot.maximum - slot.used


def is_over_used(slot: SpellSlot) -> bool:
    return slot.used > slot.maximum


def _find(slots: Sequence[SpellSlot], level: int) -> SpellSlot:
    for slot in slots:
        if slot.level == level:
            return slot
    raise SpellSlotError(f"No spell slot row for level {level}", level=level)


def _replace(slots: Sequence[SpellSlot], updated: SpellSlot) -> list[SpellSlot]:
    return [updated if slot.level == updated.level else slot for slot in slots]


def reset_spell_slots(slots: Sequence[SpellSlot]) -> list[SpellSlot]:
    """Recover every expended slot (long rest)."""
    return [slot.model_copy(update={"used": 0}) for slot in slots]


def expend_spell_slot(slots: Sequence[SpellSlot], level: int) -> list[SpellSlot]:
    """Use one slot of the given level.

    Args:
        slots: Current slot rows.
        level: Spell level of the slot to use.

    Returns:
        New slot rows with that level's ``used`` incremented.

    Raises:
        SpellSlotError: If the level has no row or no slot remains.
    """
    slot = _find(slots, level)
    if remaining(slot) <= 0:
        raise SpellSlotError(
            f"No level {level} spell slots remaining",
            level=level,
            details={"used": slot.used, "max": slot.maximum},
        )
    logger.debug("Spell slot expended", level=level, remaining=remaining(slot) - 1)
    return _replace(slots, slot.model_copy(update={"used": slot.used + 1}))


def set_spell_slot(
    slots: Sequence[SpellSlot],
    level: int,
    *,
    used: int | None = None,
    maximum: int | None = None,
) -> list[SpellSlot]:
    """Overwrite the used and/or maximum count of one level.

    Negative counts clamp to zero, matching how the sheet accepts input.

    Raises:
        SpellSlotError: If the level has no row.
    """
    slot = _find(slots, level)
    updated = SpellSlot(
        level=slot.level,
        used=slot.used if used is None else used,
        maximum=slot.maximum if maximum is None else maximum,
    )
    return _replace(slots, updated)


def spell_slot_lines(slots: Sequence[SpellSlot]) -> list[SpellSlotLine]:
    """Resolve slot rows for display, ordered by level."""
    return [
        SpellSlotLine(
            level=slot.level,
            used=slot.used,
            maximum=slot.maximum,
            remaining=remaining(slot),
            over_used=is_over_used(slot),
        )
        for slot in sorted(slots, key=lambda s: s.level)
    ]


__all__ = [
    "SpellSlotLine",
    "default_spell_slots",
    "remaining",
    "is_over_used",
    "reset_spell_slots",
    "expend_spell_slot",
    "set_spell_slot",
    "spell_slot_lines",
]
