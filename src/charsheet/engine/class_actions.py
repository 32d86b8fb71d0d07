"""Limited-use class action bookkeeping.

Class actions (Second Wind, Channel Divinity, Wild Shape...) track uses the
same way spell slots do, but are keyed by action id instead of spell level.
Lists are never mutated; every operation returns a new list.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from charsheet.core.exceptions import ClassActionError
from charsheet.core.logging import get_logger
from charsheet.models.character import ClassAction


logger = get_logger(__name__)


@dataclass(frozen=True)
class ClassActionLine:
    """One row of the class action table."""

    id: str
    name: str
    gained_from: str
    currently_used: int
    max_uses: int
    remaining: int
    over_used: bool


def remaining_uses(action: ClassAction) -> int:
    """Uses left before the next rest. Negative when over-used."""
    return action.max_uses - action.currently_used


def is_over_used(action: ClassAction) -> bool:
    return action.currently_used > action.max_uses


def _find(actions: Sequence[ClassAction], action_id: str) -> ClassAction:
    for action in actions:
        if action.id == action_id:
            return action
    raise ClassActionError(f"No class action with id {action_id!r}", action_id=action_id)


def _replace(actions: Sequence[ClassAction], updated: ClassAction) -> list[ClassAction]:
    return [updated if action.id == updated.id else action for action in actions]


def reset_class_actions(actions: Sequence[ClassAction]) -> list[ClassAction]:
    """Recover every expended use."""
    return [action.model_copy(update={"currently_used": 0}) for action in actions]


def expend_class_action(actions: Sequence[ClassAction], action_id: str) -> list[ClassAction]:
    """Use one charge of a class action.

    Args:
        actions: Current class actions.
        action_id: Id of the action to use.

    Returns:
        New actions with that action's ``currently_used`` incremented.

    Raises:
        ClassActionError: If the id is unknown or no use remains.
    """
    action = _find(actions, action_id)
    if remaining_uses(action) <= 0:
        raise ClassActionError(
            f"No uses of {action.name or action_id!r} remaining",
            action_id=action_id,
            details={"used": action.currently_used, "max": action.max_uses},
        )
    logger.debug(
        "Class action used",
        action=action.name,
        remaining=remaining_uses(action) - 1,
    )
    return _replace(actions, action.model_copy(update={"currently_used": action.currently_used + 1}))


def set_class_action_uses(
    actions: Sequence[ClassAction],
    action_id: str,
    *,
    used: int | None = None,
    max_uses: int | None = None,
) -> list[ClassAction]:
    """Overwrite the used and/or maximum count of one action.

    Negative counts clamp to zero.

    Raises:
        ClassActionError: If the id is unknown.
    """
    action = _find(actions, action_id)
    updated = ClassAction(
        id=action.id,
        name=action.name,
        description=action.description,
        gained_from=action.gained_from,
        currently_used=action.currently_used if used is None else used,
        max_uses=action.max_uses if max_uses is None else max_uses,
    )
    return _replace(actions, updated)


def class_action_lines(actions: Sequence[ClassAction]) -> list[ClassActionLine]:
    """Resolve class actions for display, in stored order."""
    return [
        ClassActionLine(
            id=action.id,
            name=action.name,
            gained_from=action.gained_from,
            currently_used=action.currently_used,
            max_uses=action.max_uses,
            remaining=remaining_uses(action),
            over_used=is_over_used(action),
        )
        for action in actions
    ]


__all__ = [
    "ClassActionLine",
    "remaining_uses",
    "is_over_used",
    "reset_class_actions",
    "expend_class_action",
    "set_class_action_uses",
    "class_action_lines",
]
