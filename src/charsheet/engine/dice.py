"""Dice notation parsing and rolling.

Only plain ``NdM`` / ``dM`` notation is accepted, which is what weapon
damage and critical damage fields hold. Every roll draws from an explicit
RandomSource.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from charsheet.core.constants import D20_SIDES
from charsheet.core.exceptions import InvalidDiceExpression
from charsheet.core.logging import get_logger
from charsheet.engine.random_source import RandomSource


logger = get_logger(__name__)

# Matches "2d6" and "d8"; the count defaults to 1 when omitted. Lowercase d only.
_DICE_PATTERN = re.compile(r"^(\d*)d(\d+)$")


@dataclass(frozen=True)
class DiceSpec:
    """A parsed dice expression.

    Attributes:
        count: Number of dice to roll.
        sides: Faces on each die.
    """

    count: int
    sides: int

    @property
    def notation(self) -> str:
        return f"{self.count}d{self.sides}"

    @property
    def maximum(self) -> int:
        return self.count * self.sides


@dataclass(frozen=True)
class DiceRoll:
    """The result of rolling a dice expression.

    Attributes:
        expression: The expression as written by the user.
        spec: The parsed expression.
        rolls: Each die's face, in roll order.
        total: Sum of the faces.
    """

    expression: str
    spec: DiceSpec
    rolls: tuple[int, ...]
    total: int


def parse_dice(expression: str) -> DiceSpec:
    """Parse ``NdM`` or ``dM`` notation.

    Args:
        expression: Dice notation such as ``"2d6"`` or ``"d8"``.

    Returns:
        DiceSpec with the die count (1 when omitted) and sides.

    Raises:
        InvalidDiceExpression: If the expression is not ``NdM``/``dM`` or
            names a die with zero sides.

    Example:
        >>> parse_dice("2d6")
        DiceSpec(count=2, sides=6)
        >>> parse_dice("d8")
        DiceSpec(count=1, sides=8)
    """
    match = _DICE_PATTERN.fullmatch(expression) if isinstance(expression, str) else None
    if match is None:
        raise InvalidDiceExpression(
            "Dice expression must look like 'NdM' or 'dM'",
            expression=str(expression),
        )

    count_str, sides_str = match.groups()
    count = int(count_str) if count_str else 1
    sides = int(sides_str)
    if sides < 1:
        raise InvalidDiceExpression(
            "Dice must have at least one side",
            expression=expression,
        )
    return DiceSpec(count=count, sides=sides)


def roll_dice_detailed(expression: str, rng: RandomSource) -> DiceRoll:
    """Roll a dice expression, keeping every face.

    Args:
        expression: Dice notation to roll.
        rng: Source of the individual die rolls.

    Returns:
        DiceRoll with each face and the total.

    Raises:
        InvalidDiceExpression: If the expression cannot be parsed.
    """
    spec = parse_dice(expression)
    rolls = tuple(rng.randint(1, spec.sides) for _ in range(spec.count))
    result = DiceRoll(expression=expression, spec=spec, rolls=rolls, total=sum(rolls))
    logger.debug("Dice rolled", expression=result.expression, rolls=rolls, total=result.total)
    return result


def roll_dice(expression: str, rng: RandomSource) -> int:
    """Roll a dice expression and return the sum of the faces."""
    return roll_dice_detailed(expression, rng).total


def doubled_dice(expression: str) -> str:
    """The same dice with twice as many of them.

        >>> doubled_dice("1d8")
        '2d8'
        >>> doubled_dice("d12")
        '2d12'
    """
    spec = parse_dice(expression)
    return DiceSpec(count=spec.count * 2, sides=spec.sides).notation


def roll_d20(rng: RandomSource) -> int:
    return rng.randint(1, D20_SIDES)


__all__ = [
    "DiceSpec",
    "DiceRoll",
    "parse_dice",
    "roll_dice",
    "roll_dice_detailed",
    "doubled_dice",
    "roll_d20",
]
