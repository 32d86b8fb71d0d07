"""Injectable randomness for every rolling function.

No engine function reads a global generator. Callers pass a RandomSource,
which makes rolls reproducible under test and gives seeded play a single
substitution point.
"""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable

from charsheet.core.config import get_settings
from charsheet.core.logging import get_logger


logger = get_logger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """Anything that yields uniformly distributed integers on demand."""

    def randint(self, low: int, high: int) -> int:
        """Return an integer N with ``low <= N <= high``."""
        ...


class SeededRandomSource:
    """RandomSource backed by its own ``random.Random`` instance.

    Example:
        >>> rng = SeededRandomSource(seed=7)
        >>> 1 <= rng.randint(1, 20) <= 20
        True
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the source.

        Args:
            seed: Optional seed for reproducible sequences.
        """
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def randint(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self._seed!r})"


def default_random_source() -> SeededRandomSource:
    """Create a random source seeded from ``CHARSHEET_DICE__SEED`` if set."""
    seed = get_settings().dice.seed
    logger.debug("Random source created", seed=seed)
    return SeededRandomSource(seed=seed)


__all__ = [
    "RandomSource",
    "SeededRandomSource",
    "default_random_source",
]
