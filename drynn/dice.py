"""Seeded dice used by every world-generation stage."""

from __future__ import annotations

import random
from typing import MutableSequence, TypeVar

_T = TypeVar("_T")

_MASK64 = (1 << 64) - 1


class Dice:
    """A deterministic source of dice rolls built from a pair of seeds.

    Two instances made from the same seeds produce the same sequence of
    rolls. ``split`` derives an independent child stream so that one stage
    of generation can be changed without shifting the rolls of another.
    """

    def __init__(self, seed1: int = 0, seed2: int = 0) -> None:
        self.seed1 = seed1 & _MASK64
        self.seed2 = seed2 & _MASK64
        self._rng = random.Random((self.seed1 << 64) | self.seed2)

    def __repr__(self) -> str:
        return f"Dice(seed1={self.seed1}, seed2={self.seed2})"

    def roll(self, low: int, high: int) -> int:
        """Return a uniform integer in [low, high]; the bounds may be given in either order."""
        if high < low:
            low, high = high, low
        return low + self._rng.randrange(high - low + 1)

    def _sum_of(self, n: int, sides: int) -> int:
        if n < 0:
            raise ValueError(f"number of dice must be non-negative, got {n}")
        return sum(self.roll(1, sides) for _ in range(n))

    def d4(self, n: int) -> int:
        """Sum of n four-sided dice."""
        return self._sum_of(n, 4)

    def d6(self, n: int) -> int:
        """Sum of n six-sided dice."""
        return self._sum_of(n, 6)

    def d8(self, n: int) -> int:
        """Sum of n eight-sided dice."""
        return self._sum_of(n, 8)

    def d10(self, n: int) -> int:
        """Sum of n ten-sided dice."""
        return self._sum_of(n, 10)

    def d12(self, n: int) -> int:
        """Sum of n twelve-sided dice."""
        return self._sum_of(n, 12)

    def d100(self, n: int) -> int:
        """Sum of n hundred-sided dice."""
        return self._sum_of(n, 100)

    def split(self) -> Dice:
        """Derive an independent child stream, advancing this one."""
        return Dice(self._rng.getrandbits(64), self._rng.getrandbits(64))

    def shuffle(self, items: MutableSequence[_T]) -> None:
        """Shuffle a mutable sequence in place."""
        self._rng.shuffle(items)

    def random(self) -> float:
        """Return a uniform float in [0, 1)."""
        return self._rng.random()