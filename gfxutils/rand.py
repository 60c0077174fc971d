"""Seedable pseudo-random number source with a few fixed ranges."""

from __future__ import annotations

import math
import random
from typing import MutableSequence, TypeVar

T = TypeVar("T")

_TWO_PI = 2.0 * math.pi


class Random:
    """Uniform random numbers in the ranges used throughout the package."""

    def __init__(self, seed: int | None = None) -> None:
        self._gen = random.Random(seed)

    def _uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self._gen.random()

    def rand01(self) -> float:
        """Uniform value in [0, 1)."""
        return self._uniform(0.0, 1.0)

    def rand005(self) -> float:
        """Uniform value in [0, 0.5)."""
        return self._uniform(0.0, 0.5)

    def rand051(self) -> float:
        """Uniform value in [0.5, 1)."""
        return self._uniform(0.5, 1.0)

    def rand11(self) -> float:
        """Uniform value in [-1, 1)."""
        return self._uniform(-1.0, 1.0)

    def rand0_pi(self) -> float:
        """Uniform angle in [0, 2*pi)."""
        return self._uniform(0.0, _TWO_PI)

    def rand(self, a, b):
        """Value in [a, b), converted to the type of ``a`` (ints truncate)."""
        return a + type(a)(self.rand01() * (b - a))

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle ``items`` in place."""
        for i in range(len(items)):
            r = self.rand(0, i + 1)
            items[i], items[r] = items[r], items[i]