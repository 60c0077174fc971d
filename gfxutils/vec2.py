"""Two-component vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

from .rand import Random

_DEFAULT_RNG = Random()


@dataclass(frozen=True)
class Vec2:
    """Immutable 2D vector supporting component-wise and scalar arithmetic."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        if isinstance(other, Real):
            return Vec2(self.x + other, self.y + other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        if isinstance(other, Real):
            return Vec2(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        if isinstance(other, Real):
            return Vec2(self.x / other, self.y / other)
        return NotImplemented

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"[{self.x:g}, {self.y:g}]"

    def length(self) -> float:
        return math.sqrt(self.sqlength())

    def sqlength(self) -> float:
        return self.x * self.x + self.y * self.y

    @staticmethod
    def normalize(a: Vec2) -> Vec2:
        """Unit vector along ``a``, or the zero vector if ``a`` has no length."""
        length = a.length()
        return a / length if length != 0 else Vec2(0.0, 0.0)

    @staticmethod
    def random(rng: Random | None = None) -> Vec2:
        """Vector with both components uniform in [0, 1)."""
        rng = rng if rng is not None else _DEFAULT_RNG
        return Vec2(rng.rand01(), rng.rand01())

    @staticmethod
    def clamp(val: Vec2, min_val: float, max_val: float) -> Vec2:
        return Vec2(*(max(min_val, min(c, max_val)) for c in val))