"""Three-component vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

from .rand import Random
from .vec2 import Vec2

_DEFAULT_RNG = Random()


def _pick(rng: Random | None) -> Random:
    return rng if rng is not None else _DEFAULT_RNG


@dataclass(frozen=True)
class Vec3:
    """Immutable 3D vector supporting component-wise and scalar arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Real):
            return Vec3(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Real):
            return Vec3(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, Real):
            return Vec3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __str__(self) -> str:
        return f"[{self.x:g}, {self.y:g}, {self.z:g}]"

    @property
    def xy(self) -> Vec2:
        """The first two components."""
        return Vec2(self.x, self.y)

    def length(self) -> float:
        return math.sqrt(self.sqlength())

    def sqlength(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    @staticmethod
    def dot(a: Vec3, b: Vec3) -> float:
        return a.x * b.x + a.y * b.y + a.z * b.z

    @staticmethod
    def cross(a: Vec3, b: Vec3) -> Vec3:
        return Vec3(
            a.y * b.z - a.z * b.y,
            a.z * b.x - a.x * b.z,
            a.x * b.y - a.y * b.x,
        )

    @staticmethod
    def normalize(a: Vec3) -> Vec3:
        """Unit vector along ``a``, or the zero vector if ``a`` has no length."""
        length = a.length()
        return a / length if length != 0 else Vec3(0.0, 0.0, 0.0)

    @staticmethod
    def reflect(a: Vec3, n: Vec3) -> Vec3:
        return a - n * Vec3.dot(a, n) * 2

    @staticmethod
    def refract(a: Vec3, normal: Vec3, ior: float) -> Vec3 | None:
        """Refracted direction, or None on total internal reflection.

        A positive cosine between ``a`` and ``normal`` means the ray is
        leaving the material.
        """
        cos_i = Vec3.dot(a, normal)
        sign = -1 if cos_i < 0 else 1
        n = ior if sign == 1 else 1.0 / ior
        sin_theta_sq = n * n * (1.0 - cos_i * cos_i)
        if sin_theta_sq > 1.0:
            return None
        c = n * cos_i - sign * math.sqrt(1.0 - sin_theta_sq)
        return a * n - normal * c

    @staticmethod
    def min_v(a: Vec3, b: Vec3) -> Vec3:
        return Vec3(*(min(p, q) for p, q in zip(a, b)))

    @staticmethod
    def max_v(a: Vec3, b: Vec3) -> Vec3:
        return Vec3(*(max(p, q) for p, q in zip(a, b)))

    @staticmethod
    def random(rng: Random | None = None) -> Vec3:
        """Vector with all components uniform in [0, 1)."""
        rng = _pick(rng)
        return Vec3(rng.rand01(), rng.rand01(), rng.rand01())

    @staticmethod
    def random_point_in_sphere(rng: Random | None = None) -> Vec3:
        rng = _pick(rng)
        while True:
            p = Vec3(rng.rand11(), rng.rand11(), rng.rand11())
            if p.sqlength() <= 1:
                return p

    @staticmethod
    def random_point_in_hemisphere(rng: Random | None = None) -> Vec3:
        rng = _pick(rng)
        while True:
            p = Vec3(rng.rand01(), rng.rand01(), rng.rand01())
            if p.sqlength() <= 1:
                return p

    @staticmethod
    def random_point_in_disc(rng: Random | None = None) -> Vec3:
        rng = _pick(rng)
        while True:
            p = Vec3(rng.rand11(), rng.rand11(), 0.0)
            if p.sqlength() <= 1:
                return p

    @staticmethod
    def random_unit_vector(rng: Random | None = None) -> Vec3:
        rng = _pick(rng)
        a = rng.rand0_pi()
        z = rng.rand11()
        r = math.sqrt(1.0 - z * z)
        return Vec3(r * math.cos(a), r * math.sin(a), z)

    @staticmethod
    def clamp(val: Vec3, min_val: float, max_val: float) -> Vec3:
        return Vec3(*(max(min_val, min(c, max_val)) for c in val))