"""Row-major 3x3 matrix."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterator

from .vec3 import Vec3

_IDENTITY = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)


class Mat3:
    """Immutable 3x3 matrix stored row by row."""

    __slots__ = ("_e",)

    def __init__(self, *args) -> None:
        if not args:
            elements = _IDENTITY
        elif len(args) == 1:
            elements = tuple(args[0])
        else:
            elements = tuple(args)
        if len(elements) != 9:
            raise TypeError(f"Mat3 needs 9 elements, got {len(elements)}")
        self._e = tuple(elements)

    @classmethod
    def from_rows(cls, e1: Vec3, e2: Vec3, e3: Vec3) -> Mat3:
        return cls(*e1, *e2, *e3)

    def __iter__(self) -> Iterator[float]:
        return iter(self._e)

    def __getitem__(self, index: int) -> float:
        return self._e[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat3):
            return NotImplemented
        return self._e == other._e

    def __hash__(self) -> int:
        return hash(self._e)

    def __repr__(self) -> str:
        return f"Mat3{self._e!r}"

    def __str__(self) -> str:
        rows = [", ".join(f"{v:g}" for v in self._e[r * 3:r * 3 + 3]) for r in range(3)]
        return "[" + "\n ".join(rows) + "]"

    def _row(self, r: int) -> tuple:
        return self._e[r * 3:r * 3 + 3]

    def __mul__(self, other):
        if isinstance(other, Mat3):
            columns = [other._e[c::3] for c in range(3)]
            return Mat3(
                sum(a * b for a, b in zip(self._row(r), col))
                for r in range(3)
                for col in columns
            )
        if isinstance(other, Vec3):
            return Vec3(*(Vec3.dot(Vec3(*self._row(r)), other) for r in range(3)))
        if isinstance(other, Real):
            return Mat3(v * other for v in self._e)
        return NotImplemented

    def __add__(self, scalar):
        if isinstance(scalar, Real):
            return Mat3(v + scalar for v in self._e)
        return NotImplemented

    def __sub__(self, scalar):
        if isinstance(scalar, Real):
            return Mat3(v - scalar for v in self._e)
        return NotImplemented

    def __truediv__(self, scalar):
        if isinstance(scalar, Real):
            return Mat3(v / scalar for v in self._e)
        return NotImplemented

    @staticmethod
    def scaling(x, y=None, z=None) -> Mat3:
        """Scaling matrix from three factors or from a single Vec3."""
        if y is None and z is None:
            x, y, z = x
        return Mat3(x, 0, 0, 0, y, 0, 0, 0, z)

    @staticmethod
    def rotation_x(degree: float) -> Mat3:
        a = math.radians(degree)
        c, s = math.cos(a), math.sin(a)
        return Mat3(1, 0, 0, 0, c, s, 0, -s, c)

    @staticmethod
    def rotation_y(degree: float) -> Mat3:
        a = math.radians(degree)
        c, s = math.cos(a), math.sin(a)
        return Mat3(c, 0, -s, 0, 1, 0, s, 0, c)

    @staticmethod
    def rotation_z(degree: float) -> Mat3:
        a = math.radians(degree)
        c, s = math.cos(a), math.sin(a)
        return Mat3(c, s, 0, -s, c, 0, 0, 0, 1)

    @staticmethod
    def transpose(m: Mat3) -> Mat3:
        return Mat3(m._e[c + 3 * r] for c in range(3) for r in range(3))

    @staticmethod
    def det(m: Mat3) -> float:
        e = m._e
        return (
            e[0] * (e[4] * e[8] - e[5] * e[7])
            - e[1] * (e[3] * e[8] - e[5] * e[6])
            + e[2] * (e[3] * e[7] - e[4] * e[6])
        )

    @staticmethod
    def inverse(m: Mat3, det: float | None = None) -> Mat3:
        """Inverse of ``m``; raises ZeroDivisionError for a singular matrix."""
        if det is None:
            det = Mat3.det(m)
        q = 1.0 / det
        e = m._e
        return Mat3(
            (e[4] * e[8] - e[5] * e[7]) * q,
            (e[2] * e[7] - e[1] * e[8]) * q,
            (e[1] * e[5] - e[2] * e[4]) * q,
            (e[5] * e[6] - e[3] * e[8]) * q,
            (e[0] * e[8] - e[2] * e[6]) * q,
            (e[2] * e[3] - e[0] * e[5]) * q,
            (e[3] * e[7] - e[4] * e[6]) * q,
            (e[1] * e[6] - e[0] * e[7]) * q,
            (e[0] * e[4] - e[1] * e[3]) * q,
        )