"""Row-major 4x4 matrix with the usual graphics transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Sequence

from .vec2 import Vec2
from .vec3 import Vec3

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


class Mat4:
    """Immutable 4x4 matrix stored row by row."""

    __slots__ = ("_e",)

    def __init__(self, *args) -> None:
        if not args:
            elements = _IDENTITY
        elif len(args) == 1:
            elements = tuple(args[0])
        else:
            elements = tuple(args)
        if len(elements) != 16:
            raise TypeError(f"Mat4 needs 16 elements, got {len(elements)}")
        self._e = tuple(elements)

    @classmethod
    def from_rows(
        cls,
        e1: Vec3,
        e14: float,
        e2: Vec3,
        e24: float,
        e3: Vec3,
        e34: float,
        e4: Vec3 = Vec3(0.0, 0.0, 0.0),
        e44: float = 1.0,
    ) -> Mat4:
        """Build a matrix from three-component rows plus their fourth entries."""
        return cls(*e1, e14, *e2, e24, *e3, e34, *e4, e44)

    def __iter__(self) -> Iterator[float]:
        return iter(self._e)

    def __getitem__(self, index: int) -> float:
        return self._e[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self._e == other._e

    def __hash__(self) -> int:
        return hash(self._e)

    def __repr__(self) -> str:
        return f"Mat4{self._e!r}"

    def __str__(self) -> str:
        rows = [", ".join(f"{v:g}" for v in self._row(r)) for r in range(4)]
        return "[" + "\n ".join(rows) + "]"

    def _row(self, r: int) -> tuple:
        return self._e[r * 4:r * 4 + 4]

    def transform4(self, vector: Sequence[float]) -> tuple[float, float, float, float]:
        """Multiply a homogeneous four-component vector, without dividing by w."""
        x, y, z, w = vector
        return tuple(
            x * row[0] + y * row[1] + z * row[2] + w * row[3]
            for row in (self._row(r) for r in range(4))
        )

    def __mul__(self, other):
        if isinstance(other, Mat4):
            columns = [other._e[c::4] for c in range(4)]
            return Mat4(
                sum(a * b for a, b in zip(self._row(r), col))
                for r in range(4)
                for col in columns
            )
        if isinstance(other, Vec3):
            x, y, z, w = self.transform4((other.x, other.y, other.z, 1.0))
            return Vec3(x / w, y / w, z / w)
        if isinstance(other, Vec2):
            x, y, _, _ = self.transform4((other.x, other.y, 0.0, 1.0))
            return Vec2(x, y)
        if isinstance(other, Real):
            return Mat4(v * other for v in self._e)
        return NotImplemented

    def __add__(self, scalar):
        if isinstance(scalar, Real):
            return Mat4(v + scalar for v in self._e)
        return NotImplemented

    def __sub__(self, scalar):
        if isinstance(scalar, Real):
            return Mat4(v - scalar for v in self._e)
        return NotImplemented

    def __truediv__(self, scalar):
        if isinstance(scalar, Real):
            return Mat4(v / scalar for v in self._e)
        return NotImplemented

    @staticmethod
    def scaling(x, y=None, z=None) -> Mat4:
        """Scaling matrix from one uniform factor, a Vec3, or three factors."""
        if y is None and z is None:
            if isinstance(x, Real):
                x = y = z = x
            else:
                x, y, z = x
        return Mat4(x, 0, 0, 0, 0, y, 0, 0, 0, 0, z, 0, 0, 0, 0, 1)

    @staticmethod
    def translation(x, y=None, z=None) -> Mat4:
        """Translation matrix from a Vec3 or three offsets."""
        if y is None and z is None:
            x, y, z = x
        return Mat4(1, 0, 0, x, 0, 1, 0, y, 0, 0, 1, z, 0, 0, 0, 1)

    @staticmethod
    def rotation_x(degree: float) -> Mat4:
        a = math.radians(degree)
        c, s = math.cos(a), math.sin(a)
        return Mat4(1, 0, 0, 0, 0, c, s, 0, 0, -s, c, 0, 0, 0, 0, 1)

    @staticmethod
    def rotation_y(degree: float) -> Mat4:
        a = math.radians(degree)
        c, s = math.cos(a), math.sin(a)
        return Mat4(c, 0, -s, 0, 0, 1, 0, 0, s, 0, c, 0, 0, 0, 0, 1)

    @staticmethod
    def rotation_z(degree: float) -> Mat4:
        a = math.radians(degree)
        c, s = math.cos(a), math.sin(a)
        return Mat4(c, s, 0, 0, -s, c, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)

    @staticmethod
    def rotation_axis(axis: Vec3, degree: float) -> Mat4:
        a = math.radians(degree)
        cos_a, sin_a = math.cos(a), math.sin(a)
        om = 1 - cos_a
        x, y, z = axis
        return Mat4(
            cos_a + om * x * x, om * x * y + sin_a * z, om * x * z - sin_a * y, 0,
            om * x * y - sin_a * z, cos_a + om * y * y, om * y * z + sin_a * x, 0,
            om * x * z + sin_a * y, om * y * z - sin_a * x, cos_a + om * z * z, 0,
            0, 0, 0, 1,
        )

    @staticmethod
    def transpose(m: Mat4) -> Mat4:
        return Mat4(m._e[c + 4 * r] for c in range(4) for r in range(4))

    @staticmethod
    def det(m: Mat4) -> float:
        e = m._e
        return (
            e[4] * (e[11] * (e[1] * e[14] - e[2] * e[13])
                    + e[3] * (-e[9] * e[14] + e[13] * e[10])
                    + e[15] * (e[2] * e[9] - e[1] * e[10]))
            + e[7] * (e[0] * (e[9] * e[14] - e[13] * e[10])
                      + e[2] * (-e[12] * e[9] + e[8] * e[13])
                      + e[1] * (-e[8] * e[14] + e[12] * e[10]))
            + e[15] * (e[5] * (-e[8] * e[2] + e[0] * e[10])
                       + e[6] * (-e[0] * e[9] + e[1] * e[8]))
            + e[11] * (e[0] * (-e[5] * e[14] + e[6] * e[13])
                       + e[12] * (e[2] * e[5] - e[6] * e[1]))
            + e[3] * (e[6] * (e[9] * e[12] - e[13] * e[8])
                      + e[5] * (e[8] * e[14] - e[12] * e[10]))
        )

    @staticmethod
    def inverse(m: Mat4, det: float | None = None) -> Mat4:
        """Inverse of ``m``; raises ZeroDivisionError for a singular matrix."""
        if det is None:
            det = Mat4.det(m)
        q = 1.0 / det
        e = m._e
        r = [0.0] * 16
        r[0] = (e[7] * e[9] * e[14] + e[15] * e[5] * e[10] - e[15] * e[6] * e[9]
                - e[11] * e[5] * e[14] - e[7] * e[13] * e[10] + e[11] * e[6] * e[13]) * q
        r[4] = -(e[4] * e[15] * e[10] - e[4] * e[11] * e[14] - e[15] * e[6] * e[8]
                 + e[11] * e[6] * e[12] + e[7] * e[8] * e[14] - e[7] * e[12] * e[10]) * q
        r[8] = (-e[4] * e[11] * e[13] + e[4] * e[15] * e[9] - e[15] * e[8] * e[5]
                - e[7] * e[12] * e[9] + e[11] * e[12] * e[5] + e[7] * e[8] * e[13]) * q
        r[12] = -(e[4] * e[9] * e[14] - e[4] * e[13] * e[10] + e[12] * e[5] * e[10]
                  - e[9] * e[6] * e[12] - e[8] * e[5] * e[14] + e[13] * e[6] * e[8]) * q
        r[1] = (-e[1] * e[15] * e[10] + e[1] * e[11] * e[14] - e[11] * e[2] * e[13]
                - e[3] * e[9] * e[14] + e[15] * e[2] * e[9] + e[3] * e[13] * e[10]) * q
        r[5] = (-e[15] * e[2] * e[8] + e[15] * e[0] * e[10] - e[11] * e[0] * e[14]
                - e[3] * e[12] * e[10] + e[11] * e[2] * e[12] + e[3] * e[8] * e[14]) * q
        r[9] = -(-e[1] * e[15] * e[8] + e[1] * e[11] * e[12] + e[15] * e[0] * e[9]
                 - e[3] * e[9] * e[12] + e[3] * e[13] * e[8] - e[11] * e[0] * e[13]) * q
        r[13] = (-e[1] * e[8] * e[14] + e[1] * e[12] * e[10] + e[0] * e[9] * e[14]
                 - e[0] * e[13] * e[10] - e[12] * e[2] * e[9] + e[8] * e[2] * e[13]) * q
        r[2] = -(e[15] * e[2] * e[5] - e[7] * e[2] * e[13] - e[3] * e[5] * e[14]
                 + e[1] * e[7] * e[14] - e[1] * e[15] * e[6] + e[3] * e[13] * e[6]) * q
        r[6] = (-e[4] * e[3] * e[14] + e[4] * e[15] * e[2] + e[7] * e[0] * e[14]
                - e[15] * e[6] * e[0] - e[7] * e[12] * e[2] + e[3] * e[6] * e[12]) * q
        r[10] = -(-e[15] * e[0] * e[5] + e[15] * e[1] * e[4] + e[3] * e[12] * e[5]
                  + e[7] * e[0] * e[13] - e[7] * e[1] * e[12] - e[3] * e[4] * e[13]) * q
        r[14] = -(e[14] * e[0] * e[5] - e[14] * e[1] * e[4] - e[2] * e[12] * e[5]
                  - e[6] * e[0] * e[13] + e[6] * e[1] * e[12] + e[2] * e[4] * e[13]) * q
        r[3] = (-e[1] * e[11] * e[6] + e[1] * e[7] * e[10] - e[7] * e[2] * e[9]
                - e[3] * e[5] * e[10] + e[11] * e[2] * e[5] + e[3] * e[9] * e[6]) * q
        r[7] = -(-e[4] * e[3] * e[10] + e[4] * e[11] * e[2] + e[7] * e[0] * e[10]
                 - e[11] * e[6] * e[0] + e[3] * e[6] * e[8] - e[7] * e[8] * e[2]) * q
        r[11] = (-e[11] * e[0] * e[5] + e[11] * e[1] * e[4] + e[3] * e[8] * e[5]
                 + e[7] * e[0] * e[9] - e[7] * e[1] * e[8] - e[3] * e[4] * e[9]) * q
        r[15] = (e[10] * e[0] * e[5] - e[10] * e[1] * e[4] - e[2] * e[8] * e[5]
                 - e[6] * e[0] * e[9] + e[6] * e[1] * e[8] + e[2] * e[4] * e[9]) * q
        return Mat4(r)

    @staticmethod
    def perspective(fovy: float, aspect: float, znear: float, zfar: float) -> Mat4:
        """Symmetric perspective projection from a vertical field of view in degrees."""
        cotan = 1.0 / math.tan(math.radians(fovy) / 2.0)
        return Mat4(
            cotan / aspect, 0, 0, 0,
            0, cotan, 0, 0,
            0, 0, -(zfar + znear) / (zfar - znear), -2 * (zfar * znear) / (zfar - znear),
            0, 0, -1, 0,
        )

    @staticmethod
    def frustum(left: float, right: float, bottom: float, top: float,
                znear: float, zfar: float) -> Mat4:
        """Perspective projection from explicit near-plane bounds."""
        return Mat4(
            2 * znear / (right - left), 0, (right + left) / (right - left), 0,
            0, 2 * znear / (top - bottom), (top + bottom) / (top - bottom), 0,
            0, 0, -(zfar + znear) / (zfar - znear), -2 * (zfar * znear) / (zfar - znear),
            0, 0, -1, 0,
        )

    @staticmethod
    def ortho(left: float, right: float, bottom: float, top: float,
              znear: float, zfar: float) -> Mat4:
        return Mat4(
            2 / (right - left), 0, 0, -(right + left) / (right - left),
            0, 2 / (top - bottom), 0, -(top + bottom) / (top - bottom),
            0, 0, -2 / (zfar - znear), -(zfar + znear) / (zfar - znear),
            0, 0, 0, 1,
        )

    @staticmethod
    def look_at(eye: Vec3, at: Vec3, up: Vec3) -> Mat4:
        f = at - eye
        s = Vec3.cross(f, up)
        u = Vec3.cross(s, f)
        f = Vec3.normalize(f)
        u = Vec3.normalize(u)
        s = Vec3.normalize(s)
        return Mat4(
            s.x, s.y, s.z, -Vec3.dot(s, eye),
            u.x, u.y, u.z, -Vec3.dot(u, eye),
            -f.x, -f.y, -f.z, Vec3.dot(f, eye),
            0, 0, 0, 1,
        )

    @staticmethod
    def mirror(p: Vec3, n: Vec3) -> Mat4:
        """Reflection through the plane containing ``p`` with unit normal ``n``."""
        k = Vec3.dot(p, n)
        return Mat4(
            1 - 2 * n.x * n.x, -2 * n.x * n.y, -2 * n.x * n.z, 2 * k * n.x,
            -2 * n.y * n.x, 1 - 2 * n.y * n.y, -2 * n.y * n.z, 2 * k * n.y,
            -2 * n.z * n.x, -2 * n.z * n.y, 1 - 2 * n.z * n.z, 2 * k * n.z,
            0, 0, 0, 1,
        )

    @staticmethod
    def stereo_look_at_and_projection(
        eye: Vec3,
        at: Vec3,
        up: Vec3,
        fovy: float,
        aspect: float,
        znear: float,
        zfar: float,
        focal_length: float,
        eye_dist: float,
    ) -> StereoMatrices:
        """View and off-axis projection matrices for a left/right eye pair."""
        wd2 = znear * math.tan(math.radians(fovy) / 2)
        shift = eye_dist * (znear / focal_length)
        top, bottom = wd2, -wd2
        left_proj = Mat4.frustum(-aspect * wd2 - shift, aspect * wd2 - shift,
                                 bottom, top, znear, zfar)
        right_proj = Mat4.frustum(-aspect * wd2 + shift, aspect * wd2 + shift,
                                  bottom, top, znear, zfar)
        view = Mat4.look_at(eye, at, up)
        return StereoMatrices(
            left_view=Mat4.translation(-eye_dist / 2, 0, 0) * view,
            right_view=Mat4.translation(eye_dist / 2, 0, 0) * view,
            left_proj=left_proj,
            right_proj=right_proj,
        )


@dataclass(frozen=True)
class StereoMatrices:
    """View and projection matrices for both eyes."""

    left_view: Mat4
    right_view: Mat4
    left_proj: Mat4
    right_proj: Mat4