"""Two-dimensional grid of float values with sampling and arithmetic."""

from __future__ import annotations

import math
import struct
from numbers import Real
from typing import BinaryIO, Callable, Iterable

from .image import Image
from .rand import Random
from .vec2 import Vec2
from .vec3 import Vec3

_FLT_MIN = 1.17549435082228750797e-38
_FLT_MAX = 3.40282346638528859812e38
_DIAG = 1.4142135624
_HEADER = struct.Struct("<QQ")
_DEFAULT_RNG = Random()


def _norm(i: int, n: int) -> float:
    return i / (n - 1) if n > 1 else 0.0


class Grid2D:
    """Row-major grid of ``width * height`` floats."""

    def __init__(self, width: int, height: int,
                 data: Iterable[float] | None = None) -> None:
        self.width = width
        self.height = height
        if data is None:
            self.data = [0.0] * (width * height)
        else:
            self.data = [float(v) for v in data]
            if len(self.data) != width * height:
                raise ValueError("size mismatch")

    @classmethod
    def from_image(cls, image: Image) -> Grid2D:
        """Grid from the first component of each pixel, scaled to [0, 1]."""
        count = image.component_count
        first = image.data[::count][: len(image.data) // count]
        return cls(image.width, image.height, [v / 255.0 for v in first])

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> Grid2D:
        """Read a grid written by :meth:`save`."""
        header = stream.read(_HEADER.size)
        if len(header) != _HEADER.size:
            raise ValueError("truncated grid header")
        width, height = _HEADER.unpack(header)
        size = width * height
        payload = stream.read(4 * size)
        if len(payload) != 4 * size:
            raise ValueError("truncated grid data")
        return cls(width, height, struct.unpack(f"<{size}f", payload))

    @classmethod
    def gen_random(cls, width: int, height: int, seed: int | None = None) -> Grid2D:
        """Grid of uniform values in [0, 1); seeded when ``seed`` is given."""
        rng = Random(seed) if seed is not None else _DEFAULT_RNG
        return cls(width, height, [rng.rand01() for _ in range(width * height)])

    def save(self, stream: BinaryIO) -> None:
        """Write dimensions as two 64-bit integers followed by float32 values."""
        stream.write(_HEADER.pack(self.width, self.height))
        stream.write(struct.pack(f"<{len(self.data)}f", *self.data))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid2D):
            return NotImplemented
        return (self.width, self.height, self.data) == (other.width, other.height, other.data)

    def __repr__(self) -> str:
        return f"Grid2D({self.width}, {self.height})"

    def __str__(self) -> str:
        parts = []
        for i, value in enumerate(self.data):
            parts.append(f"{value:g}")
            if i % self.width == self.width - 1 and i != 0:
                parts.append("\n")
            else:
                parts.append(", ")
        return "".join(parts)

    def to_byte_array(self) -> bytes:
        """RGB bytes with every value scaled by 255 into all three channels."""
        out = bytearray()
        for value in self.data:
            out += bytes([int(value * 255) & 0xFF]) * 3
        return bytes(out)

    def _index(self, x: int, y: int) -> int:
        return x + y * self.width

    def set_value(self, x: int, y: int, value: float) -> None:
        self.data[self._index(x, y)] = value

    def get_value(self, x: int, y: int) -> float:
        return self.data[self._index(x, y)]

    def get_value_normalized(self, x: float, y: float) -> float:
        """Nearest value at coordinates scaled by the grid size."""
        return self.data[self._index(int(x * self.width), int(y * self.height))]

    def _corners(self, x, y):
        if y is None:
            x, y = x
        x = max(min(x, 1.0), 0.0)
        y = max(min(y, 1.0), 0.0)
        sx = x * (self.width - 1)
        sy = y * (self.height - 1)
        fx, fy = math.floor(sx), math.floor(sy)
        cx, cy = math.ceil(sx), math.ceil(sy)
        values = (self.get_value(fx, fy), self.get_value(cx, fy),
                  self.get_value(fx, cy), self.get_value(cx, cy))
        return sx - fx, sy - fy, values

    def sample(self, x: float | Vec2, y: float | None = None) -> float:
        """Bilinear sample at normalised coordinates, clamped to [0, 1]."""
        alpha, beta, (va, vb, vc, vd) = self._corners(x, y)
        return ((va * (1.0 - alpha) + vb * alpha) * (1.0 - beta)
                + (vc * (1.0 - alpha) + vd * alpha) * beta)

    def normal(self, x: float | Vec2, y: float | None = None) -> Vec3:
        """Surface normal of the height field at normalised coordinates."""
        _, _, (va, vb, vc, vd) = self._corners(x, y)
        w, h = self.width, self.height
        n1 = Vec3.cross(Vec3(1.0 / w, vb - va, 0.0), Vec3(0.0, vc - va, 1.0 / h))
        n2 = Vec3.cross(Vec3(-1.0 / w, vc - vd, 0.0), Vec3(0.0, vb - vd, -1.0 / h))
        return Vec3.normalize((n1 + n2) / 2.0)

    def _combine(self, other: Grid2D, op: Callable[[float, float], float]) -> Grid2D:
        w = max(self.width, other.width)
        h = max(self.height, other.height)
        if (other.width, other.height) == (self.width, self.height):
            return Grid2D(w, h, [op(a, b) for a, b in zip(self.data, other.data)])
        coords = [(_norm(x, w), _norm(y, h)) for y in range(h) for x in range(w)]
        if (w, h) == (self.width, self.height):
            values = [op(a, other.sample(nx, ny)) for a, (nx, ny) in zip(self.data, coords)]
        elif (w, h) == (other.width, other.height):
            values = [op(b, self.sample(nx, ny)) for b, (nx, ny) in zip(other.data, coords)]
        else:
            values = [op(other.sample(nx, ny), self.sample(nx, ny)) for nx, ny in coords]
        return Grid2D(w, h, values)

    def _apply(self, other, op):
        if isinstance(other, Grid2D):
            return self._combine(other, op)
        if isinstance(other, Real):
            return Grid2D(self.width, self.height, [op(v, other) for v in self.data])
        return NotImplemented

    # With grids of different sizes the result takes the larger size. When
    # ``self`` is not the larger grid the operands are applied as other op self.
    def __mul__(self, other):
        return self._apply(other, lambda a, b: a * b)

    def __truediv__(self, other):
        if isinstance(other, Real):
            return self * (1.0 / other)
        return self._apply(other, lambda a, b: a / b)

    def __add__(self, other):
        return self._apply(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._apply(other, lambda a, b: a - b)

    def normalize(self, max_val: float = 1.0) -> None:
        """Rescale values in place to span [0, max_val]."""
        if not self.data:
            return
        lo, hi = min(self.data), max(self.data)
        scale = max_val / (hi - lo)
        self.data = [(v - lo) * scale for v in self.data]

    def max_value(self) -> tuple[int, int]:
        """Position of the first largest value above the smallest positive float."""
        best, pos = _FLT_MIN, (0, 0)
        for i, value in enumerate(self.data):
            if best < value:
                best, pos = value, (i % self.width, i // self.width)
        return pos

    def min_value(self) -> tuple[int, int]:
        """Position of the first smallest value."""
        best, pos = _FLT_MAX, (0, 0)
        for i, value in enumerate(self.data):
            if best > value:
                best, pos = value, (i % self.width, i // self.width)
        return pos

    def fill(self, value: float) -> None:
        self.data = [float(value)] * (self.width * self.height)

    def to_signed_distance(self, threshold: float) -> Grid2D:
        """Approximate signed distance to the ``threshold`` contour.

        Values below the threshold get negative distances; the outermost
        border is never reached and keeps the largest float magnitude.
        """
        w, h = self.width, self.height
        inside = [v >= threshold for v in self.data]
        r = [_FLT_MAX] * (w * h)
        p: list[tuple[int, int] | None] = [None] * (w * h)
        idx = self._index

        for y in range(1, h - 1):
            for x in range(1, w - 1):
                i = idx(x, y)
                if any(inside[j] != inside[i] for j in
                       (idx(x - 1, y), idx(x + 1, y), idx(x, y + 1), idx(x, y - 1))):
                    r[i] = 0.0
                    p[i] = (x, y)

        def relax(x, y, nx, ny, step):
            i, j = idx(x, y), idx(nx, ny)
            if r[j] + step < r[i]:
                p[i] = p[j]
                px, py = p[i]
                r[i] = math.hypot(x - px, y - py)

        for y in range(1, h - 1):
            for x in range(1, w - 1):
                relax(x, y, x - 1, y - 1, _DIAG)
                relax(x, y, x, y - 1, 1.0)
                relax(x, y, x + 1, y - 1, _DIAG)
                relax(x, y, x - 1, y, 1.0)

        for y in range(h - 2, 0, -1):
            for x in range(w - 2, 0, -1):
                relax(x, y, x + 1, y, 1.0)
                relax(x, y, x - 1, y + 1, _DIAG)
                relax(x, y, x, y + 1, 1.0)
                relax(x, y, x + 1, y + 1, _DIAG)

        return Grid2D(w, h, [d if ins else -d for d, ins in zip(r, inside)])