"""Simple 8-bit raster image with resampling, cropping and filtering."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

_LUT_LARGE = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "
_LUT_SMALL = "@%#*+=-:. "
_CODE_INDENT = "              "


def _byte(value: float) -> int:
    """Truncate towards zero and keep the low eight bits."""
    return int(value) & 0xFF


def _luminance(r: int, g: int, b: int) -> int:
    return int(0.299 * r + 0.587 * g + 0.114 * b)


class Image:
    """Row-major image of ``width * height`` pixels with interleaved components."""

    def __init__(
        self,
        width: int = 100,
        height: int = 100,
        component_count: int = 4,
        data: Iterable[int] | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.component_count = component_count
        if data is None:
            self.data = bytearray(width * height * component_count)
        else:
            self.data = bytearray(data)

    @classmethod
    def from_color(cls, color: Sequence[float]) -> Image:
        """A 1x1 RGBA image from a colour with components in [0, 1]."""
        return cls(1, 1, 4, [_byte(c * 255) for c in color])

    @classmethod
    def gen_test_image(cls, width: int, height: int) -> Image:
        """Colour bars on the left two thirds, a grey ramp on the right third."""
        part_y1, part_y2 = height // 3, height * 2 // 3
        part_x1, part_x2 = width // 3, width * 2 // 3
        result = cls(width, height, 4)
        for y in range(height):
            for x in range(width):
                if x < part_x2:
                    channels = [y < part_y1, part_y1 <= y < part_y2, y >= part_y2]
                    if x >= part_x1:
                        channels = [not c for c in channels]
                    for component, on in enumerate(channels):
                        result.set_value(x, y, component, 255 if on else 0)
                else:
                    level = _byte(255 * ((y >= part_y1) * 0.5 + (y >= part_y2) * 0.5))
                    result.set_gray(x, y, level)
                result.set_value(x, y, 3, 255)
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.component_count == other.component_count
            and self.data == other.data
        )

    def __repr__(self) -> str:
        return f"Image({self.width}, {self.height}, {self.component_count})"

    def _pixels(self, size: int) -> list[bytearray]:
        return [self.data[i:i + size] for i in range(0, len(self.data) - size + 1, size)]

    def multiply(self, color: Sequence[float]) -> None:
        """Scale every channel by an RGBA colour; RGB images gain an alpha channel."""
        r, g, b, a = color
        if self.component_count == 4:
            factors = (r, g, b, a)
            self.data = bytearray(_byte(v * factors[i % 4]) for i, v in enumerate(self.data))
        elif self.component_count == 3:
            out = bytearray()
            for pr, pg, pb in self._pixels(3):
                out += bytes((_byte(pr * r), _byte(pg * g), _byte(pb * b), _byte(255 * a)))
            self.data = out
            self.component_count = 4

    def generate_alpha(self, alpha: int = 255) -> None:
        """Set the alpha channel to ``alpha``, adding one to RGB images."""
        if self.component_count == 4:
            self.data[3::4] = bytes([alpha]) * (len(self.data) // 4)
        elif self.component_count == 3:
            out = bytearray()
            for pixel in self._pixels(3):
                out += pixel + bytes([alpha])
            self.data = out
            self.component_count = 4

    def generate_alpha_from_luminance(self) -> None:
        """Set the alpha channel to each pixel's luminance, adding one to RGB images."""
        if self.component_count == 4:
            for i, (r, g, b, _) in enumerate(self._pixels(4)):
                self.data[i * 4 + 3] = _luminance(r, g, b)
        elif self.component_count == 3:
            out = bytearray()
            for r, g, b in self._pixels(3):
                out += bytes((r, g, b, _luminance(r, g, b)))
            self.data = out
            self.component_count = 4

    def compute_index(self, x: int, y: int, component: int) -> int:
        return component + (x + y * self.width) * self.component_count

    def get_value(self, x: int, y: int, component: int) -> int:
        return self.data[self.compute_index(x, y, component)]

    def set_value(self, x: int, y: int, component: int, value: int) -> None:
        self.data[self.compute_index(x, y, component)] = value & 0xFF

    def set_gray(self, x: int, y: int, value: int) -> None:
        """Set the first three components of a pixel to ``value``."""
        index = self.compute_index(x, y, 0)
        self.data[index:index + 3] = bytes([value & 0xFF]) * 3

    def set_normalized_value(self, x: int, y: int, value: float,
                             component: int | None = None) -> None:
        """Store ``value`` clamped to [0, 1] as a byte, in one component or all three."""
        byte = _byte(max(0.0, min(1.0, value)) * 255)
        if component is None:
            self.set_gray(x, y, byte)
        else:
            self.set_value(x, y, component, byte)

    def get_lumi_value(self, x: int, y: int) -> int:
        """Luminance of a pixel; 0 for images with more than four components."""
        count = self.component_count
        if count == 1:
            return self.get_value(x, y, 0)
        if count == 2:
            return int(self.get_value(x, y, 0) * 0.5 + self.get_value(x, y, 1) * 0.5)
        if count in (3, 4):
            return _luminance(*(self.get_value(x, y, c) for c in range(3)))
        return 0

    @staticmethod
    def _linear(a: int, b: int, alpha: float) -> int:
        return int(a * (1.0 - alpha) + b * alpha)

    def sample(self, x: float, y: float, component: int) -> int:
        """Bilinear sample at normalised coordinates in [0, 1]."""
        sx = x * (self.width - 1)
        sy = y * (self.height - 1)
        fx, fy = math.floor(sx), math.floor(sy)
        cx, cy = math.ceil(sx), math.ceil(sy)
        alpha = sx - fx
        beta = sy - fy
        top = self._linear(self.get_value(fx, fy, component),
                           self.get_value(cx, fy, component), alpha)
        bottom = self._linear(self.get_value(fx, cy, component),
                              self.get_value(cx, cy, component), alpha)
        return self._linear(top, bottom, beta)

    def to_code(self, var_name: str = "myImage", padding: bool = False) -> str:
        """Source-code literal describing the image, 30 values per line."""
        parts = [
            f"Image {var_name} {{{self.width},{self.height},{self.component_count},\n",
            _CODE_INDENT + "{",
        ]
        last = len(self.data) - 1
        for i, value in enumerate(self.data):
            if i % 30 == 0:
                parts.append("\n" + _CODE_INDENT)
            parts.append(f"{value:3d}" if padding else str(value))
            parts.append("," if i < last else "\n")
        parts.append("          }};\n")
        return "".join(parts)

    def to_ascii_art(self, small_table: bool = True) -> str:
        """Text rendering using one character pair per 4x4 block, top row first."""
        lut = _LUT_SMALL if small_table else _LUT_LARGE
        lines = []
        for y in range(0, self.height, 4):
            row = []
            for x in range(0, self.width, 4):
                v = self.get_lumi_value(x, self.height - 1 - y)
                ch = lut[min(v * len(lut) // 255, len(lut) - 1)]
                row.append(ch * 2)
            lines.append("".join(row) + "\n")
        return "".join(lines)

    def filter(self, kernel) -> Image:
        """Convolve with ``kernel`` (an object with width, height and get_value(x, y)).

        Border pixels that the kernel does not fully cover are left at zero.
        """
        result = Image(self.width, self.height, self.component_count)
        hw = kernel.width // 2
        hh = kernel.height // 2
        for y in range(hh, self.height - hh):
            for x in range(hw, self.width - hw):
                for c in range(self.component_count):
                    conv = sum(
                        self.get_value(x + u - hw, y + v - hh, c) * kernel.get_value(u, v)
                        for u in range(kernel.height)
                        for v in range(kernel.width)
                    )
                    result.set_value(x, y, c, _byte(abs(conv)))
        return result

    def to_grayscale(self) -> Image:
        result = Image(self.width, self.height, 1)
        for y in range(self.height):
            for x in range(self.width):
                result.set_value(x, y, 0, self.get_lumi_value(x, y))
        return result

    def crop(self, bl_x: int, bl_y: int, tr_x: int, tr_y: int) -> Image:
        """The region from (bl_x, bl_y) inclusive to (tr_x, tr_y) exclusive."""
        data = bytearray()
        for y in range(bl_y, tr_y):
            start = self.compute_index(bl_x, y, 0)
            end = self.compute_index(tr_x, y, 0)
            data += self.data[start:end]
        return Image(tr_x - bl_x, tr_y - bl_y, self.component_count, data)

    def resample(self, new_width: int) -> Image:
        """Bilinear resample to ``new_width``, keeping the aspect ratio."""
        new_height = int(new_width * self.height / self.width)
        result = Image(new_width, new_height, self.component_count)
        for y in range(new_height):
            for x in range(new_width):
                for c in range(self.component_count):
                    result.set_value(x, y, c, self.sample(x / new_width, y / new_height, c))
        return result

    def crop_to_aspect_and_resample(self, new_width: int, new_height: int) -> Image:
        """Centre-crop to the target aspect ratio and box-filter down to the target size."""
        if new_width == self.width and new_height == self.height:
            return Image(self.width, self.height, self.component_count, self.data)

        aspect = self.width / self.height
        new_aspect = new_width / new_height
        start_x = int(self.width * ((1.0 - new_aspect / aspect) / 2.0)) if aspect > new_aspect else 0
        start_y = int(self.height * ((1.0 - aspect / new_aspect) / 2.0)) if aspect < new_aspect else 0

        span_x = self.width - 2 * start_x
        span_y = self.height - 2 * start_y
        reduction = span_x // new_width
        if reduction == 0:
            raise ValueError("target size is larger than the cropped source")

        result = Image(new_width, new_height, self.component_count)
        area = reduction * reduction
        for y in range(new_height):
            for x in range(new_width):
                totals = [0] * self.component_count
                for dy in range(reduction):
                    for dx in range(reduction):
                        sx = int(start_x + x / new_width * span_x + dx)
                        sy = int(start_y + y / new_height * span_y + dy)
                        for c in range(self.component_count):
                            totals[c] += self.get_value(sx, sy, c)
                for c, total in enumerate(totals):
                    result.set_value(x, y, c, total // area)
        return result

    def flip_horizontal(self) -> Image:
        """Mirror the rows top to bottom."""
        row = self.width * self.component_count
        rows = [self.data[i:i + row] for i in range(0, self.height * row, row)]
        return Image(self.width, self.height, self.component_count, b"".join(reversed(rows)))

    def flip_vertical(self) -> Image:
        """Mirror the columns left to right."""
        result = Image(self.width, self.height, self.component_count)
        for y in range(self.height):
            for x in range(self.width):
                src = self.compute_index(x, y, 0)
                dst = result.compute_index(self.width - x - 1, y, 0)
                result.data[dst:dst + self.component_count] = \
                    self.data[src:src + self.component_count]
        return result