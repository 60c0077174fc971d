"""Conversions between RGB, HSV, HSL, CMY(K) and YUV colour spaces."""

from __future__ import annotations

import math
from typing import Sequence

from .mat4 import Mat4
from .vec3 import Vec3

_RGB_TO_YUV = Mat4(
    0.299, 0.587, 0.114, 0,
    -0.147, -0.289, 0.436, 0,
    0.615, -0.515, -0.100, 0,
    0, 0, 0, 1,
)

_YUV_TO_RGB = Mat4(
    1, 0, 1.140, 0,
    1, -0.395, -0.581, 0,
    1, 2.032, 0, 0,
    0, 0, 0, 1,
)


def rgb_to_hsv(rgb: Sequence[float]) -> Vec3:
    """RGB in [0, 1] to hue in degrees, saturation and value."""
    r, g, b = rgb
    lo, hi = min(r, g, b), max(r, g, b)
    delta = hi - lo
    h = 0.0
    if hi != lo:
        if hi == r:
            h = math.fmod(60 * ((g - b) / delta) + 360, 360)
        elif hi == g:
            h = math.fmod(60 * ((b - r) / delta) + 120, 360)
        else:
            h = math.fmod(60 * ((r - g) / delta) + 240, 360)
    s = 0.0 if hi == 0 else delta / hi
    return Vec3(h, s, hi)


def hsv_to_rgb(hsv: Sequence[float]) -> Vec3:
    """Hue in degrees (truncated to whole degrees), saturation and value to RGB."""
    hue, sat, val = hsv
    h = math.fmod(int(hue), 360) / 60
    s = max(0.0, min(1.0, sat))
    v = max(0.0, min(1.0, val))
    if s == 0:
        return Vec3(v, v, v)
    i = math.floor(h)
    f = h - i
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))
    return {
        0: Vec3(v, t, p),
        1: Vec3(q, v, p),
        2: Vec3(p, v, t),
        3: Vec3(p, q, v),
        4: Vec3(t, p, v),
    }.get(i, Vec3(v, p, q))


def hsl_to_hsv(hsl: Sequence[float]) -> Vec3:
    h, s, l = hsl
    v = s * min(l, 1 - l) + l
    return Vec3(h, 2 - 2 * l / v if v > 0 else 0.0, v)


def hsv_to_hsl(hsv: Sequence[float]) -> Vec3:
    h, s, v = hsv
    l = v - v * s / 2
    m = min(l, 1 - l)
    return Vec3(h, (v - l) / m if m > 0 else l, l)


def rgb_to_cmy(rgb: Sequence[float]) -> Vec3:
    return Vec3(*(1 - c for c in rgb))


def cmy_to_rgb(cmy: Sequence[float]) -> Vec3:
    return Vec3(*(1 - c for c in cmy))


def rgb_to_cmyk(rgb: Sequence[float]) -> tuple[float, float, float, float]:
    """RGB to (cyan, magenta, yellow, key)."""
    cmy = rgb_to_cmy(rgb)
    k = min(cmy)
    c, m, y = cmy - k
    return (c, m, y, k)


def cmyk_to_rgb(cmyk: Sequence[float]) -> Vec3:
    c, m, y, k = cmyk
    return Vec3(1 - (c + k), 1 - (m + k), 1 - (y + k))


def rgb_to_yuv(rgb: Sequence[float]) -> Vec3:
    return Vec3(*_RGB_TO_YUV.transform4((*rgb, 1.0))[:3])


def yuv_to_rgb(yuv: Sequence[float]) -> Vec3:
    return Vec3(*_YUV_TO_RGB.transform4((*yuv, 1.0))[:3])