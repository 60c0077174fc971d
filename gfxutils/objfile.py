"""Minimal Wavefront OBJ reader for triangle meshes."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Iterable

from .vec3 import Vec3

_INT_PREFIX = re.compile(r"\+?\d+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _leading_float(token: str) -> float:
    """The number at the start of ``token``; 0.0 if it does not start with one."""
    match = _FLOAT_PREFIX.match(token)
    return float(match.group()) if match else 0.0


def _leading_index(token: str) -> int:
    """Zero-based vertex index from a face token such as ``3`` or ``3/1/2``."""
    match = _INT_PREFIX.match(token)
    if not match or int(match.group()) < 1:
        raise ValueError(f"invalid face index: {token!r}")
    return int(match.group()) - 1


def _normalized(vertices: list[Vec3]) -> list[Vec3]:
    lo = Vec3(*(min(v[i] for v in vertices) for i in range(3)))
    hi = Vec3(*(max(v[i] for v in vertices) for i in range(3)))
    center = (hi + lo) / 2.0
    size = max(hi - lo)
    if size == 0:
        raise ValueError("cannot normalise a model with zero extent")
    return [(v - center) / size for v in vertices]


@dataclass
class ObjFile:
    """Triangle indices, vertex positions and per-vertex normals of a mesh."""

    indices: list[tuple[int, int, int]] = field(default_factory=list)
    vertices: list[Vec3] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)

    @classmethod
    def parse(cls, lines: Iterable[str], normalize: bool = False) -> ObjFile:
        """Read ``v``, ``vn`` and triangular ``f`` records.

        With ``normalize`` the model is centred at the origin and scaled so its
        largest extent is 1. Normals given in the file are combined with the
        face normals of the triangles touching each vertex.
        """
        indices: list[tuple[int, int, int]] = []
        vertices: list[Vec3] = []
        normals: list[Vec3] = []

        for raw in lines:
            line = raw.strip()
            if len(line) < 2:
                continue
            if line[0] == "f":
                tokens = line[1:].split()
                if len(tokens) == 3:
                    indices.append(tuple(_leading_index(t) for t in tokens))
            elif line[0] == "v":
                if line[1] == "n":
                    tokens = line[2:].split()
                    if len(tokens) == 3:
                        normals.append(Vec3(*map(_leading_float, tokens)))
                else:
                    tokens = line[1:].split()
                    if len(tokens) == 3:
                        vertices.append(Vec3(*map(_leading_float, tokens)))

        if normalize and vertices:
            vertices = _normalized(vertices)

        for triangle in indices:
            if max(triangle) >= len(vertices):
                raise ValueError(f"face {triangle} refers to a missing vertex")

        count = len(vertices)
        normals = normals[:count] + [Vec3()] * (count - len(normals))
        for triangle in indices:
            a, b, c = (vertices[i] for i in triangle)
            # each face contributes its normal three times per corner
            face_normal = Vec3.cross(b - a, c - a) * 3
            for i in triangle:
                normals[i] = normals[i] + face_normal
        normals = [Vec3.normalize(n) for n in normals]

        return cls(indices, vertices, normals)

    @classmethod
    def from_file(cls, filename: str | os.PathLike, normalize: bool = False) -> ObjFile:
        with open(filename, encoding="utf-8") as handle:
            return cls.parse(handle, normalize)