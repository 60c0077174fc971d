import pytest

from gfxutils.objfile import ObjFile
from gfxutils.vec3 import Vec3

TRIANGLE = [
    "# a single triangle",
    "v 0 0 0",
    "v 1 0 0",
    "v 0 1 0",
    "f 1 2 3",
]


def test_parse_triangle():
    obj = ObjFile.parse(TRIANGLE)
    assert obj.vertices == [Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0)]
    assert obj.indices == [(0, 1, 2)]
    assert obj.normals == [Vec3(0, 0, 1)] * 3


def test_face_tokens_with_slashes():
    lines = TRIANGLE[:-1] + ["f 1/1/1 2/2/2 3/3/3"]
    assert ObjFile.parse(lines).indices == [(0, 1, 2)]


def test_skips_short_and_non_triangle_lines():
    lines = TRIANGLE + ["", "x", "f 1 2 3 1", "v 1 2", "  "]
    obj = ObjFile.parse(lines)
    assert len(obj.vertices) == 3
    assert obj.indices == [(0, 1, 2)]


def test_normals_are_unit_length_or_zero():
    lines = TRIANGLE + ["v 5 5 5"]
    obj = ObjFile.parse(lines)
    assert len(obj.normals) == len(obj.vertices)
    assert obj.normals[3] == Vec3(0, 0, 0)
    for n in obj.normals[:3]:
        assert n.length() == pytest.approx(1.0)


def test_file_normals_are_combined_and_normalised():
    lines = ["v 0 0 0", "vn 0 3 0"]
    obj = ObjFile.parse(lines)
    assert obj.normals == [Vec3(0, 1, 0)]


def test_normalize_centres_and_scales():
    lines = ["v 0 0 0", "v 2 0 0", "v 0 4 0", "f 1 2 3"]
    obj = ObjFile.parse(lines, normalize=True)
    for axis in range(3):
        lo = min(v[axis] for v in obj.vertices)
        hi = max(v[axis] for v in obj.vertices)
        assert lo + hi == pytest.approx(0.0)
    extents = [max(v[a] for v in obj.vertices) - min(v[a] for v in obj.vertices) for a in range(3)]
    assert max(extents) == pytest.approx(1.0)


def test_normalize_zero_extent_raises():
    with pytest.raises(ValueError):
        ObjFile.parse(["v 1 1 1"], normalize=True)


def test_bad_face_index_raises():
    with pytest.raises(ValueError):
        ObjFile.parse(TRIANGLE[:-1] + ["f 0 1 2"])
    with pytest.raises(ValueError):
        ObjFile.parse(TRIANGLE[:-1] + ["f 1 2 9"])


def test_from_file(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text("\n".join(TRIANGLE) + "\n", encoding="utf-8")
    assert ObjFile.from_file(path) == ObjFile.parse(TRIANGLE)


def test_from_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ObjFile.from_file(tmp_path / "missing.obj")