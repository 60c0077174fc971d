import pytest

from gfxutils.rand import Random
from gfxutils.vec2 import Vec2
from gfxutils.vec3 import Vec3


def test_add_sub_round_trip():
    a = Vec3(1.0, 2.0, -3.0)
    b = Vec3(0.5, -0.25, 8.0)
    assert (a + b) - b == a


def test_scalar_ops_round_trip():
    a = Vec3(1.0, -2.0, 4.0)
    assert (a * 2) / 2 == a
    assert (a - 1) + 1 == a
    assert 2 * a == a * 2


def test_getitem_iter_xy():
    a = Vec3(1.0, 2.0, 3.0)
    assert [a[0], a[1], a[2]] == list(a)
    assert a.xy == Vec2(1.0, 2.0)


def test_str_format():
    assert str(Vec3(1.0, 0.5, -2.0)) == "[1, 0.5, -2]"


def test_cross_is_orthogonal():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = Vec3.cross(a, b)
    assert Vec3.dot(c, a) == pytest.approx(0.0)
    assert Vec3.dot(c, b) == pytest.approx(0.0)


def test_cross_anticommutative():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    assert Vec3.cross(a, b) == Vec3.cross(b, a) * -1


def test_dot_self_is_sqlength():
    a = Vec3(2.0, -3.0, 6.0)
    assert Vec3.dot(a, a) == a.sqlength()


def test_normalize():
    assert Vec3.normalize(Vec3(3.0, -1.0, 2.0)).length() == pytest.approx(1.0)
    assert Vec3.normalize(Vec3()) == Vec3(0.0, 0.0, 0.0)


def test_reflect_preserves_length_and_flips_normal_component():
    a = Vec3(1.0, -2.0, 0.5)
    n = Vec3(0.0, 1.0, 0.0)
    r = Vec3.reflect(a, n)
    assert r.length() == pytest.approx(a.length())
    assert Vec3.dot(r, n) == pytest.approx(-Vec3.dot(a, n))


def test_refract_index_one_passes_straight():
    a = Vec3.normalize(Vec3(0.3, -1.0, 0.2))
    r = Vec3.refract(a, Vec3(0.0, 1.0, 0.0), 1.0)
    assert list(r) == pytest.approx(list(a))


def test_refract_total_internal_reflection():
    a = Vec3.normalize(Vec3(1.0, 0.1, 0.0))
    assert Vec3.refract(a, Vec3(0.0, 1.0, 0.0), 1.5) is None


def test_refract_entering_bends_toward_normal():
    a = Vec3.normalize(Vec3(1.0, -1.0, 0.0))
    normal = Vec3(0.0, 1.0, 0.0)
    r = Vec3.refract(a, normal, 1.5)
    assert r.length() == pytest.approx(1.0)
    assert abs(r.x) < abs(a.x)


def test_min_max():
    a = Vec3(1.0, 5.0, -2.0)
    b = Vec3(3.0, 0.0, -1.0)
    assert Vec3.min_v(a, b) == Vec3(1.0, 0.0, -2.0)
    assert Vec3.max_v(a, b) == Vec3(3.0, 5.0, -1.0)


def test_clamp():
    assert Vec3.clamp(Vec3(-1.0, 0.5, 2.0), 0.0, 1.0) == Vec3(0.0, 0.5, 1.0)


def test_random_helpers():
    rng = Random(123)
    for _ in range(100):
        v = Vec3.random(rng)
        assert all(0.0 <= c < 1.0 for c in v)
        assert Vec3.random_point_in_sphere(rng).sqlength() <= 1.0
        h = Vec3.random_point_in_hemisphere(rng)
        assert h.sqlength() <= 1.0 and all(c >= 0.0 for c in h)
        d = Vec3.random_point_in_disc(rng)
        assert d.z == 0.0 and d.sqlength() <= 1.0
        assert Vec3.random_unit_vector(rng).length() == pytest.approx(1.0)