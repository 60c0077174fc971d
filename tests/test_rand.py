import math

import pytest

from gfxutils.rand import Random


def _draws(rng, method, count=500):
    return [getattr(rng, method)() for _ in range(count)]


def test_same_seed_same_sequence():
    a = Random(42)
    b = Random(42)
    assert _draws(a, "rand01", 20) == _draws(b, "rand01", 20)


def test_different_seeds_differ():
    assert _draws(Random(1), "rand01", 20) != _draws(Random(2), "rand01", 20)


@pytest.mark.parametrize(
    "method, low, high",
    [
        ("rand01", 0.0, 1.0),
        ("rand005", 0.0, 0.5),
        ("rand051", 0.5, 1.0),
        ("rand11", -1.0, 1.0),
        ("rand0_pi", 0.0, 2.0 * math.pi),
    ],
)
def test_ranges(method, low, high):
    values = _draws(Random(7), method)
    assert all(low <= v < high for v in values)
    assert max(values) - min(values) > (high - low) * 0.5


def test_rand_int_bounds_and_type():
    rng = Random(3)
    values = [rng.rand(2, 9) for _ in range(300)]
    assert all(isinstance(v, int) for v in values)
    assert all(2 <= v < 9 for v in values)
    assert set(values) == set(range(2, 9))


def test_rand_float_bounds():
    rng = Random(5)
    values = [rng.rand(-3.0, 4.0) for _ in range(200)]
    assert all(-3.0 <= v < 4.0 for v in values)


def test_shuffle_is_permutation():
    rng = Random(11)
    items = list(range(50))
    rng.shuffle(items)
    assert sorted(items) == list(range(50))
    assert items != list(range(50))


def test_shuffle_deterministic_with_seed():
    a = list("abcdefgh")
    b = list("abcdefgh")
    Random(9).shuffle(a)
    Random(9).shuffle(b)
    assert a == b