import math

import pytest

from craftus.mathutil import (
    DEG_TO_RAD,
    RAD_TO_DEG,
    aabb_overlap,
    bilerp,
    clamp,
    fast_floor,
    lerp,
    trilerp,
)


@pytest.mark.parametrize("value", [1.5, -1.5, -2.0, 0.0, 3.999, -0.25, 7.0])
def test_fast_floor_matches_floor(value):
    result = fast_floor(value)
    assert result == math.floor(value)
    assert isinstance(result, int)


def test_lerp_endpoints_and_midpoint():
    assert lerp(2.0, 10.0, 0.0) == 2.0
    assert lerp(2.0, 10.0, 1.0) == 10.0
    assert lerp(2.0, 10.0, 0.5) == pytest.approx((2.0 + 10.0) / 2)


def test_bilerp_corners():
    q = (1.0, 2.0, 3.0, 4.0)
    assert bilerp(*q, 0.0, 0.0) == q[0]
    assert bilerp(*q, 1.0, 0.0) == q[1]
    assert bilerp(*q, 0.0, 1.0) == q[2]
    assert bilerp(*q, 1.0, 1.0) == q[3]


def test_trilerp_corners():
    q111, q211, q121, q221, q112, q212, q122, q222 = 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0
    args = (q111, q211, q121, q221, q112, q212, q122, q222)
    assert trilerp(*args, 0.0, 0.0, 0.0) == q111
    assert trilerp(*args, 1.0, 0.0, 0.0) == q211
    assert trilerp(*args, 0.0, 1.0, 0.0) == q121
    assert trilerp(*args, 0.0, 0.0, 1.0) == q112
    assert trilerp(*args, 1.0, 1.0, 1.0) == q222


def test_trilerp_constant_field():
    args = (5.0,) * 8
    assert trilerp(*args, 0.3, 0.7, 0.1) == pytest.approx(5.0)


def test_aabb_overlap_cases():
    assert aabb_overlap(0, 0, 0, 1, 1, 1, 0.5, 0.5, 0.5, 1, 1, 1)
    # touching faces still count
    assert aabb_overlap(0, 0, 0, 1, 1, 1, 1, 0, 0, 1, 1, 1)
    assert not aabb_overlap(0, 0, 0, 1, 1, 1, 2, 0, 0, 1, 1, 1)
    assert not aabb_overlap(0, 0, 0, 1, 1, 1, 0, 0, 3, 1, 1, 1)


def test_aabb_overlap_symmetric():
    a = (0, 0, 0, 2, 2, 2)
    b = (1.5, -1, 0.5, 1, 1, 1)
    assert aabb_overlap(*a, *b) == aabb_overlap(*b, *a)


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-5, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_angle_conversion_with_lerp_and_clamp():
    half_turn = lerp(0.0, 180.0 * DEG_TO_RAD, 0.5)
    assert half_turn == pytest.approx(math.pi / 2)
    limit = 89.9 * DEG_TO_RAD
    assert clamp(math.pi, -limit, limit) * RAD_TO_DEG == pytest.approx(89.9)