import pytest

from craftus.block import Block
from craftus.direction import Direction
from craftus.raycast import MAX_STEPS, RaycastResult, cast
from craftus.vecmath import Float3


class FakeWorld:
    def __init__(self, solid=()):
        self.solid = set(solid)

    def get_block(self, x, y, z):
        return Block.STONE if (x, y, z) in self.solid else Block.AIR


def test_straight_down_hits_top_face():
    world = FakeWorld([(0, 0, 0)])
    origin = Float3(0.5, 5.5, 0.5)
    result = cast(world, origin, Float3(0.0, -1.0, 0.0))
    assert result.hit is True
    assert (result.x, result.y, result.z) == (0, 0, 0)
    assert result.direction == Direction.TOP
    assert result.dist_sqr == pytest.approx((Float3(0, 0, 0) - origin).magnitude_sqr())


@pytest.mark.parametrize(
    "ray, block, face",
    [
        (Float3(1.0, 0.0, 0.0), (4, 0, 0), Direction.WEST),
        (Float3(-1.0, 0.0, 0.0), (-4, 0, 0), Direction.EAST),
        (Float3(0.0, 1.0, 0.0), (0, 4, 0), Direction.BOTTOM),
        (Float3(0.0, 0.0, 1.0), (0, 0, 4), Direction.NORTH),
        (Float3(0.0, 0.0, -1.0), (0, 0, -4), Direction.SOUTH),
    ],
)
def test_face_depends_on_ray_direction(ray, block, face):
    world = FakeWorld([block])
    result = cast(world, Float3(0.5, 0.5, 0.5), ray)
    assert result.hit is True
    assert (result.x, result.y, result.z) == block
    assert result.direction == face


def test_nearest_block_wins():
    world = FakeWorld([(3, 0, 0), (6, 0, 0)])
    result = cast(world, Float3(0.5, 0.5, 0.5), Float3(1.0, 0.0, 0.0))
    assert result.x == 3


def test_diagonal_ray_hits_block():
    world = FakeWorld([(2, 0, 2)])
    result = cast(world, Float3(0.5, 0.5, 0.5), Float3(1.0, 0.0, 1.0).normalized())
    assert result.hit is True
    assert (result.x, result.z) == (2, 2)


def test_miss_in_empty_world_is_bounded():
    world = FakeWorld()
    result = cast(world, Float3(0.5, 5.5, 0.5), Float3(0.0, -1.0, 0.0))
    assert result.hit is False
    assert (result.x, result.z) == (0, 0)
    assert 5 - result.y > MAX_STEPS
    assert 5 - result.y <= MAX_STEPS + 2


def test_default_result_is_a_miss():
    assert RaycastResult().hit is False