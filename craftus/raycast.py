"""Grid traversal to find the first solid block along a ray."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from craftus.block import Block
from craftus.chunk import CHUNK_SIZE
from craftus.coords import CHUNKCACHE_SIZE
from craftus.direction import Direction
from craftus.mathutil import fast_floor
from craftus.vecmath import Float3

MAX_STEPS = CHUNKCACHE_SIZE // 2 * CHUNK_SIZE


class BlockSource(Protocol):
    def get_block(self, x: int, y: int, z: int) -> int: ...


@dataclass(frozen=True)
class RaycastResult:
    """Last block visited, the face entered and the squared distance to it."""

    x: int = 0
    y: int = 0
    z: int = 0
    dist_sqr: float = 0.0
    direction: Direction = Direction.WEST
    hit: bool = False


def _delta_dist(own_sqr: float, others_sqr: float) -> float:
    if own_sqr == 0.0:
        return math.nan if others_sqr == 0.0 else math.inf
    return math.sqrt(1.0 + others_sqr / own_sqr)


def _start(pos: float, cell: int, ray: float, delta: float) -> tuple[int, float]:
    if ray < 0:
        return -1, (pos - cell) * delta
    return 1, (cell + 1.0 - pos) * delta


def cast(world: BlockSource, position: Float3, direction: Float3) -> RaycastResult:
    """Walk the block grid from ``position`` along ``direction``.

    Stops at the first non-air block or after a bounded number of steps.
    """
    map_x, map_y, map_z = (fast_floor(c) for c in position)

    x_sqr = direction.x * direction.x
    y_sqr = direction.y * direction.y
    z_sqr = direction.z * direction.z

    delta_x = _delta_dist(x_sqr, y_sqr + z_sqr)
    delta_y = _delta_dist(y_sqr, x_sqr + z_sqr)
    delta_z = _delta_dist(z_sqr, x_sqr + y_sqr)

    step_x, side_x = _start(position.x, map_x, direction.x, delta_x)
    step_y, side_y = _start(position.y, map_y, direction.y, delta_y)
    step_z, side_z = _start(position.z, map_z, direction.z, delta_z)

    hit = False
    side = 0
    steps = 0
    while not hit:
        if side_x < side_y and side_x < side_z:
            side_x += delta_x
            map_x += step_x
            side = 0
        elif side_y < side_z:
            side_y += delta_y
            map_y += step_y
            side = 1
        else:
            side_z += delta_z
            map_z += step_z
            side = 2
        if world.get_block(map_x, map_y, map_z) != Block.AIR:
            hit = True
        if steps > MAX_STEPS:
            break
        steps += 1

    if side == 0:
        face = Direction.WEST if direction.x > 0.0 else Direction.EAST
    elif side == 1:
        face = Direction.BOTTOM if direction.y > 0.0 else Direction.TOP
    else:
        face = Direction.NORTH if direction.z > 0.0 else Direction.SOUTH

    dist = Float3(map_x, map_y, map_z) - position
    return RaycastResult(map_x, map_y, map_z, dist.magnitude_sqr(), face, hit)