"""Axis aligned box intersection."""

from __future__ import annotations

from dataclasses import dataclass

from craftus.direction import Direction
from craftus.vecmath import Float3


@dataclass(frozen=True)
class Box:
    min: Float3
    max: Float3

    @classmethod
    def create(cls, x: float, y: float, z: float, w: float, h: float, d: float) -> Box:
        return cls(Float3(x, y, z), Float3(x + w, y + h, z + d))

    def contains(self, x: float, y: float, z: float) -> bool:
        """Point test; the minimum corner is inside, the maximum is not."""
        return (
            self.min.x <= x
            and self.min.y <= y
            and self.min.z <= z
            and self.max.x > x
            and self.max.y > y
            and self.max.z > z
        )


@dataclass(frozen=True)
class Intersection:
    """The face of ``a`` with the least penetration, its normal and depth."""

    normal: Float3
    depth: float
    face: Direction


def box_intersect(a: Box, b: Box, ignore_faces: int = 0) -> Intersection | None:
    """Intersect two boxes; ``None`` when they are apart.

    Bit ``i`` of ``ignore_faces`` keeps face ``i`` from being chosen.
    """
    distances = (
        b.max.x - a.min.x,
        a.max.x - b.min.x,
        b.max.y - a.min.y,
        a.max.y - b.min.y,
        b.max.z - a.min.z,
        a.max.z - b.min.z,
    )
    face = Direction.WEST
    normal = Float3(0.0, 0.0, 0.0)
    depth = 0.0
    for i, distance in enumerate(distances):
        if distance < 0.0:
            return None
        if ignore_faces & (1 << i):
            continue
        if i == 0 or distance < depth:
            face = Direction(i)
            normal = Float3(*face.offset())
            depth = distance
    return Intersection(normal, depth, face)