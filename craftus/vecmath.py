"""Three component float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Iterator


@dataclass(frozen=True)
class Float3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, axis: int) -> float:
        return (self.x, self.y, self.z)[axis]

    def __add__(self, other: Float3) -> Float3:
        return Float3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Float3) -> Float3:
        return Float3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Float3:
        return Float3(-self.x, -self.y, -self.z)

    def scale(self, factor: float) -> Float3:
        return Float3(self.x * factor, self.y * factor, self.z * factor)

    def dot(self, other: Float3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Float3) -> Float3:
        return Float3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def magnitude_sqr(self) -> float:
        return self.dot(self)

    def normalized(self) -> Float3:
        """Unit vector in the same direction; a zero vector has none."""
        m = self.magnitude()
        if m == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return Float3(self.x / m, self.y / m, self.z / m)

    def distance(self, other: Float3) -> float:
        return (self - other).magnitude()

    def min(self, other: Float3) -> Float3:
        return Float3(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def max(self, other: Float3) -> Float3:
        return Float3(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))

    def clamp(self, lo: Float3, hi: Float3) -> Float3:
        return self.max(lo).min(hi)

    def replace_axis(self, axis: int, value: float) -> Float3:
        """Copy of the vector with component ``axis`` (0, 1 or 2) set to ``value``."""
        name = ("x", "y", "z")[axis]
        return replace(self, **{name: value})