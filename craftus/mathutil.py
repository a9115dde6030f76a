"""Small numeric helpers shared by the world, physics and GUI code."""

from __future__ import annotations

import math

DEG_TO_RAD = math.pi * 2.0 / 360.0
RAD_TO_DEG = (1.0 / math.pi) * 180.0


def fast_floor(x: float) -> int:
    """Round towards negative infinity and return an int."""
    return math.floor(x)


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation between ``start`` and ``end``."""
    return start + (end - start) * t


def bilerp(q11: float, q21: float, q12: float, q22: float, x: float, y: float) -> float:
    """Bilinear interpolation over the unit square."""
    return lerp(lerp(q11, q21, x), lerp(q12, q22, x), y)


def trilerp(
    q111: float,
    q211: float,
    q121: float,
    q221: float,
    q112: float,
    q212: float,
    q122: float,
    q222: float,
    x: float,
    y: float,
    z: float,
) -> float:
    """Trilinear interpolation over the unit cube."""
    return lerp(
        bilerp(q111, q211, q112, q212, x, z),
        bilerp(q121, q221, q122, q222, x, z),
        y,
    )


def aabb_overlap(
    x0: float,
    y0: float,
    z0: float,
    w0: float,
    h0: float,
    d0: float,
    x1: float,
    y1: float,
    z1: float,
    w1: float,
    h1: float,
    d1: float,
) -> bool:
    """Whether two axis aligned boxes overlap; touching faces count."""
    return (
        x0 <= x1 + w1
        and x0 + w0 >= x1
        and y0 <= y1 + h1
        and y0 + h0 >= y1
        and z0 <= z1 + d1
        and z0 + d0 >= z1
    )


def clamp(value, lo, hi):
    """Limit ``value`` to the range ``[lo, hi]``."""
    return min(max(value, lo), hi)