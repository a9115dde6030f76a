"""Packed 15 bit colours as used by the vertex formats."""

from __future__ import annotations


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def shader_rgb(r: int, g: int, b: int) -> int:
    """Pack 5 bit channels into one colour value."""
    return (b & 0x1F) | ((g & 0x1F) << 5) | ((r & 0x1F) << 10)


def shader_r(color: int) -> int:
    return (color >> 10) & 0x1F


def shader_g(color: int) -> int:
    return (color >> 5) & 0x1F


def shader_b(color: int) -> int:
    return color & 0x1F


def shader_rgb_mix(a: int, b: int) -> int:
    """Average two packed colours channel by channel."""
    return shader_rgb(
        (shader_r(a) + shader_r(b)) // 2,
        (shader_g(a) + shader_g(b)) // 2,
        (shader_b(a) + shader_b(b)) // 2,
    )


def shader_rgb_darken(color: int, factor: int) -> int:
    """Scale each channel by ``factor / 16``."""
    return shader_rgb(
        _trunc_div(shader_r(color) * factor, 16),
        _trunc_div(shader_g(color) * factor, 16),
        _trunc_div(shader_b(color) * factor, 16),
    )