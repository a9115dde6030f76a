"""Bitmap font loading: glyph widths and a 16 bit texture."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from PIL import Image

FONT_GRID_SIZE = 128
GLYPH_SIZE = 8
GLYPH_COUNT = 1 << 8


@dataclass(frozen=True)
class Font:
    """Advance width of every glyph and the RGBA5551 texture."""

    widths: tuple[int, ...]
    width: int
    height: int
    texture: tuple[int, ...]


def to_rgba5551(pixel: int) -> int:
    """Convert a packed RGBA pixel (red in the low byte) to RGBA5551."""
    r = (pixel & 0xFF) >> 3
    g = ((pixel >> 8) & 0xFF) >> 3
    b = ((pixel >> 16) & 0xFF) >> 3
    a = ((pixel >> 24) & 0xFF) >> 7
    return (r << 11) | (g << 6) | (b << 1) | a


def measure_glyph_widths(pixels: Sequence[int]) -> tuple[int, ...]:
    """Width of each 8x8 glyph of a 128 pixel wide font sheet.

    Columns from the third on are scanned until one is empty; the width
    is one past that column.
    """
    if len(pixels) < FONT_GRID_SIZE * FONT_GRID_SIZE:
        raise ValueError("a font sheet needs at least 128x128 pixels")

    def column_used(gx: int, gy: int, column: int) -> bool:
        return any(
            pixels[(gy + row) * FONT_GRID_SIZE + gx + column] for row in range(GLYPH_SIZE)
        )

    widths = []
    for gy in range(0, FONT_GRID_SIZE, GLYPH_SIZE):
        for gx in range(0, FONT_GRID_SIZE, GLYPH_SIZE):
            length = 2
            for column in range(2, GLYPH_SIZE):
                length += 1
                if not column_used(gx, gy, column):
                    break
            widths.append(length)
    return tuple(widths)


def load_font(path: str | Path) -> Font:
    """Load a font sheet image; it must be at least 128 pixels square."""
    try:
        with Image.open(path) as image:
            rgba = image.convert("RGBA")
    except OSError as exc:
        raise OSError(f"Failed to load font {path}") from exc

    width, height = rgba.size
    if width != FONT_GRID_SIZE or height < FONT_GRID_SIZE:
        raise ValueError(f"font {path} must be {FONT_GRID_SIZE} pixels wide and at least as tall")

    pixels = [r | (g << 8) | (b << 16) | (a << 24) for r, g, b, a in rgba.getdata()]
    return Font(
        widths=measure_glyph_widths(pixels),
        width=width,
        height=height,
        texture=tuple(to_rgba5551(p) for p in pixels),
    )