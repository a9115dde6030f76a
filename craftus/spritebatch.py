"""Batches textured GUI quads and text, sorted by depth for drawing."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Mapping, Sequence

from craftus.vertexfmt import shader_rgb

CHAR_HEIGHT = 8
CHAR_WIDTH = 8
TAB_SIZE = 4
GLYPH_COUNT = 256
INT16_MAX = 0x7FFF
NO_WRAP = 2**31 - 1
DEFAULT_SCALE = 2
SHADOW_COLOR = shader_rgb(10, 10, 10)
VERTICES_PER_SPRITE = 6

_NEWLINE = ord("\n")
_TAB = ord("\t")
_SPACE = ord(" ")


class GuiTexture(IntEnum):
    BLANK = 0
    FONT = 1
    ICONS = 2
    WIDGETS = 3
    MENU_BACKGROUND = 4


_serials = itertools.count()


@dataclass(eq=False)
class Texture:
    """A texture known by name and size; compared by identity."""

    name: str
    width: int
    height: int
    serial: int = field(default_factory=lambda: next(_serials), init=False, repr=False)


@dataclass(frozen=True)
class Sprite:
    """One quad: its four corners in screen pixels and its texel rectangle."""

    depth: int
    texture: Texture
    x0: int
    y0: int
    x1: int
    y1: int
    x2: int
    y2: int
    x3: int
    y3: int
    u0: int
    v0: int
    u1: int
    v1: int
    color: int


@dataclass(frozen=True)
class GuiVertex:
    xyz: tuple[int, int, int]
    uvc: tuple[int, int, int]


def _default_textures() -> dict[GuiTexture, Texture]:
    return {
        GuiTexture.BLANK: Texture("blank", 16, 16),
        GuiTexture.FONT: Texture("font", 128, 128),
        GuiTexture.ICONS: Texture("icons", 256, 256),
        GuiTexture.WIDGETS: Texture("widgets", 256, 256),
        GuiTexture.MENU_BACKGROUND: Texture("menu_background", 16, 16),
    }


def _encode(text: str) -> bytes:
    return text.encode("latin-1", "replace")


class SpriteBatch:
    """Collects sprites for one frame and turns them into vertex batches."""

    def __init__(
        self,
        glyph_widths: Sequence[int] | None = None,
        textures: Mapping[GuiTexture, Texture] | None = None,
    ) -> None:
        widths = tuple(glyph_widths) if glyph_widths is not None else (CHAR_WIDTH,) * GLYPH_COUNT
        if len(widths) != GLYPH_COUNT:
            raise ValueError(f"expected {GLYPH_COUNT} glyph widths")
        self.glyph_widths = widths
        self.textures = _default_textures()
        if textures:
            self.textures.update(textures)
        self.sprites: list[Sprite] = []
        self.current_texture: Texture | None = None
        self.scale = DEFAULT_SCALE
        self.screen_width = 0
        self.screen_height = 0

    @property
    def width(self) -> int:
        return self.screen_width // self.scale

    @property
    def height(self) -> int:
        return self.screen_height // self.scale

    def bind_texture(self, texture: Texture | None) -> None:
        self.current_texture = texture

    def bind_gui_texture(self, texture: GuiTexture) -> None:
        self.current_texture = self.textures[GuiTexture(texture)]

    def push_single_color_quad(self, x: int, y: int, z: int, w: int, h: int, color: int) -> None:
        self.bind_texture(self.textures[GuiTexture.BLANK])
        self.push_quad_color(x, y, z, w, h, 0, 0, 4, 4, color)

    def push_quad_color(
        self, x: int, y: int, z: int, w: int, h: int, rx: int, ry: int, rw: int, rh: int, color: int
    ) -> None:
        if self.current_texture is None:
            raise RuntimeError("no texture bound")
        s = self.scale
        self.sprites.append(
            Sprite(
                z,
                self.current_texture,
                x * s, y * s,
                (x + w) * s, y * s,
                x * s, (y + h) * s,
                (x + w) * s, (y + h) * s,
                rx, ry, rx + rw, ry + rh,
                color,
            )
        )

    def push_quad(self, x: int, y: int, z: int, w: int, h: int, rx: int, ry: int, rw: int, rh: int) -> None:
        self.push_quad_color(x, y, z, w, h, rx, ry, rw, rh, INT16_MAX)

    def push_text(
        self, x: int, y: int, z: int, color: int, shadow: bool, wrap: int, text: str
    ) -> tuple[int, int]:
        """Lay out text glyph by glyph; returns its width and height in pixels."""
        self.bind_texture(self.textures[GuiTexture.FONT])
        offset_x = offset_y = max_width = 0
        data = _encode(text)
        i = 0
        while i < len(data):
            c = data[i]
            implicit_break = offset_x + self.glyph_widths[c] >= wrap
            if c == _NEWLINE or implicit_break:
                if implicit_break and offset_x == 0:
                    raise ValueError(f"wrap width {wrap} is too narrow for a glyph")
                offset_y += CHAR_HEIGHT
                max_width = max(max_width, offset_x)
                offset_x = 0
                if not implicit_break:
                    i += 1
                continue
            if c == _TAB:
                offset_x = ((offset_x // CHAR_WIDTH) // TAB_SIZE + 1) * TAB_SIZE * CHAR_WIDTH
            else:
                if c != _SPACE:
                    tex_x, tex_y = c % 16 * 8, c // 16 * 8
                    self.push_quad_color(x + offset_x, y + offset_y, z, 8, 8, tex_x, tex_y, 8, 8, color)
                    if shadow:
                        self.push_quad_color(
                            x + offset_x + 1, y + offset_y + 1, z - 1, 8, 8, tex_x, tex_y, 8, 8, SHADOW_COLOR
                        )
                offset_x += self.glyph_widths[c]
            i += 1
        max_width = max(max_width, offset_x)
        return max_width, offset_y + CHAR_HEIGHT

    def calc_text_width(self, text: str) -> int:
        """Width of the widest line of ``text``, without wrapping."""
        return max(
            sum(self.glyph_widths[c] for c in _encode(line)) for line in text.split("\n")
        )

    def start_frame(self, width: int, height: int) -> None:
        self.screen_width = width
        self.screen_height = height

    def render(self) -> list[tuple[Texture, list[GuiVertex]]]:
        """Turn the frame's sprites into triangle lists, one per texture run.

        Runs come in ascending depth order. The batch is emptied and its
        texture and scale are reset.
        """
        ordered = sorted(self.sprites, key=lambda s: (s.depth, s.texture.serial))
        draws: list[tuple[Texture, list[GuiVertex]]] = []
        for texture, run in itertools.groupby(ordered, key=lambda s: s.texture):
            div_w = 1.0 / texture.width * INT16_MAX
            div_h = 1.0 / texture.height * INT16_MAX
            vertices: list[GuiVertex] = []
            for s in run:
                u0, v0 = int(s.u0 * div_w), int(s.v0 * div_h)
                u1, v1 = int(s.u1 * div_w), int(s.v1 * div_h)
                c = s.color
                vertices.extend(
                    (
                        GuiVertex((s.x3, s.y3, 0), (u1, v1, c)),
                        GuiVertex((s.x1, s.y1, 0), (u1, v0, c)),
                        GuiVertex((s.x0, s.y0, 0), (u0, v0, c)),
                        GuiVertex((s.x0, s.y0, 0), (u0, v0, c)),
                        GuiVertex((s.x2, s.y2, 0), (u0, v1, c)),
                        GuiVertex((s.x3, s.y3, 0), (u1, v1, c)),
                    )
                )
            draws.append((texture, vertices))
        self.sprites.clear()
        self.current_texture = None
        self.scale = DEFAULT_SCALE
        return draws