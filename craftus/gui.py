"""Immediate mode GUI: rows of labels and buttons driven by touch input."""

from __future__ import annotations

from dataclasses import dataclass

from craftus.inputdata import InputData, KeyBits
from craftus.spritebatch import CHAR_HEIGHT, INT16_MAX, NO_WRAP, GuiTexture, SpriteBatch
from craftus.vertexfmt import shader_rgb

BUTTON_HEIGHT = 20
BUTTON_TEXT_PADDING = (BUTTON_HEIGHT - CHAR_HEIGHT) // 2
SLICE_SIZE = 8
BUTTON_TEXTURE_Y = 46
BUTTON_TEXT_COLOR = shader_rgb(31, 31, 31)


def _half(value: int) -> int:
    return int(value / 2)


@dataclass
class _Row:
    width: int = 0
    highest_element: int = 0
    unpadded_width: int = 0


class Gui:
    """Lays out widgets in rows and reports clicks from touch input."""

    def __init__(self, batch: SpriteBatch, padding_x: int = 2, padding_y: int = 3) -> None:
        self.batch = batch
        self.input = InputData()
        self.old_input = InputData()
        self.padding_x = padding_x
        self.padding_y = padding_y
        self._row = _Row()
        self.relative_x = 0
        self.relative_y = 0
        self.window_x = 0
        self.window_y = 0

    def _absolute_size(self, size: float) -> int:
        return int(self._row.unpadded_width * size)

    def input_data(self, data: InputData) -> None:
        self.old_input = self.input
        self.input = data

    def frame(self) -> None:
        self.relative_x = self.relative_y = 0
        self.window_x = self.window_y = 0

    def offset(self, x: int, y: int) -> None:
        self.window_x = x
        self.window_y = y

    def relative_width(self, x: float) -> int:
        return int(self.batch.width * x)

    def relative_height(self, y: float) -> int:
        return int(self.batch.height * y)

    def begin_row_center(self, width: int, count: int) -> None:
        self.window_x = _half(self.batch.width) - _half(width)
        self.begin_row(width, count)

    def begin_row(self, width: int, count: int) -> None:
        pad = self.padding_x
        self._row = _Row(width, 0, width - pad * 2 - pad * count)
        self.relative_x = pad
        self.relative_y = 0

    def end_row(self) -> None:
        self.window_y += self._row.highest_element + self.padding_y

    def label(self, size: float, shadow: bool, color: int, center: bool, text: str) -> None:
        """Draw text; ``size`` is a share of the row, or 0 to fit the text."""
        if size <= 0.0:
            wrap = self._row.width - self.relative_x - self.padding_x
        else:
            wrap = self._absolute_size(size)
        x_offset = 0
        if center:
            text_width = self.batch.calc_text_width(text)
            if text_width <= wrap:
                x_offset = _half(wrap) - _half(text_width)
        x_size, y_size = self.batch.push_text(
            self.window_x + self.relative_x + x_offset,
            self.window_y + self.relative_y,
            0,
            INT16_MAX,
            False,
            wrap,
            text,
        )
        self.relative_x += (x_size if size <= 0.0 else wrap) + self.padding_x
        self._row.highest_element = max(self._row.highest_element, y_size)

    def button(self, size: float, label: str) -> bool:
        """Draw a button; true when a touch inside it was just released."""
        batch = self.batch
        text_width = batch.calc_text_width(label)
        x = self.window_x + self.relative_x
        y = self.window_y + self.relative_y - BUTTON_TEXT_PADDING
        w = text_width + SLICE_SIZE if size <= 0.0 else self._absolute_size(size)

        pressed = self.is_cursor_inside(x, y, w, BUTTON_HEIGHT)
        middle = w - SLICE_SIZE * 2
        ty = BUTTON_TEXTURE_Y + (BUTTON_HEIGHT * 2 if pressed else 0)

        batch.bind_gui_texture(GuiTexture.WIDGETS)
        batch.push_quad(x, y, -3, SLICE_SIZE, 20, 0, ty, SLICE_SIZE, 20)
        batch.push_quad(x + SLICE_SIZE, y, -3, middle, 20, SLICE_SIZE, ty, middle, 20)
        batch.push_quad(x + SLICE_SIZE + middle, y, -3, SLICE_SIZE, 20, 192, ty, SLICE_SIZE, 20)

        batch.push_text(
            x + (_half(w) - _half(text_width)),
            y + (BUTTON_HEIGHT - CHAR_HEIGHT) // 2,
            -1,
            BUTTON_TEXT_COLOR,
            True,
            NO_WRAP,
            label,
        )

        self.relative_x += w + self.padding_x
        self._row.highest_element = max(self._row.highest_element, BUTTON_HEIGHT)

        return bool(self.input.keysup & KeyBits.TOUCH) and self.was_cursor_inside(x, y, w, BUTTON_HEIGHT)

    def space(self, space: float) -> None:
        self.relative_x += self._absolute_size(space) + self.padding_x

    def vertical_space(self, y: int) -> None:
        self.window_y += y

    def _scaled(self, data: InputData) -> tuple[int, int]:
        scale = self.batch.scale
        return data.touch_x // scale, data.touch_y // scale

    @staticmethod
    def _inside(px: int, py: int, x: int, y: int, w: int, h: int) -> bool:
        return px != 0 and py != 0 and x <= px < x + w and y <= py < y + h

    def is_cursor_inside(self, x: int, y: int, w: int, h: int) -> bool:
        return self._inside(*self._scaled(self.input), x, y, w, h)

    def was_cursor_inside(self, x: int, y: int, w: int, h: int) -> bool:
        return self._inside(*self._scaled(self.old_input), x, y, w, h)

    def entered_cursor_inside(self, x: int, y: int, w: int, h: int) -> bool:
        """True on the first frame of a touch that lands inside the rectangle."""
        ox, oy = self._scaled(self.old_input)
        return ox == 0 and oy == 0 and self.is_cursor_inside(x, y, w, h)

    def cursor_movement(self) -> tuple[int, int]:
        """Touch movement since the previous frame, zero unless touching in both."""
        if not self.input.is_touching() or not self.old_input.is_touching():
            return 0, 0
        nx, ny = self._scaled(self.input)
        ox, oy = self._scaled(self.old_input)
        return nx - ox, ny - oy