"""One frame of controller and touch screen input."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag


class KeyBits(IntFlag):
    """Bit positions of the console's buttons in the key masks."""

    A = 1 << 0
    B = 1 << 1
    SELECT = 1 << 2
    START = 1 << 3
    DRIGHT = 1 << 4
    DLEFT = 1 << 5
    DUP = 1 << 6
    DDOWN = 1 << 7
    R = 1 << 8
    L = 1 << 9
    X = 1 << 10
    Y = 1 << 11
    ZL = 1 << 14
    ZR = 1 << 15
    TOUCH = 1 << 20
    CSTICK_RIGHT = 1 << 24
    CSTICK_LEFT = 1 << 25
    CSTICK_UP = 1 << 26
    CSTICK_DOWN = 1 << 27
    CPAD_RIGHT = 1 << 28
    CPAD_LEFT = 1 << 29
    CPAD_UP = 1 << 30
    CPAD_DOWN = 1 << 31


@dataclass(frozen=True)
class InputData:
    keysheld: int = 0
    keysdown: int = 0
    keysup: int = 0
    circle_pad_x: int = 0
    circle_pad_y: int = 0
    touch_x: int = 0
    touch_y: int = 0
    c_stick_x: int = 0
    c_stick_y: int = 0

    def is_touching(self) -> bool:
        """A touch at (0, 0) is read as no touch at all."""
        return not (self.touch_x == 0 and self.touch_y == 0)