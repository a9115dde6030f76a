"""Xorshift pseudo random generators."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


@dataclass
class Xorshift32:
    """32 bit xorshift generator."""

    state: int = 314159265

    def __post_init__(self) -> None:
        self.state &= _MASK32

    def next(self) -> int:
        s = self.state
        s ^= (s << 13) & _MASK32
        s ^= s >> 17
        s ^= (s << 5) & _MASK32
        self.state = s
        return s


@dataclass
class Xorshift64:
    """64 bit xorshift generator."""

    state: int = 88172645463325252

    def __post_init__(self) -> None:
        self.state &= _MASK64

    def next(self) -> int:
        s = self.state
        s ^= (s << 13) & _MASK64
        s ^= s >> 7
        s ^= (s << 17) & _MASK64
        self.state = s
        return s