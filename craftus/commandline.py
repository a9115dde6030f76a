"""Chat style commands typed by the player."""

from __future__ import annotations

import re
from typing import Callable

from craftus.player import Player
from craftus.vecmath import Float3

_FLOAT = r"[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
_TELEPORT = re.compile(rf"tp\s*({_FLOAT})\s*({_FLOAT})\s*({_FLOAT})", re.IGNORECASE)


class CommandLine:
    """Runs ``/tp x y z`` and the ``/d`` debug toggle."""

    def __init__(self, log: Callable[[str], None] | None = None) -> None:
        self.show_debug_info = False
        self._log = log if log is not None else (lambda message: None)

    def activate(self, player: Player, prompt: Callable[[str], str | None]) -> None:
        """Ask ``prompt`` for a command and run it unless it was cancelled."""
        text = prompt("Enter command")
        if text is not None:
            self.execute(player, text)

    def execute(self, player: Player, text: str) -> None:
        if not text.startswith("/"):
            return
        if len(text) >= 9:
            match = _TELEPORT.match(text, 1)
            if match:
                x, y, z = (float(g) for g in match.groups())
                player.position = Float3(x, y, z)
                self._log(f"teleported to {x:f}, {y:f} {z:f}")
                return
        if text == "/d":
            self.show_debug_info = not self.show_debug_info