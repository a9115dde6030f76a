"""On-screen status lines and a scrolling log for debugging."""

from __future__ import annotations

from collections import deque

from craftus.spritebatch import INT16_MAX, SpriteBatch

SCREEN_WIDTH = 320
SCREEN_HEIGHT = 240
STATUS_LINES = SCREEN_HEIGHT // 8 // 2
LOG_LINES = 20
LINE_LENGTH = 128


def _format(fmt: str, args: tuple) -> str:
    return (fmt % args)[: LINE_LENGTH - 1]


class DebugUI:
    """Status lines are refilled each frame; log lines scroll, newest first."""

    def __init__(self) -> None:
        self._status = [""] * STATUS_LINES
        self._current = 0
        self._log: deque[str] = deque([""] * LOG_LINES, maxlen=LOG_LINES)

    @property
    def status_lines(self) -> tuple[str, ...]:
        return tuple(self._status)

    @property
    def log_lines(self) -> tuple[str, ...]:
        return tuple(self._log)

    def text(self, fmt: str, *args) -> None:
        """Add a status line for this frame; extra lines are dropped."""
        if self._current >= STATUS_LINES:
            return
        self._status[self._current] = _format(fmt, args)
        self._current += 1

    def log(self, fmt: str, *args) -> None:
        self._log.appendleft(_format(fmt, args))

    def draw(self, batch: SpriteBatch) -> None:
        """Push the log and status text and clear the status lines."""
        batch.scale = 1
        y = (SCREEN_HEIGHT // 3) * 2
        for line in self._log:
            _, step = batch.push_text(0, y, 100, INT16_MAX, False, SCREEN_WIDTH, line)
            y += step
            if y >= SCREEN_HEIGHT:
                break
        y = 0
        for i, line in enumerate(self._status):
            _, step = batch.push_text(0, y, 100, INT16_MAX, False, SCREEN_WIDTH, line)
            y += step
            self._status[i] = ""
        self._current = 0