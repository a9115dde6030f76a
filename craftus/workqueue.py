"""Thread safe queue of chunk jobs for the background worker."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, replace
from enum import IntEnum

from craftus.chunk import Chunk


class WorkerItemType(IntEnum):
    LOAD = 0
    SAVE = 1
    BASE_GEN = 2
    DECORATE = 3
    POLY_GEN = 4


WORKER_ITEM_TYPES_COUNT = len(WorkerItemType)


@dataclass(frozen=True)
class WorkerItem:
    """A job for one chunk; ``uuid`` records which chunk it was queued for."""

    type: WorkerItemType
    chunk: Chunk
    uuid: int = 0


class WorkQueue:
    """First in, first out queue that wakes waiting consumers."""

    def __init__(self) -> None:
        self._items: deque[WorkerItem] = deque()
        self._cond = threading.Condition()

    def add_item(self, item: WorkerItem) -> WorkerItem:
        """Queue a job, stamping it with its chunk's uuid.

        The chunk's running task counters are raised; the queued item is returned.
        """
        item = replace(item, uuid=item.chunk.uuid)
        item.chunk.tasks_running += 1
        if item.type == WorkerItemType.POLY_GEN:
            item.chunk.graphical_tasks_running += 1
        with self._cond:
            self._items.append(item)
            self._cond.notify_all()
        return item

    def pop(self, timeout: float | None = None) -> WorkerItem | None:
        """Take the oldest job, waiting up to ``timeout`` seconds; ``None`` if none came."""
        with self._cond:
            if not self._cond.wait_for(lambda: bool(self._items), timeout):
                return None
            return self._items.popleft()

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)