import threading
import time

from craftus.chunk import Chunk
from craftus.workqueue import WorkerItem, WorkerItemType, WorkQueue


def test_add_item_stamps_uuid_and_counts_tasks():
    queue = WorkQueue()
    chunk = Chunk(1, 2)
    queued = queue.add_item(WorkerItem(WorkerItemType.LOAD, chunk))
    assert queued.uuid == chunk.uuid
    assert chunk.tasks_running == 1
    assert chunk.graphical_tasks_running == 0
    assert len(queue) == 1


def test_polygen_counts_as_graphical_task():
    queue = WorkQueue()
    chunk = Chunk(0, 0)
    queue.add_item(WorkerItem(WorkerItemType.POLY_GEN, chunk))
    queue.add_item(WorkerItem(WorkerItemType.SAVE, chunk))
    assert chunk.tasks_running == 2
    assert chunk.graphical_tasks_running == 1
    assert chunk.tasks_running >= chunk.graphical_tasks_running


def test_pop_is_first_in_first_out():
    queue = WorkQueue()
    a, b = Chunk(0, 0), Chunk(1, 0)
    queue.add_item(WorkerItem(WorkerItemType.BASE_GEN, a))
    queue.add_item(WorkerItem(WorkerItemType.DECORATE, b))
    first = queue.pop(timeout=0)
    second = queue.pop(timeout=0)
    assert first.chunk is a and first.type == WorkerItemType.BASE_GEN
    assert second.chunk is b and second.type == WorkerItemType.DECORATE
    assert len(queue) == 0


def test_pop_times_out_on_empty_queue():
    queue = WorkQueue()
    assert queue.pop(timeout=0.01) is None


def test_pop_wakes_when_item_added_from_other_thread():
    queue = WorkQueue()
    chunk = Chunk(3, 4)

    def producer():
        time.sleep(0.05)
        queue.add_item(WorkerItem(WorkerItemType.LOAD, chunk))

    thread = threading.Thread(target=producer)
    thread.start()
    item = queue.pop(timeout=5)
    thread.join()
    assert item is not None
    assert item.chunk is chunk
    assert item.uuid == chunk.uuid