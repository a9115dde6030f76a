"""Chunks of blocks, split vertically into cubic clusters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from craftus.xorshift import Xorshift32

CHUNK_SIZE = 16
CHUNK_HEIGHT = 128
CLUSTER_PER_CHUNK = CHUNK_HEIGHT // CHUNK_SIZE
CLUSTER_VOLUME = CHUNK_SIZE * CHUNK_SIZE * CHUNK_SIZE

_uuid_generator = Xorshift32()


def _next_uuid() -> int:
    return _uuid_generator.next()


def _cluster_index(x: int, y: int, z: int) -> int:
    return (x * CHUNK_SIZE + y) * CHUNK_SIZE + z


@dataclass(eq=False)
class Cluster:
    """A 16x16x16 section of a chunk.

    ``metadata_light`` holds metadata in the low nibble and light in the high one.
    """

    y: int
    blocks: bytearray = field(default_factory=lambda: bytearray(CLUSTER_VOLUME))
    metadata_light: bytearray = field(default_factory=lambda: bytearray(CLUSTER_VOLUME))
    revision: int = 0
    see_through: int = 0xFFFF
    empty: bool = True
    empty_revision: int = 0
    vbo_revision: int = 0
    force_vbo_update: bool = False


class ChunkGenProgress(IntEnum):
    EMPTY = 0
    TERRAIN = 1
    FINISHED = 2


@dataclass(eq=False)
class Chunk:
    x: int
    z: int
    uuid: int = field(default_factory=_next_uuid)
    tasks_running: int = 0
    graphical_tasks_running: int = 0
    gen_progress: ChunkGenProgress = ChunkGenProgress.EMPTY
    clusters: list[Cluster] = field(
        default_factory=lambda: [Cluster(i) for i in range(CLUSTER_PER_CHUNK)]
    )
    heightmap: bytearray = field(default_factory=lambda: bytearray(CHUNK_SIZE * CHUNK_SIZE))
    heightmap_revision: int = 0
    revision: int = 0
    display_revision: int = 0
    force_vbo_update: bool = False
    references: int = 0

    def _locate(self, x: int, y: int, z: int) -> tuple[Cluster, int]:
        if not (0 <= x < CHUNK_SIZE and 0 <= z < CHUNK_SIZE and 0 <= y < CHUNK_HEIGHT):
            raise IndexError(f"block ({x}, {y}, {z}) lies outside the chunk")
        cluster = self.clusters[y // CHUNK_SIZE]
        return cluster, _cluster_index(x, y % CHUNK_SIZE, z)

    def _touch(self, cluster: Cluster) -> None:
        cluster.revision += 1
        self.revision += 1

    def get_block(self, x: int, y: int, z: int) -> int:
        cluster, i = self._locate(x, y, z)
        return cluster.blocks[i]

    def set_block(self, x: int, y: int, z: int, block: int) -> None:
        """Set a block and reset its metadata."""
        cluster, i = self._locate(x, y, z)
        cluster.blocks[i] = block
        self.set_metadata(x, y, z, 0)

    def set_block_and_meta(self, x: int, y: int, z: int, block: int, metadata: int) -> None:
        cluster, i = self._locate(x, y, z)
        cluster.blocks[i] = block
        cluster.metadata_light[i] = (cluster.metadata_light[i] & 0xF0) | (metadata & 0xF)
        self._touch(cluster)

    def get_metadata(self, x: int, y: int, z: int) -> int:
        cluster, i = self._locate(x, y, z)
        return cluster.metadata_light[i] & 0xF

    def set_metadata(self, x: int, y: int, z: int, metadata: int) -> None:
        cluster, i = self._locate(x, y, z)
        cluster.metadata_light[i] = (cluster.metadata_light[i] & 0xF0) | (metadata & 0xF)
        self._touch(cluster)

    def request_graphics_update(self, cluster: int) -> None:
        self.clusters[cluster].force_vbo_update = True
        self.force_vbo_update = True