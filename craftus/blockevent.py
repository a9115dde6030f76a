"""Random ticks that let grass spread and die."""

from __future__ import annotations

from typing import Sequence

from craftus.block import Block, block_opaque
from craftus.chunk import CHUNK_HEIGHT, CHUNK_SIZE, CLUSTER_PER_CHUNK, Chunk

RANDOMTICKS_PER_CLUSTER = 3
RANDOMTICKS_PER_CHUNK = CLUSTER_PER_CHUNK * RANDOMTICKS_PER_CLUSTER


def _covered(chunk: Chunk, x: int, y: int, z: int) -> bool:
    # Nothing lies above the top of the chunk, so it counts as open sky.
    if y + 1 >= CHUNK_HEIGHT:
        return False
    return block_opaque(chunk.get_block(x, y + 1, z), chunk.get_metadata(x, y + 1, z))


def random_tick(
    chunk: Chunk, xs: Sequence[int], ys: Sequence[int], zs: Sequence[int]
) -> None:
    """Apply one random tick per position.

    Each sequence holds ``RANDOMTICKS_PER_CHUNK`` values; consecutive groups of
    ``RANDOMTICKS_PER_CLUSTER`` belong to one cluster, with ``ys`` relative to it.
    """
    if not len(xs) == len(ys) == len(zs) == RANDOMTICKS_PER_CHUNK:
        raise ValueError(f"expected {RANDOMTICKS_PER_CHUNK} positions per axis")
    for k, (px, ry, pz) in enumerate(zip(xs, ys, zs)):
        py = ry + (k // RANDOMTICKS_PER_CLUSTER) * CHUNK_SIZE
        block = chunk.get_block(px, py, pz)
        if block == Block.DIRT:
            if not _covered(chunk, px, py, pz):
                chunk.set_block(px, py, pz, Block.GRASS)
        elif block == Block.GRASS:
            if _covered(chunk, px, py, pz):
                chunk.set_block(px, py, pz, Block.DIRT)