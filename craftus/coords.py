"""Conversions between world, chunk and superchunk coordinates."""

from __future__ import annotations

from craftus.chunk import CHUNK_SIZE

CHUNKCACHE_SIZE = 9
UNDEADCHUNKS_COUNT = 2 * CHUNKCACHE_SIZE + CHUNKCACHE_SIZE * CHUNKCACHE_SIZE
CHUNKPOOL_SIZE = CHUNKCACHE_SIZE * CHUNKCACHE_SIZE + UNDEADCHUNKS_COUNT
WORLD_NAME_SIZE = 12

SUPERCHUNK_SIZE = 8
SUPERCHUNK_BLOCKSIZE = SUPERCHUNK_SIZE * CHUNK_SIZE


def world_to_chunk_coord(x: int) -> int:
    """Chunk holding world block ``x``; rounds towards negative infinity."""
    return x // CHUNK_SIZE


def world_to_local_coord(x: int) -> int:
    """Position of world block ``x`` inside its chunk."""
    return x - world_to_chunk_coord(x) * CHUNK_SIZE


def chunk_to_superchunk_coord(x: int) -> int:
    return x // SUPERCHUNK_SIZE


def chunk_to_local_superchunk_coord(x: int) -> int:
    return x - chunk_to_superchunk_coord(x) * SUPERCHUNK_SIZE