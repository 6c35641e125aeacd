"""Iteration over every block position inside a chunk."""

from __future__ import annotations

from typing import Iterator

from awgen.geometry.position import CHUNK_SIZE, BlockPos


def chunk_positions() -> Iterator[BlockPos]:
    """Yield every local block position in a chunk, z fastest, then y, then x."""
    for x in range(CHUNK_SIZE):
        for y in range(CHUNK_SIZE):
            for z in range(CHUNK_SIZE):
                yield BlockPos(x, y, z)