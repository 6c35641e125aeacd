"""An unbounded voxel world made of chunks."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional

from awgen.geometry.linalg import Vec3
from awgen.geometry.position import CHUNK_SIZE, ChunkPos
from awgen.map.chunk import ChunkData

logger = logging.getLogger(__name__)


class VoxelWorld:
    """A 3D grid of chunks addressed by chunk position."""

    def __init__(self) -> None:
        self._chunks: Dict[ChunkPos, ChunkData] = {}

    def get_chunk(self, pos: ChunkPos) -> Optional[ChunkData]:
        """The chunk at ``pos``, if it exists."""
        return self._chunks.get(pos)

    def spawn_chunk(self, pos: ChunkPos, data: ChunkData) -> bool:
        """Store ``data`` at ``pos``; return True if a new chunk was created.

        An existing chunk has its data replaced.
        """
        if pos in self._chunks:
            self._chunks[pos] = data
            logger.debug("Updated chunk at %s with new data", pos)
            return False
        self._chunks[pos] = data
        logger.info("Spawned new chunk at %s", pos)
        return True

    def despawn_chunk(self, pos: ChunkPos) -> bool:
        """Remove the chunk at ``pos``; return whether one was there."""
        if self._chunks.pop(pos, None) is None:
            return False
        logger.info("Despawned chunk at %s", pos)
        return True

    def clear_chunks(self) -> None:
        """Remove every chunk."""
        self._chunks.clear()
        logger.info("Despawned all chunks")

    def chunk_origin(self, pos: ChunkPos) -> Vec3:
        """The world-space position of the chunk's minimum corner."""
        return Vec3(
            float(pos.x * CHUNK_SIZE),
            float(pos.y * CHUNK_SIZE),
            float(pos.z * CHUNK_SIZE),
        )

    def __len__(self) -> int:
        return len(self._chunks)

    def __contains__(self, pos: object) -> bool:
        return pos in self._chunks

    def __iter__(self) -> Iterator[ChunkPos]:
        return iter(self._chunks)