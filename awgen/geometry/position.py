"""Voxel block and chunk positions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from awgen.geometry.direction import FaceDirection
from awgen.geometry.linalg import Vec3

CHUNK_BITS = 4
"""The number of bits used to represent a block coordinate within a chunk."""

CHUNK_SIZE = 1 << CHUNK_BITS
"""The size of a chunk in blocks along one axis."""

TOTAL_BLOCKS = CHUNK_SIZE * CHUNK_SIZE * CHUNK_SIZE
"""The number of blocks in one chunk."""

_MASK = CHUNK_SIZE - 1


@dataclass(frozen=True, order=True)
class ChunkPos:
    """A chunk position in the world."""

    x: int
    y: int
    z: int

    @classmethod
    def from_block(cls, pos: BlockPos) -> ChunkPos:
        """The chunk that contains the given block."""
        return cls(pos.x >> CHUNK_BITS, pos.y >> CHUNK_BITS, pos.z >> CHUNK_BITS)

    def __str__(self) -> str:
        return f"Chunk({self.x}, {self.y}, {self.z})"


@dataclass(frozen=True, order=True)
class BlockPos:
    """A block position in the world."""

    x: int
    y: int
    z: int

    @classmethod
    def from_vec3(cls, vec: Vec3) -> BlockPos:
        """The block containing a world-space point."""
        return cls(math.floor(vec.x), math.floor(vec.y), math.floor(vec.z))

    @classmethod
    def from_chunk(cls, chunk: ChunkPos) -> BlockPos:
        """The minimum corner block of a chunk."""
        return cls(chunk.x << CHUNK_BITS, chunk.y << CHUNK_BITS, chunk.z << CHUNK_BITS)

    def index(self) -> int:
        """The index of this block within its local chunk, wrapping coordinates."""
        return (
            (self.x & _MASK)
            + (self.y & _MASK) * CHUNK_SIZE
            + (self.z & _MASK) * CHUNK_SIZE * CHUNK_SIZE
        )

    def index_no_wrap(self) -> Optional[int]:
        """The chunk index, or None when this position lies outside [0, CHUNK_SIZE)."""
        if not self.is_in_bounds(_CHUNK_MIN, _CHUNK_MAX):
            return None
        return self.index()

    def is_in_bounds(self, min_pos: BlockPos, max_pos: BlockPos) -> bool:
        """Whether this position lies within the inclusive box [min_pos, max_pos]."""
        return (
            min_pos.x <= self.x <= max_pos.x
            and min_pos.y <= self.y <= max_pos.y
            and min_pos.z <= self.z <= max_pos.z
        )

    def shift(self, direction: FaceDirection, amount: int = 1) -> BlockPos:
        """This position moved ``amount`` blocks in ``direction``."""
        if amount < 0:
            raise ValueError(f"shift amount must not be negative: {amount}")
        dx, dy, dz = direction.offset()
        return BlockPos(self.x + dx * amount, self.y + dy * amount, self.z + dz * amount)

    def as_vec3(self) -> Vec3:
        """This position as a float vector."""
        return Vec3(float(self.x), float(self.y), float(self.z))

    def chunk(self) -> ChunkPos:
        """The chunk containing this block."""
        return ChunkPos.from_block(self)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


_CHUNK_MIN = BlockPos(0, 0, 0)
_CHUNK_MAX = BlockPos(CHUNK_SIZE - 1, CHUNK_SIZE - 1, CHUNK_SIZE - 1)