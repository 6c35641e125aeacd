"""Per-block face occlusion data for a chunk."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Flag
from typing import Dict, FrozenSet, Hashable, List, Mapping

from awgen.blocks.shape import BlockShape
from awgen.geometry.direction import FaceDirection
from awgen.geometry.position import TOTAL_BLOCKS, BlockPos
from awgen.map.chunk import ChunkData
from awgen.utilities.chunk_iter import chunk_positions


class _DirectionFlag(Flag):
    """A set of face directions stored as bit flags."""

    @classmethod
    def from_directions(cls, directions):
        """The flags matching every direction in ``directions``."""
        result = cls(0)
        for direction in directions:
            result |= cls[direction.name]
        return result

    def directions(self) -> FrozenSet[FaceDirection]:
        """The face directions set in this flag value."""
        return frozenset(
            direction for direction in FaceDirection if self & type(self)[direction.name]
        )


class OccludedBy(_DirectionFlag):
    """The faces of a block that are hidden by a neighbouring block."""

    UP = 0b00000001
    DOWN = 0b00000010
    NORTH = 0b00000100
    SOUTH = 0b00001000
    EAST = 0b00010000
    WEST = 0b00100000

    @classmethod
    def from_direction(cls, direction: FaceDirection) -> OccludedBy:
        """The single flag matching ``direction``."""
        return cls[direction.name]


class Occludes(_DirectionFlag):
    """The directions in which a block hides its neighbours."""

    UP = 0b00000001
    DOWN = 0b00000010
    NORTH = 0b00000100
    SOUTH = 0b00001000
    EAST = 0b00010000
    WEST = 0b00100000

    @classmethod
    def from_direction(cls, direction: FaceDirection) -> Occludes:
        """The single flag matching ``direction``."""
        return cls[direction.name]


def _empty_occludes() -> List[Occludes]:
    return [Occludes(0)] * TOTAL_BLOCKS


def _empty_occluded_by() -> List[OccludedBy]:
    return [OccludedBy(0)] * TOTAL_BLOCKS


@dataclass
class BlockDataOccludes:
    """What every block of a chunk occludes."""

    data: List[Occludes] = field(default_factory=_empty_occludes)

    @classmethod
    def from_block_data(
        cls, blocks: ChunkData, shapes: Mapping[Hashable, BlockShape]
    ) -> BlockDataOccludes:
        """Occlusion of each block, from its shape; unknown blocks occlude nothing."""
        cache: Dict[Hashable, Occludes] = {}

        def occludes_of(block: Hashable) -> Occludes:
            if block not in cache:
                shape = shapes.get(block)
                cache[block] = (
                    Occludes(0)
                    if shape is None
                    else Occludes.from_directions(shape.occlusion())
                )
            return cache[block]

        return cls([occludes_of(blocks.get_index(i)) for i in range(TOTAL_BLOCKS)])

    def get(self, pos: BlockPos) -> Occludes:
        """The occlusion of the block at ``pos``; empty outside the chunk."""
        index = pos.index_no_wrap()
        if index is None:
            return Occludes(0)
        return self.data[index]


@dataclass
class BlockDataOccludedBy:
    """Which faces of every block in a chunk are hidden by neighbours.

    Blocks outside the chunk are treated as empty.
    """

    data: List[OccludedBy] = field(default_factory=_empty_occluded_by)

    @classmethod
    def from_block_data(
        cls, blocks: ChunkData, shapes: Mapping[Hashable, BlockShape]
    ) -> BlockDataOccludedBy:
        """Face occlusion of each block, worked out from the block shapes."""
        return cls.from_occlusion(BlockDataOccludes.from_block_data(blocks, shapes))

    @classmethod
    def from_occlusion(cls, occlusion: BlockDataOccludes) -> BlockDataOccludedBy:
        """Face occlusion of each block, from what its neighbours occlude."""
        result = cls()
        for pos in chunk_positions():
            occluded_by = OccludedBy(0)
            for direction in FaceDirection:
                neighbour = occlusion.get(pos.shift(direction, 1))
                if neighbour & Occludes.from_direction(direction.opposite()):
                    occluded_by |= OccludedBy.from_direction(direction)
            result.set(pos, occluded_by)
        return result

    def get(self, pos: BlockPos) -> OccludedBy:
        """The hidden faces of the block at ``pos``; empty outside the chunk."""
        index = pos.index_no_wrap()
        if index is None:
            return OccludedBy(0)
        return self.data[index]

    def set(self, pos: BlockPos, occluded_by: OccludedBy) -> None:
        """Store the hidden faces for ``pos``; ignored outside the chunk."""
        index = pos.index_no_wrap()
        if index is None:
            return
        self.data[index] = occluded_by