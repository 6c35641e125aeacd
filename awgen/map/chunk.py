"""Block storage for a single chunk."""

from __future__ import annotations

from typing import Hashable, Iterator, List, Optional

from awgen.geometry.position import TOTAL_BLOCKS, BlockPos


class ChunkData:
    """The blocks of one chunk, stored compactly while they are all the same.

    Positions outside the chunk wrap around to the other side.
    """

    __slots__ = ("_block", "_blocks")

    def __init__(self, block: Hashable) -> None:
        self._block = block
        self._blocks: Optional[List[Hashable]] = None

    @classmethod
    def fill(cls, block: Hashable) -> ChunkData:
        """A chunk in which every block is ``block``."""
        return cls(block)

    def set(self, pos: BlockPos, block: Hashable) -> bool:
        """Place ``block`` at ``pos``; return whether anything changed."""
        if self.get(pos) == block:
            return False
        if self._blocks is None:
            self._blocks = [self._block] * TOTAL_BLOCKS
        self._blocks[pos.index()] = block
        return True

    def get(self, pos: BlockPos) -> Hashable:
        """The block at ``pos``."""
        if self._blocks is None:
            return self._block
        return self._blocks[pos.index()]

    def get_index(self, index: int) -> Hashable:
        """The block at a chunk index; raises IndexError outside [0, TOTAL_BLOCKS)."""
        if not 0 <= index < TOTAL_BLOCKS:
            raise IndexError(f"block index out of range: {index}")
        if self._blocks is None:
            return self._block
        return self._blocks[index]

    def unique_blocks(self) -> Iterator[Hashable]:
        """Each distinct block in the chunk once, in sorted order."""
        if self._blocks is None:
            return iter((self._block,))
        return iter(sorted(set(self._blocks)))

    def is_single(self) -> bool:
        """Whether the chunk is stored as a single block type."""
        return self._blocks is None

    def try_convert_to_single(self) -> bool:
        """Collapse to single-block storage if every block matches.

        Returns True only when a conversion happened.
        """
        if self._blocks is None:
            return False
        first = self._blocks[0]
        if all(block == first for block in self._blocks):
            self._block = first
            self._blocks = None
            return True
        return False

    def __repr__(self) -> str:
        if self._blocks is None:
            return f"ChunkData.fill({self._block!r})"
        return f"ChunkData(<{len(set(self._blocks))} block types>)"