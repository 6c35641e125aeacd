"""Looking up block definitions by name."""

from __future__ import annotations

from itertools import count
from typing import Iterator, List, Optional, Tuple


class BlockFinder:
    """Registered block definitions, each given an id and a name.

    Lookups scan every block, so callers should cache the ids they need.
    """

    def __init__(self) -> None:
        self._blocks: List[Tuple[int, str]] = []
        self._ids = count(1)

    def register(self, name: str) -> int:
        """Register a block named ``name`` and return its new id."""
        block_id = next(self._ids)
        self._blocks.append((block_id, name))
        return block_id

    def find(self, name: str) -> Optional[int]:
        """The id of the first block whose name is exactly ``name``, or None."""
        return next(
            (block_id for block_id, block_name in self._blocks if block_name == name),
            None,
        )

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return iter(self._blocks)