"""Tileset definitions and tile positions within a tileset atlas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional

from awgen.geometry.linalg import Vec2

TILESET_LENGTH = 16
"""Number of tiles along one axis of a square tileset image."""


@dataclass(frozen=True)
class TilePos:
    """A tile position within a tileset; both coordinates lie in [0, TILESET_LENGTH)."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        if not (0 <= self.x < TILESET_LENGTH and 0 <= self.y < TILESET_LENGTH):
            raise ValueError(
                f"Tile ({self.x}, {self.y}) is out of bounds for a tile set "
                f"with {TILESET_LENGTH} tiles"
            )

    def transform_uv(self, uv: Vec2) -> Vec2:
        """Map a UV in [0, 1] onto this tile's region of the atlas."""
        size = 1.0 / TILESET_LENGTH
        return Vec2(uv.x * size + self.x * size, uv.y * size + self.y * size)


@dataclass
class Tileset:
    """A named tileset: its image asset path and the material that renders it."""

    name: str
    image: str = ""
    material: Optional[Hashable] = None