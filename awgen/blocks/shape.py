"""Block shape definitions that are turned into models at runtime."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet

from awgen.blocks.tileset import TilePos
from awgen.geometry.direction import FaceDirection
from awgen.geometry.rotation import FaceRotation

_NONE: FrozenSet[FaceDirection] = frozenset()
_ALL: FrozenSet[FaceDirection] = frozenset(FaceDirection)


@dataclass(frozen=True)
class BlockFace:
    """Texture properties of one face of a block."""

    tile: TilePos = field(default_factory=TilePos)
    rotation: FaceRotation = FaceRotation.C0
    mirror_x: bool = False
    mirror_y: bool = False


class BlockShape:
    """Base of all block shapes."""

    def occlusion(self) -> FrozenSet[FaceDirection]:
        """The directions this block hides its neighbours from.

        Tileset transparency is not considered: cubes are treated as opaque and
        custom models as fully transparent.
        """
        return _NONE


@dataclass(frozen=True)
class EmptyShape(BlockShape):
    """A block with no model."""


@dataclass(frozen=True)
class CubeShape(BlockShape):
    """A standard cube textured from one tileset."""

    tileset: str
    top: BlockFace = field(default_factory=BlockFace)
    bottom: BlockFace = field(default_factory=BlockFace)
    north: BlockFace = field(default_factory=BlockFace)
    south: BlockFace = field(default_factory=BlockFace)
    east: BlockFace = field(default_factory=BlockFace)
    west: BlockFace = field(default_factory=BlockFace)

    def occlusion(self) -> FrozenSet[FaceDirection]:
        return _ALL


@dataclass(frozen=True)
class CustomShape(BlockShape):
    """A block whose model is loaded from an asset."""

    asset: str