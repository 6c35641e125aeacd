"""Block models built from block shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional

from awgen.blocks.mesh import BlockMesh
from awgen.geometry.linalg import Aabb3d


class BlockModel:
    """Base of all block models."""

    def get_bounds(self) -> Optional[Aabb3d]:
        """The model's bounding box for raycasting, or None without a model."""
        return None


@dataclass
class EmptyModel(BlockModel):
    """A block with no model."""


@dataclass
class PrimitiveModel(BlockModel):
    """A primitive block mesh that is merged into static chunk meshes."""

    material: Hashable
    mesh: BlockMesh
    bounds: Aabb3d

    def get_bounds(self) -> Optional[Aabb3d]:
        return self.bounds


@dataclass
class CustomModel(BlockModel):
    """A block whose mesh is a separate asset placed under the chunk."""

    material: Hashable
    mesh: Hashable
    bounds: Aabb3d

    def get_bounds(self) -> Optional[Aabb3d]:
        return self.bounds