"""Casting rays into the voxel world."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Hashable, Mapping, Optional

from awgen.blocks.model import BlockModel
from awgen.geometry.direction import FaceDirection
from awgen.geometry.linalg import Vec3
from awgen.geometry.position import BlockPos, ChunkPos
from awgen.map.chunk import ChunkData
from awgen.map.world import VoxelWorld
from awgen.utilities.voxel_iter import VoxelIterator


@dataclass(frozen=True)
class VoxelRaycastHit:
    """The first block a ray hit."""

    block: BlockPos
    face: FaceDirection
    distance: float
    hit_pos: Vec3


def voxel_raycast(
    world: VoxelWorld,
    models: Mapping[Hashable, BlockModel],
    origin: Vec3,
    direction: Vec3,
    max_distance: float,
) -> Optional[VoxelRaycastHit]:
    """The first block whose model bounds the ray meets within ``max_distance``.

    The block containing ``origin`` is skipped. Blocks without a model, or
    missing from ``models``, are passed through.
    """
    direction = direction.normalize()
    current_chunk: Optional[ChunkPos] = None
    chunk: Optional[ChunkData] = None

    steps = VoxelIterator(origin, direction).with_max_distance(max_distance)
    for block_pos, face in islice(steps, 1, None):
        chunk_pos = block_pos.chunk()
        if chunk_pos != current_chunk:
            current_chunk = chunk_pos
            chunk = world.get_chunk(chunk_pos)
        if chunk is None:
            continue

        model = models.get(chunk.get(block_pos))
        if model is None:
            continue
        bounds = model.get_bounds()
        if bounds is None:
            continue

        distance = bounds.translated(block_pos.as_vec3()).ray_intersection(
            origin, direction, max_distance
        )
        if distance is None:
            continue

        return VoxelRaycastHit(
            block=block_pos,
            face=face,
            distance=distance,
            hit_pos=origin + direction * distance,
        )

    return None