"""Walking the voxels crossed by a ray."""

from __future__ import annotations

import math
from typing import Iterator, List, Optional, Tuple

from awgen.geometry.direction import FaceDirection
from awgen.geometry.linalg import Vec3
from awgen.geometry.position import BlockPos

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_F32_MAX = 3.4028234663852886e38


def _intbound(s: float, ds: float) -> float:
    """The smallest positive t such that s + t * ds is an integer."""
    if ds < 0.0:
        return _intbound(-s, -ds)
    g = math.fmod(math.fmod(s, 1.0) + 1.0, 1.0)
    if ds == 0.0:
        return math.inf
    return (1.0 - g) / ds


class VoxelIterator:
    """Yields each voxel a ray passes through as ``(block, face)``.

    ``face`` is the side through which the ray entered the voxel; it is None
    for the starting voxel.
    """

    def __init__(self, point: Vec3, direction: Vec3) -> None:
        direction = direction.normalize()
        self._dir = direction
        self._block = BlockPos.from_vec3(point)
        self._step: List[int] = [int(math.copysign(1.0, d)) for d in direction]
        self._t_max: List[float] = [_intbound(s, d) for s, d in zip(point, direction)]
        self._t_delta: List[float] = [
            step / d if d != 0.0 else math.inf for step, d in zip(self._step, direction)
        ]
        self._min_block = BlockPos(_I32_MIN, _I32_MIN, _I32_MIN)
        self._max_block = BlockPos(_I32_MAX, _I32_MAX, _I32_MAX)
        self._face: Optional[FaceDirection] = None
        self._max_distance = _F32_MAX

    def within_region(self, min_pos: BlockPos, max_pos: BlockPos) -> VoxelIterator:
        """Stop once the walk leaves the inclusive box; returns self."""
        self._min_block = min_pos
        self._max_block = max_pos
        return self

    def with_max_distance(self, max_distance: float) -> VoxelIterator:
        """Stop after the ray has travelled ``max_distance``; returns self."""
        self._max_distance = max_distance / self._dir.length()
        return self

    def __iter__(self) -> Iterator[Tuple[BlockPos, Optional[FaceDirection]]]:
        return self

    def __next__(self) -> Tuple[BlockPos, Optional[FaceDirection]]:
        if self._max_distance < 0.0:
            raise StopIteration
        if not self._block.is_in_bounds(self._min_block, self._max_block):
            raise StopIteration

        current = (self._block, self._face)

        tx, ty, tz = self._t_max
        if tx < ty:
            axis = 0 if tx < tz else 2
        else:
            axis = 1 if ty < tz else 2

        if self._t_max[axis] > self._max_distance:
            self._max_distance = -1.0

        offset = [0, 0, 0]
        offset[axis] = self._step[axis]
        self._block = BlockPos(
            self._block.x + offset[0], self._block.y + offset[1], self._block.z + offset[2]
        )
        self._t_max[axis] += self._t_delta[axis]
        self._face = FaceDirection.from_offset(tuple(-c for c in offset))

        return current