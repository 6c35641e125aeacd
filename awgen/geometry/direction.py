"""Axis-aligned face directions in 3D space."""

from __future__ import annotations

import math
from enum import Enum
from typing import Tuple

from awgen.geometry.linalg import EulerRot, Quat, Vec3


class FaceDirection(Enum):
    """An axis-aligned direction: north is -Z, east is +X, up is +Y."""

    UP = "Up"
    DOWN = "Down"
    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_index(cls, index: int) -> FaceDirection:
        """The direction for an index in [0, 5]; raises ValueError otherwise."""
        if not 0 <= index < len(_ORDER):
            raise ValueError(f"Invalid direction index: {index}")
        return _ORDER[index]

    @classmethod
    def from_offset(cls, offset: Tuple[int, int, int]) -> FaceDirection:
        """The direction of a unit grid offset; raises ValueError otherwise."""
        try:
            return _BY_OFFSET[tuple(offset)]
        except KeyError:
            raise ValueError(f"Not a face direction offset: {offset!r}") from None

    def opposite(self) -> FaceDirection:
        """The direction pointing the other way."""
        return _OPPOSITES[self]

    def index(self) -> int:
        """The position of this direction in [0, 5]."""
        return _ORDER.index(self)

    def offset(self) -> Tuple[int, int, int]:
        """The unit grid offset of this direction."""
        return _OFFSETS[self]

    def as_vec3(self) -> Vec3:
        """The unit vector of this direction."""
        return Vec3(*(float(c) for c in _OFFSETS[self]))

    def rotation_quat(self) -> Quat:
        """Rotation taking an object facing +Z so that it faces this direction."""
        return _ROTATIONS[self]


_ORDER = tuple(FaceDirection)

_OFFSETS = {
    FaceDirection.UP: (0, 1, 0),
    FaceDirection.DOWN: (0, -1, 0),
    FaceDirection.NORTH: (0, 0, -1),
    FaceDirection.SOUTH: (0, 0, 1),
    FaceDirection.EAST: (1, 0, 0),
    FaceDirection.WEST: (-1, 0, 0),
}

_BY_OFFSET = {offset: direction for direction, offset in _OFFSETS.items()}

_OPPOSITES = {
    FaceDirection.UP: FaceDirection.DOWN,
    FaceDirection.DOWN: FaceDirection.UP,
    FaceDirection.NORTH: FaceDirection.SOUTH,
    FaceDirection.SOUTH: FaceDirection.NORTH,
    FaceDirection.EAST: FaceDirection.WEST,
    FaceDirection.WEST: FaceDirection.EAST,
}

_HALF = math.pi / 2
_FULL = math.pi

_ROTATIONS = {
    FaceDirection.UP: Quat.from_euler(EulerRot.XYZ, -_HALF, 0.0, 0.0),
    FaceDirection.DOWN: Quat.from_euler(EulerRot.XYZ, _HALF, 0.0, 0.0),
    FaceDirection.NORTH: Quat.from_euler(EulerRot.XYZ, 0.0, _FULL, 0.0),
    FaceDirection.SOUTH: Quat.identity(),
    FaceDirection.EAST: Quat.from_euler(EulerRot.XYZ, 0.0, _HALF, 0.0),
    FaceDirection.WEST: Quat.from_euler(EulerRot.XYZ, 0.0, -_HALF, 0.0),
}