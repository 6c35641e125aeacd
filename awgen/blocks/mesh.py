"""Meshes of primitive block models, split into occludable parts."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, List, Optional, Sequence

from awgen.blocks.tileset import TilePos
from awgen.geometry.direction import FaceDirection
from awgen.geometry.linalg import Aabb3d, Quat, Vec2, Vec3
from awgen.utilities.meshbuf import MeshBuf

_QUAD_INDICES = (0, 1, 2, 0, 2, 3)
_ALL_DIRECTIONS = frozenset(FaceDirection)


@dataclass(frozen=True)
class BlockVertex:
    """A vertex of a block model."""

    position: Vec3 = Vec3.ZERO
    normal: Vec3 = Vec3.ZERO
    uv: Vec2 = Vec2.ZERO
    tile: TilePos = TilePos()


@dataclass
class BlockMeshPart:
    """A group of vertices and triangle indices within a block mesh."""

    vertices: List[BlockVertex] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)

    @classmethod
    def from_quad(cls, vertices: Sequence[BlockVertex]) -> BlockMeshPart:
        """A part made of one quad of four vertices, split into two triangles."""
        if len(vertices) != 4:
            raise ValueError(f"a quad needs 4 vertices, got {len(vertices)}")
        return cls(list(vertices), list(_QUAD_INDICES))

    def append_to(self, mesh: MeshBuf) -> None:
        """Append this part to ``mesh``, offsetting indices past its vertices."""
        offset = len(mesh.positions)
        for vertex in self.vertices:
            mesh.positions.append(tuple(vertex.position))
            mesh.normals.append(tuple(vertex.normal))
            mesh.uvs.append(tuple(vertex.tile.transform_uv(vertex.uv)))
        mesh.indices.extend(index + offset for index in self.indices)


@dataclass
class BlockMesh:
    """The mesh of a primitive block.

    The centre part is drawn unless every side is occluded; each face part is
    drawn unless the neighbour on that side occludes it.
    """

    center: Optional[BlockMeshPart] = None
    top: Optional[BlockMeshPart] = None
    bottom: Optional[BlockMeshPart] = None
    north: Optional[BlockMeshPart] = None
    south: Optional[BlockMeshPart] = None
    east: Optional[BlockMeshPart] = None
    west: Optional[BlockMeshPart] = None

    def parts(self) -> Iterator[BlockMeshPart]:
        """The parts that are present, centre first."""
        for part in (
            self.center,
            self.top,
            self.bottom,
            self.north,
            self.south,
            self.east,
            self.west,
        ):
            if part is not None:
                yield part

    def rotate(self, rot: Quat) -> None:
        """Rotate every vertex position and normal by ``rot``."""
        for part in self.parts():
            part.vertices = [
                replace(v, position=rot * v.position, normal=rot * v.normal)
                for v in part.vertices
            ]

    def translate(self, offset: Vec3) -> None:
        """Move every vertex by ``offset``."""
        for part in self.parts():
            part.vertices = [replace(v, position=v.position + offset) for v in part.vertices]

    def append_to(self, occlusion: Iterable[FaceDirection], mesh: MeshBuf) -> None:
        """Append the visible parts to ``mesh``.

        ``occlusion`` holds the directions from which this block is covered.
        """
        occluded = frozenset(occlusion)
        if self.center is not None and not occluded >= _ALL_DIRECTIONS:
            self.center.append_to(mesh)
        for direction, part in (
            (FaceDirection.UP, self.top),
            (FaceDirection.DOWN, self.bottom),
            (FaceDirection.NORTH, self.north),
            (FaceDirection.SOUTH, self.south),
            (FaceDirection.EAST, self.east),
            (FaceDirection.WEST, self.west),
        ):
            if part is not None and direction not in occluded:
                part.append_to(mesh)

    def get_bounds(self) -> Aabb3d:
        """The bounding box of all vertices; raises ValueError for an empty mesh."""
        return Aabb3d.from_points(
            vertex.position for part in self.parts() for vertex in part.vertices
        )