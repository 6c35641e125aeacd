"""Building block models from block shapes."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Hashable, List, Mapping, Optional, Sequence, Tuple

from awgen.blocks.mesh import BlockMesh, BlockMeshPart, BlockVertex
from awgen.blocks.model import BlockModel, CustomModel, EmptyModel, PrimitiveModel
from awgen.blocks.shape import BlockFace, BlockShape, CubeShape, CustomShape, EmptyShape
from awgen.blocks.tileset import TilePos
from awgen.geometry.direction import FaceDirection
from awgen.geometry.linalg import Aabb3d, Quat, Vec2, Vec3
from awgen.geometry.rotation import FaceRotation
from awgen.utilities.meshbuf import MeshBuf

logger = logging.getLogger(__name__)

_CORNERS = (
    Vec3(-0.5, -0.5, 0.0),
    Vec3(0.5, -0.5, 0.0),
    Vec3(0.5, 0.5, 0.0),
    Vec3(-0.5, 0.5, 0.0),
)

_BASE_UVS = (Vec2(0.0, 1.0), Vec2(1.0, 1.0), Vec2(1.0, 0.0), Vec2(0.0, 0.0))

_ROTATION_ORDER = {
    FaceRotation.C0: (0, 1, 2, 3),
    FaceRotation.C90: (3, 0, 1, 2),
    FaceRotation.C180: (2, 3, 0, 1),
    FaceRotation.C270: (1, 2, 3, 0),
}

_CUBE_FACES = (
    ("top", FaceDirection.UP, Vec3(0.0, 0.5, 0.0)),
    ("bottom", FaceDirection.DOWN, Vec3(0.0, -0.5, 0.0)),
    ("north", FaceDirection.NORTH, Vec3(0.0, 0.0, -0.5)),
    ("south", FaceDirection.SOUTH, Vec3(0.0, 0.0, 0.5)),
    ("east", FaceDirection.EAST, Vec3(0.5, 0.0, 0.0)),
    ("west", FaceDirection.WEST, Vec3(-0.5, 0.0, 0.0)),
)


def quad(rot: Quat, translate: Vec3, scale: Vec3, tile: TilePos) -> List[BlockVertex]:
    """Four vertices of a unit quad facing +Z, scaled, rotated and then moved.

    Before transformation the quad spans (-0.5, -0.5, 0) to (0.5, 0.5, 0).
    """
    normal = rot * Vec3(0.0, 0.0, 1.0)
    return [
        BlockVertex(
            position=rot * (corner * scale) + translate,
            normal=normal,
            uv=uv,
            tile=tile,
        )
        for corner, uv in zip(_CORNERS, _BASE_UVS)
    ]


def apply_face_uv(vertices: Sequence[BlockVertex], face: BlockFace) -> List[BlockVertex]:
    """The quad's vertices with UVs mirrored and rotated as ``face`` asks."""
    uvs = list(_BASE_UVS)
    if face.mirror_x:
        uvs = [uvs[1], uvs[0], uvs[3], uvs[2]]
    if face.mirror_y:
        uvs = [uvs[3], uvs[2], uvs[1], uvs[0]]
    uvs = [uvs[i] for i in _ROTATION_ORDER[face.rotation]]
    return [replace(vertex, uv=uv) for vertex, uv in zip(vertices, uvs)]


def _build_cube(shape: CubeShape, tileset_materials: Mapping[str, Hashable]) -> PrimitiveModel:
    material = tileset_materials.get(shape.tileset)
    if material is None:
        logger.warning("Failed to find material for tileset: %s", shape.tileset)

    mesh = BlockMesh()
    for attr, direction, offset in _CUBE_FACES:
        face: BlockFace = getattr(shape, attr)
        vertices = quad(
            direction.rotation_quat(),
            offset + Vec3.splat(0.5),
            Vec3.ONE,
            face.tile,
        )
        setattr(mesh, attr, BlockMeshPart.from_quad(apply_face_uv(vertices, face)))

    return PrimitiveModel(material=material, mesh=mesh, bounds=mesh.get_bounds())


def build_block_model(
    shape: BlockShape, tileset_materials: Mapping[str, Hashable]
) -> BlockModel:
    """The model for a block shape.

    ``tileset_materials`` maps tileset names to their materials; a cube whose
    tileset is unknown gets no material. Custom shapes refer to the first mesh
    and material of their asset.
    """
    if isinstance(shape, CubeShape):
        return _build_cube(shape, tileset_materials)
    if isinstance(shape, CustomShape):
        return CustomModel(
            material=f"{shape.asset}#Material0",
            mesh=f"{shape.asset}#Mesh0",
            bounds=Aabb3d(Vec3.ZERO, Vec3.ZERO),
        )
    if isinstance(shape, EmptyShape) or type(shape) is BlockShape:
        return EmptyModel()
    raise TypeError(f"unknown block shape: {shape!r}")


def render_block_mesh(model: BlockModel) -> Optional[Tuple[Hashable, Hashable]]:
    """The (mesh, material) pair used to draw a block on its own.

    Primitive models are flattened into a MeshBuf with no faces occluded;
    custom models return their own mesh. A block without a model gives None.
    """
    if isinstance(model, PrimitiveModel):
        buf = MeshBuf()
        model.mesh.append_to((), buf)
        return buf, model.material
    if isinstance(model, CustomModel):
        return model.mesh, model.material
    return None


def _cube(tileset: str, **tiles: Tuple[int, int]) -> CubeShape:
    return CubeShape(
        tileset=tileset,
        **{name: BlockFace(tile=TilePos(*xy)) for name, xy in tiles.items()},
    )


def default_block_shapes() -> Dict[str, BlockShape]:
    """The built-in block definitions, by name, in load order."""
    return {
        "air": EmptyShape(),
        "grass": _cube(
            "overworld",
            top=(0, 0),
            bottom=(1, 0),
            north=(2, 0),
            south=(2, 0),
            east=(2, 0),
            west=(2, 0),
        ),
        "dirt": _cube(
            "overworld",
            top=(1, 0),
            bottom=(1, 0),
            north=(1, 0),
            south=(1, 0),
            east=(1, 0),
            west=(1, 0),
        ),
        "debug": _cube(
            "overworld",
            top=(2, 1),
            bottom=(3, 1),
            north=(0, 1),
            south=(1, 1),
            east=(4, 1),
            west=(5, 1),
        ),
    }