"""Voxel world engine core: chunks, meshing, occlusion, raycasting, editor, camera and settings."""

__version__ = "0.1.0"