"""A growable buffer of mesh data: positions, normals, UVs and triangle indices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

U16_MAX = 65535
"""Largest index that still fits a 16-bit index buffer."""


@dataclass
class MeshBuf:
    """Temporary storage for triangle-list mesh data."""

    positions: List[Tuple[float, float, float]] = field(default_factory=list)
    uvs: List[Tuple[float, float]] = field(default_factory=list)
    normals: List[Tuple[float, float, float]] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)

    def tri_count(self) -> int:
        """The number of triangles described by the index list."""
        return len(self.indices) // 3

    def index_format(self) -> str:
        """The narrowest index width for this buffer: ``"u16"`` or ``"u32"``."""
        return "u32" if len(self.indices) > U16_MAX else "u16"