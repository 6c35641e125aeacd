"""Building chunk meshes and scheduling chunks for remeshing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Dict, Hashable, Iterable, List, Mapping, Optional

from awgen.blocks.mesh import BlockMesh, BlockMeshPart
from awgen.blocks.model import BlockModel, PrimitiveModel
from awgen.blocks.occlusion import BlockDataOccludedBy
from awgen.blocks.shape import BlockShape
from awgen.map.chunk import ChunkData
from awgen.utilities.chunk_iter import chunk_positions
from awgen.utilities.meshbuf import MeshBuf

logger = logging.getLogger(__name__)


@dataclass
class NeedsRemeshLater:
    """A low-priority remesh request; lower priorities are served first.

    With ``starvation`` set, the priority drops by one every tick so the
    request cannot wait forever.
    """

    priority: int = 0
    starvation: bool = False

    def __lt__(self, other: NeedsRemeshLater) -> bool:
        return self.priority < other.priority

    def __le__(self, other: NeedsRemeshLater) -> bool:
        return self.priority <= other.priority

    def __gt__(self, other: NeedsRemeshLater) -> bool:
        return self.priority > other.priority

    def __ge__(self, other: NeedsRemeshLater) -> bool:
        return self.priority >= other.priority


@dataclass
class ChunkModel:
    """One merged mesh of a chunk, drawn with a single material."""

    mesh: MeshBuf
    material: Hashable


def _copy_part(part: Optional[BlockMeshPart]) -> Optional[BlockMeshPart]:
    if part is None:
        return None
    return BlockMeshPart(list(part.vertices), list(part.indices))


def _copy_mesh(mesh: BlockMesh) -> BlockMesh:
    return BlockMesh(**{f.name: _copy_part(getattr(mesh, f.name)) for f in fields(mesh)})


def build_models(
    data: ChunkData,
    models: Mapping[Hashable, BlockModel],
    shapes: Mapping[Hashable, BlockShape],
) -> List[ChunkModel]:
    """Merge the primitive blocks of a chunk into one mesh per material.

    Faces hidden by neighbouring blocks are left out. The list is empty when
    the chunk has no visible primitive blocks.
    """
    occlusion = BlockDataOccludedBy.from_block_data(data, shapes)
    buffers: Dict[Hashable, MeshBuf] = {}

    for pos in chunk_positions():
        model = models.get(data.get(pos))
        if not isinstance(model, PrimitiveModel):
            continue
        buffer = buffers.get(model.material)
        if buffer is None:
            buffer = buffers[model.material] = MeshBuf()
        block_mesh = _copy_mesh(model.mesh)
        block_mesh.translate(pos.as_vec3())
        block_mesh.append_to(occlusion.get(pos).directions(), buffer)

    return [ChunkModel(mesh=mesh, material=material) for material, mesh in buffers.items()]


class RemeshScheduler:
    """Tracks which chunks must be remeshed now and which can wait."""

    def __init__(self) -> None:
        self._now: Dict[Hashable, None] = {}
        self._later: Dict[Hashable, NeedsRemeshLater] = {}

    def request(self, chunk: Hashable) -> None:
        """Mark ``chunk`` to be remeshed on the next tick."""
        self._now[chunk] = None

    def request_later(
        self, chunk: Hashable, priority: int = 0, starvation: bool = False
    ) -> None:
        """Queue ``chunk`` for remeshing once nothing else is being remeshed."""
        self._later[chunk] = NeedsRemeshLater(priority, starvation)

    def is_pending(self, chunk: Hashable) -> bool:
        """Whether ``chunk`` is waiting for a remesh of either kind."""
        return chunk in self._now or chunk in self._later

    def on_block_model_updated(
        self, block: Hashable, chunk_blocks: Mapping[Hashable, Iterable[Hashable]]
    ) -> int:
        """Queue every idle chunk that contains ``block``; return how many were queued.

        ``chunk_blocks`` maps each chunk to the unique blocks it holds. Chunks
        already pending are left alone.
        """
        count = 0
        for chunk, blocks in chunk_blocks.items():
            if self.is_pending(chunk) or block not in blocks:
                continue
            self._later[chunk] = NeedsRemeshLater()
            count += 1
        logger.debug("Block model %s updated, queuing %d chunks for remesh.", block, count)
        return count

    def tick(self) -> List[Hashable]:
        """Advance one frame and return the chunks to remesh during it.

        When no chunk is being remeshed, the lowest-priority queued chunk is
        promoted for the next tick. Starving requests then lose one priority.
        """
        batch = list(self._now)
        self._now.clear()
        for chunk in batch:
            self._later.pop(chunk, None)

        if not batch and self._later:
            chunk = min(self._later, key=lambda c: self._later[c].priority)
            del self._later[chunk]
            self._now[chunk] = None

        for entry in self._later.values():
            if entry.starvation:
                entry.priority -= 1

        return batch