"""Editing the voxel world: placing and removing blocks, and the start-up map."""

from __future__ import annotations

from typing import Hashable, Optional

from awgen.blocks.registry import BlockFinder
from awgen.geometry.position import CHUNK_SIZE, BlockPos, ChunkPos
from awgen.map.chunk import ChunkData
from awgen.map.remesh import RemeshScheduler
from awgen.map.world import VoxelWorld
from awgen.ui.hotbar import BlockSlot, Hotbar
from awgen.utilities.raycast import VoxelRaycastHit

AIR = "air"
"""Name of the block that fills empty space."""


def _require(finder: BlockFinder, name: str) -> Hashable:
    block = finder.find(name)
    if block is None:
        raise LookupError(f"block not registered: {name!r}")
    return block


def place_block(
    world: VoxelWorld,
    finder: BlockFinder,
    hotbar: Hotbar,
    hit: Optional[VoxelRaycastHit],
    scheduler: RemeshScheduler,
) -> Optional[BlockPos]:
    """Place the selected hotbar block against the face under the cursor.

    Returns the position filled, or None when the selection is not a block or
    nothing is under the cursor. A missing chunk is created full of air.
    """
    selected = hotbar.selected
    if not isinstance(selected, BlockSlot):
        return None
    if hit is None:
        return None

    air = _require(finder, AIR)
    target = hit.block.shift(hit.face, 1)
    chunk_pos = target.chunk()

    chunk = world.get_chunk(chunk_pos)
    if chunk is None:
        chunk = ChunkData.fill(air)
        chunk.set(target, selected.block)
        world.spawn_chunk(chunk_pos, chunk)
    else:
        chunk.set(target, selected.block)
    scheduler.request(chunk_pos)
    return target


def remove_block(
    world: VoxelWorld,
    finder: BlockFinder,
    hit: Optional[VoxelRaycastHit],
    scheduler: RemeshScheduler,
) -> bool:
    """Replace the block under the cursor with air; return whether it changed.

    A chunk left holding only air is removed from the world.
    """
    if hit is None:
        return False

    chunk_pos = hit.block.chunk()
    chunk = world.get_chunk(chunk_pos)
    if chunk is None:
        return False

    air = _require(finder, AIR)
    if not chunk.set(hit.block, air):
        return False

    if chunk.try_convert_to_single():
        world.despawn_chunk(chunk_pos)
    else:
        scheduler.request(chunk_pos)
    return True


def prepare_map_editor(world: VoxelWorld, finder: BlockFinder, hotbar: Hotbar) -> ChunkPos:
    """Set up the editor: a grass floor in the origin chunk and a stocked hotbar.

    Returns the position of the chunk that was spawned.
    """
    air = _require(finder, AIR)
    grass = _require(finder, "grass")
    dirt = _require(finder, "dirt")
    debug = _require(finder, "debug")

    chunk = ChunkData.fill(air)
    for x in range(CHUNK_SIZE):
        for z in range(CHUNK_SIZE):
            chunk.set(BlockPos(x, 0, z), grass)

    origin = ChunkPos(0, 0, 0)
    world.spawn_chunk(origin, chunk)

    hotbar.set_slot(0, BlockSlot(grass))
    hotbar.set_slot(1, BlockSlot(dirt))
    hotbar.set_slot(2, BlockSlot(debug))
    return origin