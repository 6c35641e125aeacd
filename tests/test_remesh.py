import pytest

from awgen.blocks.builder import build_block_model, default_block_shapes
from awgen.blocks.shape import CubeShape, CustomShape
from awgen.geometry.position import BlockPos
from awgen.map.chunk import ChunkData
from awgen.map.remesh import NeedsRemeshLater, RemeshScheduler, build_models

SHAPES = dict(default_block_shapes())
SHAPES["stone"] = CubeShape("rock")
SHAPES["statue"] = CustomShape("statue.glb")

MATERIALS = {"overworld": "overworld-material", "rock": "rock-material"}
MODELS = {name: build_block_model(shape, MATERIALS) for name, shape in SHAPES.items()}


def chunk_with(*placements):
    data = ChunkData.fill("air")
    for pos, block in placements:
        data.set(pos, block)
    return data


def total_tris(models):
    return sum(model.mesh.tri_count() for model in models)


def test_empty_chunk_builds_no_models():
    assert build_models(ChunkData.fill("air"), MODELS, SHAPES) == []


def test_single_block_builds_six_faces():
    models = build_models(chunk_with((BlockPos(5, 5, 5), "grass")), MODELS, SHAPES)
    assert len(models) == 1
    assert models[0].material == "overworld-material"
    assert models[0].mesh.tri_count() == 12
    assert len(models[0].mesh.positions) * 3 == len(models[0].mesh.indices) * 2


def test_block_vertices_lie_in_its_cell():
    pos = BlockPos(3, 4, 5)
    models = build_models(chunk_with((pos, "dirt")), MODELS, SHAPES)
    for x, y, z in models[0].mesh.positions:
        assert pos.x - 1e-6 <= x <= pos.x + 1 + 1e-6
        assert pos.y - 1e-6 <= y <= pos.y + 1 + 1e-6
        assert pos.z - 1e-6 <= z <= pos.z + 1 + 1e-6


def test_indices_reference_existing_vertices():
    models = build_models(
        chunk_with((BlockPos(1, 1, 1), "grass"), (BlockPos(8, 2, 3), "dirt")), MODELS, SHAPES
    )
    mesh = models[0].mesh
    assert max(mesh.indices) == len(mesh.positions) - 1
    assert len(mesh.uvs) == len(mesh.normals) == len(mesh.positions)


def test_adjacent_blocks_hide_shared_faces():
    adjacent = build_models(
        chunk_with((BlockPos(4, 4, 4), "grass"), (BlockPos(5, 4, 4), "grass")), MODELS, SHAPES
    )
    apart = build_models(
        chunk_with((BlockPos(4, 4, 4), "grass"), (BlockPos(8, 4, 4), "grass")), MODELS, SHAPES
    )
    assert total_tris(adjacent) < total_tris(apart)


def test_chunk_edge_faces_are_not_culled():
    edge = build_models(chunk_with((BlockPos(0, 0, 0), "grass")), MODELS, SHAPES)
    inner = build_models(chunk_with((BlockPos(7, 7, 7), "grass")), MODELS, SHAPES)
    assert total_tris(edge) == total_tris(inner)


def test_one_model_per_material():
    models = build_models(
        chunk_with((BlockPos(1, 1, 1), "grass"), (BlockPos(9, 9, 9), "stone")), MODELS, SHAPES
    )
    assert {model.material for model in models} == {"overworld-material", "rock-material"}


@pytest.mark.parametrize("block", ["statue", "mystery"])
def test_custom_and_unknown_blocks_add_nothing(block):
    assert build_models(chunk_with((BlockPos(2, 2, 2), block)), MODELS, SHAPES) == []


def test_needs_remesh_later_orders_by_priority():
    entries = [NeedsRemeshLater(3), NeedsRemeshLater(-1, True), NeedsRemeshLater(0)]
    assert [entry.priority for entry in sorted(entries)] == [-1, 0, 3]


def test_request_is_served_on_next_tick():
    scheduler = RemeshScheduler()
    scheduler.request("a")
    assert scheduler.is_pending("a")
    assert scheduler.tick() == ["a"]
    assert not scheduler.is_pending("a")
    assert scheduler.tick() == []


def test_request_also_clears_later_entry():
    scheduler = RemeshScheduler()
    scheduler.request_later("a", 5)
    scheduler.request("a")
    assert scheduler.tick() == ["a"]
    assert not scheduler.is_pending("a")


def test_later_request_is_promoted_when_idle():
    scheduler = RemeshScheduler()
    scheduler.request_later("a")
    assert scheduler.tick() == []
    assert scheduler.is_pending("a")
    assert scheduler.tick() == ["a"]
    assert not scheduler.is_pending("a")


def test_later_requests_wait_while_busy():
    scheduler = RemeshScheduler()
    scheduler.request("busy")
    scheduler.request_later("a")
    assert scheduler.tick() == ["busy"]
    assert scheduler.tick() == []
    assert scheduler.tick() == ["a"]


def test_lowest_priority_served_first():
    scheduler = RemeshScheduler()
    scheduler.request_later("high", 4)
    scheduler.request_later("low", -2)
    scheduler.tick()
    assert scheduler.tick() == ["low"]
    scheduler.tick()
    assert scheduler.tick() == ["high"]


def test_starvation_lowers_priority():
    scheduler = RemeshScheduler()
    scheduler.request_later("patient", 1)
    scheduler.request_later("starving", 2, starvation=True)
    for _ in range(2):
        scheduler.request("busy")
        assert scheduler.tick() == ["busy"]
    scheduler.tick()
    assert scheduler.tick() == ["starving"]


def test_block_model_update_queues_containing_idle_chunks():
    scheduler = RemeshScheduler()
    scheduler.request("c3")
    chunk_blocks = {"c1": {"grass", "air"}, "c2": {"dirt"}, "c3": {"grass"}}
    assert scheduler.on_block_model_updated("grass", chunk_blocks) == 1
    assert scheduler.is_pending("c1")
    assert not scheduler.is_pending("c2")
    assert scheduler.tick() == ["c3"]