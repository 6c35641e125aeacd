from itertools import islice

import pytest

from awgen.geometry.direction import FaceDirection
from awgen.geometry.linalg import Vec3
from awgen.geometry.position import BlockPos
from awgen.utilities.voxel_iter import VoxelIterator

DIRECTIONS = [
    Vec3(1.0, 0.0, 0.0),
    Vec3(0.0, -1.0, 0.0),
    Vec3(0.3, 0.7, -0.2),
    Vec3(-1.0, 2.0, 3.0),
    Vec3(-0.5, -0.5, -0.5),
]


def take(iterator, n):
    return list(islice(iterator, n))


def test_first_item_is_start_block_without_face():
    origin = Vec3(-1.25, 3.5, 7.75)
    block, face = next(VoxelIterator(origin, Vec3(0.0, 0.0, 1.0)))
    assert block == BlockPos.from_vec3(origin)
    assert face is None


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_each_step_moves_one_cell(direction):
    items = take(VoxelIterator(Vec3(0.2, 0.6, 0.9), direction), 40)
    assert len(items) == 40
    for (prev, _), (block, face) in zip(items, items[1:]):
        assert face is not None
        assert block == prev.shift(face.opposite(), 1)


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_entry_faces_oppose_the_ray(direction):
    items = take(VoxelIterator(Vec3(0.2, 0.6, 0.9), direction), 40)
    for _, face in items[1:]:
        assert face.as_vec3().dot(direction) < 0.0


def test_within_region_stops_at_boundary():
    iterator = VoxelIterator(Vec3(0.5, 0.5, 0.5), Vec3(1.0, 0.0, 0.0)).within_region(
        BlockPos(0, 0, 0), BlockPos(3, 0, 0)
    )
    assert [block for block, _ in iterator] == [BlockPos(x, 0, 0) for x in range(4)]


def test_start_outside_region_yields_nothing():
    iterator = VoxelIterator(Vec3(10.5, 0.5, 0.5), Vec3(1.0, 0.0, 0.0)).within_region(
        BlockPos(0, 0, 0), BlockPos(3, 3, 3)
    )
    assert list(iterator) == []


def test_max_distance_gives_prefix_of_unbounded_walk():
    origin = Vec3(0.3, 0.4, 0.5)
    direction = Vec3(0.6, -0.3, 0.2)
    full = take(VoxelIterator(origin, direction), 50)
    limited = list(VoxelIterator(origin, direction).with_max_distance(2.5))
    assert 0 < len(limited) < 50
    assert limited == full[: len(limited)]


def test_longer_distance_never_yields_fewer_blocks():
    origin = Vec3(0.3, 0.4, 0.5)
    direction = Vec3(1.0, 1.0, 0.0)
    lengths = [
        len(list(VoxelIterator(origin, direction).with_max_distance(d)))
        for d in (0.5, 1.0, 2.0, 4.0, 8.0)
    ]
    assert lengths == sorted(lengths)
    assert lengths[0] < lengths[-1]


def test_negative_direction_enters_through_east_face():
    items = take(VoxelIterator(Vec3(0.5, 0.5, 0.5), Vec3(-1.0, 0.0, 0.0)), 2)
    assert items[1] == (BlockPos(-1, 0, 0), FaceDirection.EAST)


def test_upward_ray_enters_through_bottom_faces():
    items = take(VoxelIterator(Vec3(0.5, 0.5, 0.5), Vec3(0.0, 1.0, 0.0)), 6)
    assert {face for _, face in items[1:]} == {FaceDirection.DOWN}


def test_zero_direction_raises():
    with pytest.raises(ValueError):
        VoxelIterator(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, 0.0))