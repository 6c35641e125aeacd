# awgen

The core of a voxel world engine, in plain Python with no third-party
dependencies. It stores worlds as 16×16×16 chunks of blocks and works out
which block faces hide each other. It builds triangle mesh data from block
shapes and casts rays through the voxel grid. It also holds the state logic
behind the map editor, the camera, the hotbar and the splash screen, and it
keeps project settings in an SQLite file.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Command line

```
awgen [--debug] [--project PATH] [--fullscreen] [--version]
```

The command does the following:

- It prints the engine version and says that it runs in player mode.
- It opens the project's settings file, `settings.awgen`, in the project
  folder. The project folder is `--project` if you give it, or the current
  directory if you do not. In player mode the file is not created. If the
  file is missing, the command prints an error and exits with status 1.
- It reads the `NAME` and `VERSION` keys. When a key is missing, it uses
  `Untitled` or `0.0.1` instead, and it prints the name and version.
- It reports whether debug mode is on.
- It logs the window title, whether the window would be windowed or
  fullscreen, and the project's `assets` folder. With `--debug` it logs at
  debug level, otherwise at info level.

## Library overview

- `awgen.geometry`
  - `linalg`: `Vec2`, `Vec3`, `Quat`, `EulerRot` and `Aabb3d`.
    `Aabb3d.ray_intersection` tests a ray against the box.
  - `position`: `BlockPos` and `ChunkPos`, with `CHUNK_SIZE` and
    `TOTAL_BLOCKS`.
  - `direction`: `FaceDirection`.
  - `rotation`: `FaceRotation`.
- `awgen.blocks`
  - `tileset`: `TilePos` and `Tileset`.
  - `shape`: `BlockFace`, and the shapes `EmptyShape`, `CubeShape` and
    `CustomShape`.
  - `model`: `EmptyModel`, `PrimitiveModel` and `CustomModel`.
  - `mesh`: `BlockMesh`, `BlockMeshPart` and `BlockVertex`.
  - `occlusion`: `OccludedBy`, `Occludes`, `BlockDataOccludes` and
    `BlockDataOccludedBy`.
  - `builder`: `build_block_model`, `render_block_mesh`, `quad`,
    `apply_face_uv` and `default_block_shapes`. `default_block_shapes`
    defines air, grass, dirt and debug.
  - `registry`: `BlockFinder` registers blocks and looks them up by name.
- `awgen.map`
  - `chunk`: `ChunkData` stores a chunk's blocks compactly.
  - `world`: `VoxelWorld` maps chunk positions to chunk data.
  - `remesh`: `build_models` merges a chunk into one mesh per material.
    `RemeshScheduler` queues chunks to remesh now or later.
  - `editor`: `place_block`, `remove_block` and `prepare_map_editor`.
- `awgen.utilities`
  - `meshbuf`: `MeshBuf`.
  - `chunk_iter`: `chunk_positions()`.
  - `voxel_iter`: `VoxelIterator`.
  - `raycast`: `voxel_raycast` and `VoxelRaycastHit`.
  - `vec_cmp`: `approx_eq` and `assert_approx_eq`.
- `awgen.ui`
  - `hotbar`: `Hotbar`, and the slot contents `EmptySlot`, `ToolSlot` and
    `BlockSlot`.
  - `menu`: `MainMenuState`.
  - `splash`: `splash_alpha` and `splash_next_state`.
- `awgen.camera`
  - State: `CameraTarget`, `CameraControls` and `CameraState`.
  - Controls: `smooth_follow`, `mouse_pan`, `mouse_rotate`, `mouse_zoom`
    and `keyboard_rotate`.
- `awgen.settings`: `ProjectSettings`, with the errors `SettingsOpenError`
  and `SettingsQueryError`. It can be used as a context manager.

### Example

```python
from awgen.blocks.builder import build_block_model, default_block_shapes
from awgen.geometry.linalg import Vec3
from awgen.geometry.position import BlockPos, ChunkPos
from awgen.map.chunk import ChunkData
from awgen.map.remesh import build_models
from awgen.map.world import VoxelWorld
from awgen.utilities.raycast import voxel_raycast

world = VoxelWorld()
data = ChunkData.fill("air")
data.set(BlockPos(3, 0, 5), "grass")
world.spawn_chunk(ChunkPos(0, 0, 0), data)

shapes = default_block_shapes()
models = {
    name: build_block_model(shape, {"overworld": "overworld-material"})
    for name, shape in shapes.items()
}

for chunk_model in build_models(data, models, shapes):
    print(chunk_model.material, chunk_model.mesh.tri_count())

hit = voxel_raycast(world, models, Vec3(3.5, 5.5, 5.5), Vec3(0.0, -1.0, 0.0), 100.0)
print(hit.block, hit.face)  # (3, 0, 5) Up
```

Project settings:

```python
from awgen.settings import ProjectSettings

with ProjectSettings("my-project", create=True) as settings:
    settings.set("NAME", "Demo")
    print(settings.get("NAME"))
```

## What this package does not do

- It has no renderer, window or input handling. The `awgen` command only
  opens and reports on a project.
- Meshes come out as `MeshBuf` data. Nothing uploads them or draws them.
- Custom block models hold asset label strings and zero-size bounds. No
  asset is loaded.
- The camera, hotbar and splash modules compute state from the values you
  pass in. They do not read the mouse or keyboard themselves.

## Tests

```
pytest
```