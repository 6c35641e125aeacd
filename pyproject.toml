[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "awgen"
version = "0.1.0"
description = "Voxel world engine core: chunked block storage, meshing, occlusion, raycasting, editor and camera logic, project settings"
requires-python = ">=3.10"
keywords = ["voxel", "game-engine", "chunks", "meshing", "raycast", "editor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
awgen = "awgen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["awgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
