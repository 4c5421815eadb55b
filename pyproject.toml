[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockworld"
version = "0.0.1"
description = "In-memory chunk storage, flat terrain generation and a script event host for a voxel game server"
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "chunk", "nibble-array", "terrain", "game-server", "scripting", "events"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blockworld"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
