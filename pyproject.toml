[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonpath"
version = "0.1.0"
description = "Generate grid dungeons and find paths through them with BFS, including key-and-door puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["dungeon", "maze", "bfs", "pathfinding", "bitmask", "keys", "doors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dungeonpath = "dungeonpath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeonpath"]

[tool.pytest.ini_options]
addopts = "-ra"
