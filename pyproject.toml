[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tankgrid"
version = "0.1.0"
description = "Model of a tile-grid tank battle: tanks, bullets, bonuses, enemy behaviour, pathfinding and a level editor"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tanks", "grid", "simulation", "pathfinding", "level-editor"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tankgrid"]

[tool.pytest.ini_options]
addopts = "-ra"
