[build-system]
requires = ["setuptools>=68", "wheel"]
build-backend = "setuptools.build_meta"

[project]
name = "towerrl"
version = "0.1.0"
description = "Game logic for a tile-based roguelike: entities, coordinates, shapes, gear, inventory and data templates"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "game", "ecs", "inventory", "tiles"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["towerrl*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
