[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bomber"
version = "0.1.0"
description = "Route finder for grid maps where bombs picked up on the way can blast through boulders"
requires-python = ">=3.10"
dependencies = []
keywords = ["pathfinding", "grid", "a-star", "union-find", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
bomber = "bomber.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bomber"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
