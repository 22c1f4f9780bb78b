[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "underescape"
version = "0.1.0"
description = "Game logic for a side-scrolling stealth game: player movement, patrolling enemies, throwable items and frame timing"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "stealth", "side-scrolling", "2d", "game-logic"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["underescape"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
