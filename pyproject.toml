[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minesweeper"
version = "0.1.0"
description = "A Minesweeper puzzle game with flags, safe starts, touch input and a settings menu."
requires-python = ">=3.10"
keywords = ["minesweeper", "game", "puzzle", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minesweeper = "minesweeper.app:main"

[tool.hatch.build.targets.wheel]
packages = ["minesweeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
