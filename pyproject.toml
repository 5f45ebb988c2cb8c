[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudoku_game"
version = "0.1.0"
description = "A mouse-and-keyboard Sudoku game that highlights mistakes as you play."
requires-python = ">=3.10"
keywords = ["sudoku", "puzzle", "game", "pygame"]
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
sudoku-game = "sudoku_game.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sudoku_game"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
