"""A pygame Sudoku game with mouse selection and mistake highlighting."""

__version__ = "0.1.0"