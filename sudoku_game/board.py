"""The sudoku board: problem loading, selection, colouring and input."""

from __future__ import annotations

import random
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol

from .mouse import Mouse
from .square import Square
from .vector import Vector2f

DEFAULT_PROBLEM_PATH = "res/dev/sudoku.csv"
PROBLEM_COUNT = 1000
CELLS = 81
INITIAL_SQUARE_SIZE = 40.0

HOVER_COLOR = (165, 165, 165, 255)
HOVER_RELATIVE_COLOR = (200, 200, 200, 255)
SELECTED_COLOR = (120, 163, 214, 255)
SELECTED_RELATIVE_COLOR = (150, 198, 249, 255)
_PROTECTED_REDS = (147, 112)


class _RandInt(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def _check_digits(text: str, what: str) -> str:
    if len(text) != CELLS or not all(ch in "0123456789" for ch in text):
        raise ValueError(f"{what} must be {CELLS} digits, got {text!r}")
    return text


def load_problem(path: str | Path, rng: _RandInt) -> tuple[str, str]:
    """Pick one of the first problems in the CSV file at random.

    Returns the puzzle and its solution as 81-character digit strings.
    """
    wanted = rng.randint(1, PROBLEM_COUNT)
    chosen = None
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle, start=1):
            if number == wanted:
                chosen = line.rstrip("\r\n")
                break
    if chosen is None:
        raise ValueError(f"{path} has fewer than {wanted} lines")
    puzzle = _check_digits(chosen[:CELLS], "puzzle")
    solution = _check_digits(chosen[CELLS + 1 : 2 * CELLS + 1], "solution")
    return puzzle, solution


def format_solution(solution: str) -> str:
    """Lay out a solution as a 9x9 grid of 3-digit groups, followed by a rule."""
    parts = []
    for i, ch in enumerate(solution[:CELLS]):
        parts.append(ch)
        if i % 3 == 2:
            parts.append(" ")
        if i % 9 == 8:
            parts.append("\n")
        if i % 27 == 26:
            parts.append("\n")
    parts.append("=" * 33 + "\n")
    return "".join(parts)


class Board:
    """A 9x9 grid of squares with its on-screen layout."""

    def __init__(
        self,
        start_point: Vector2f,
        square_textures: Sequence[Any],
        problem_path: str | Path = DEFAULT_PROBLEM_PATH,
        rng: _RandInt | None = None,
    ) -> None:
        self.problem_path = problem_path
        self.rng = rng if rng is not None else random.Random()
        self.square_textures = list(square_textures)
        self.start_point = Vector2f(start_point.x, start_point.y)
        self.square_size = INITIAL_SQUARE_SIZE

        puzzle, solution = load_problem(self.problem_path, self.rng)
        print(format_solution(solution), end="")
        self.squares = [
            Square(
                self.start_point
                + Vector2f(column * self.square_size, row * self.square_size),
                row,
                column,
                int(puzzle[9 * row + column]),
                int(solution[9 * row + column]),
                self.square_textures[int(puzzle[9 * row + column])],
            )
            for row in range(9)
            for column in range(9)
        ]
        for square in self.squares:
            square.generate_relatives(self.squares)

    def resize(self, start_point: Vector2f, new_size: float) -> None:
        """Lay the squares out again from a new corner with a new size."""
        self.start_point = Vector2f(start_point.x, start_point.y)
        self.square_size = new_size
        for s in self.squares:
            s.set_size(new_size)
            s.set_position(
                self.start_point.x + s.column * new_size,
                self.start_point.y + s.row * new_size,
            )

    def restart(self) -> None:
        """Load a new random problem into the existing squares."""
        puzzle, solution = load_problem(self.problem_path, self.rng)
        print(format_solution(solution), end="")
        for s, given, answer in zip(self.squares, puzzle, solution):
            s.update_answer(int(given), int(answer))
            s.texture = self.square_textures[int(given)]

    def update_selected(self, mouse: Mouse) -> None:
        """Select the square under the pointer, or clear the selection."""
        hit = False
        for s in self.squares:
            if mouse.is_inside(s):
                for other in self.squares:
                    other.deselect()
                s.select()
                hit = True
        if not hit:
            for s in self.squares:
                s.deselect()

    def update(self, mouse: Mouse) -> None:
        """Colour hovered and selected squares and pick each square's texture."""
        for s in self.squares:
            if mouse.is_inside(s):
                for r in s.relatives:
                    if r.color[0] not in _PROTECTED_REDS:
                        r.set_color(*HOVER_RELATIVE_COLOR)
                if s.color[0] not in _PROTECTED_REDS:
                    s.set_color(*HOVER_COLOR)
            if s.selected:
                for r in s.relatives:
                    r.set_color(*SELECTED_RELATIVE_COLOR)
                s.set_color(*SELECTED_COLOR)
            index = s.value + 9 if s.is_red_texture() else s.value
            s.texture = self.square_textures[index]

    def set_all_square_color(self, r: int, g: int, b: int, a: int) -> None:
        for s in self.squares:
            s.set_color(r, g, b, a)

    def set_selected_square_value(self, key: str | int) -> None:
        """Write a digit 1-9 into the selected square, or clear it on backspace."""
        if isinstance(key, int):
            if not 0 <= key < 0x110000:
                return
            key = chr(key)
        if key == "\b" or (len(key) == 1 and "1" <= key <= "9"):
            value = 0 if key == "\b" else int(key)
            for s in self.squares:
                if s.selected:
                    s.write_pen(value)