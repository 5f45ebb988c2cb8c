"""A single cell of the sudoku grid."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .entity import Entity
from .vector import Vector2f

DEFAULT_SIZE = 40.0
WHITE = (255, 255, 255, 255)


class Square(Entity):
    """A sudoku cell holding a value, its correct answer and display state."""

    def __init__(
        self,
        position: Vector2f | None = None,
        row: int = 0,
        column: int = 0,
        value: int = 0,
        correct_value: int = 0,
        texture: Any = None,
    ) -> None:
        super().__init__(
            position if position is not None else Vector2f(),
            DEFAULT_SIZE,
            DEFAULT_SIZE,
            texture,
        )
        self.row = row
        self.column = column
        self.value = value
        self.correct_value = correct_value
        self.selected = False
        self.color: tuple[int, int, int, int] = WHITE
        self.pencil = [False] * 9
        self.relatives: list[Square] = []

    def __repr__(self) -> str:
        return (
            f"Square(row={self.row}, column={self.column}, value={self.value}, "
            f"correct_value={self.correct_value})"
        )

    @property
    def group_row(self) -> int:
        return self.row // 3

    @property
    def group_column(self) -> int:
        return self.column // 3

    def generate_relatives(self, squares: Iterable[Square]) -> None:
        """Link this square to its row, column and box peers and to equal values."""
        squares = list(squares)
        for other in squares:
            if other.row == self.row and other.column == self.column:
                continue
            if other.row == self.row or other.column == self.column:
                self.relatives.append(other)
            elif (
                other.group_row == self.group_row
                and other.group_column == self.group_column
            ):
                self.relatives.append(other)
        if self.value != 0:
            self.relatives.extend(s for s in squares if s.value == self.value)

    def update_answer(self, value: int, correct_value: int) -> None:
        self.value = value
        self.correct_value = correct_value

    def is_answer_false(self) -> bool:
        """True when a value is filled in and differs from the answer."""
        return self.value != 0 and self.value != self.correct_value

    def is_red_texture(self) -> bool:
        """True when the value is wrong or clashes with a wrong related value."""
        relative_false = any(
            r.is_answer_false() and r.value == self.value for r in self.relatives
        )
        return self.value != 0 and (self.is_answer_false() or relative_false)

    def select(self) -> None:
        self.selected = True

    def deselect(self) -> None:
        self.selected = False

    def set_size(self, size: float) -> None:
        self.width = size
        self.height = size

    def set_color(self, r: int, g: int, b: int, a: int) -> None:
        self.color = (r, g, b, a)

    def write_pen(self, value: int) -> None:
        """Write a definite value, clearing any pencil marks."""
        self.pencil = [False] * 9
        self.value = value