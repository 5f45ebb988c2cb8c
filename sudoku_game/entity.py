"""A textured rectangle placed on the screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .vector import Vector2f

FULL_FRAME = (0, 0, 1200, 1200)


@dataclass(eq=False)
class Entity:
    """An object with a position, a size and a texture."""

    position: Vector2f = field(default_factory=Vector2f)
    width: float = 0.0
    height: float = 0.0
    texture: Any = None
    current_frame: tuple[int, int, int, int] = field(default=FULL_FRAME, init=False)

    def __post_init__(self) -> None:
        self.position = Vector2f(self.position.x, self.position.y)

    def set_position(self, x: float, y: float) -> None:
        """Move the entity to a new position."""
        self.position.x = x
        self.position.y = y