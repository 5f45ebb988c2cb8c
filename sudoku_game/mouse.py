"""Mouse pointer position and hit testing."""

from __future__ import annotations

from collections.abc import Callable

from .entity import Entity
from .vector import Vector2f

PositionSource = Callable[[], "tuple[int, int]"]


def _pygame_position() -> tuple[int, int]:
    import pygame

    return pygame.mouse.get_pos()


class Mouse:
    """Reads the pointer position from a source each time it is asked."""

    def __init__(self, position_source: PositionSource | None = None) -> None:
        self._source = position_source or _pygame_position

    def pos(self) -> Vector2f:
        """Return the current pointer position."""
        x, y = self._source()
        return Vector2f(x, y)

    def is_inside(self, entity: Entity) -> bool:
        """True when the pointer lies within the entity, edges included."""
        p = self.pos()
        e = entity.position
        return (
            e.x <= p.x <= e.x + entity.width
            and e.y <= p.y <= e.y + entity.height
        )