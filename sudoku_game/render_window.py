"""Window that draws entities, squares and the board with pygame."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pygame

from .entity import Entity
from .square import Square
from .vector import Vector2f

if TYPE_CHECKING:
    from .board import Board

BLACK = (0, 0, 0, 255)
GRID_GREY = (128, 128, 128, 255)
BACKGROUND_GREY = (230, 230, 230, 255)
FALLBACK_REFRESH_RATE = 60


def _rect(position: Vector2f, width: float, height: float) -> pygame.Rect:
    return pygame.Rect(int(position.x), int(position.y), int(width), int(height))


class RenderWindow:
    """A resizable window with a current draw colour, like a 2D renderer."""

    def __init__(self, title: str, width: int, height: int) -> None:
        pygame.display.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.title = title
        self.width = width
        self.height = height
        self._draw_color: tuple[int, int, int, int] = BLACK

    def load_texture(self, file_path: str | Path) -> Any:
        """Load an image; report the failure and return None if it cannot be read."""
        try:
            return pygame.image.load(str(file_path)).convert_alpha()
        except (pygame.error, OSError) as exc:
            print(f"[ERROR] Texture Load Failed: {exc}", file=sys.stderr)
            return None

    def load_textures(self, file_path: str | Path) -> list[Any]:
        """Load every image named, one per line, in a list file."""
        with open(file_path, encoding="utf-8") as handle:
            return [self.load_texture(line.rstrip("\r\n")) for line in handle]

    def refresh_rate(self) -> int:
        """Return the display refresh rate, or a sensible default if unknown."""
        getter = getattr(pygame.display, "get_current_refresh_rate", None)
        rate = 0
        if getter is not None:
            try:
                rate = int(getter())
            except pygame.error:
                rate = 0
        return rate if rate > 0 else FALLBACK_REFRESH_RATE

    def update_size(self) -> None:
        """Read the window size back after a resize."""
        self.screen = pygame.display.get_surface() or self.screen
        self.width, self.height = self.screen.get_size()

    def clean(self) -> None:
        """Close the window."""
        pygame.display.quit()

    def clear_screen(self) -> None:
        """Fill the window with the current draw colour."""
        self.screen.fill(self._draw_color)

    def render_box(self, position: Vector2f, width: float, height: float) -> None:
        """Draw a black rectangle outline."""
        self._draw_color = BLACK
        pygame.draw.rect(self.screen, self._draw_color, _rect(position, width, height), 1)
        self._draw_color = BACKGROUND_GREY

    def _blit_texture(self, texture: Any, frame: tuple[int, int, int, int], dest: pygame.Rect) -> None:
        if texture is None or dest.width <= 0 or dest.height <= 0:
            return
        source = pygame.Rect(frame).clip(texture.get_rect())
        if source.width <= 0 or source.height <= 0:
            return
        image = texture.subsurface(source)
        self.screen.blit(pygame.transform.scale(image, dest.size), dest.topleft)

    def render_entity(self, entity: Entity) -> None:
        """Draw an entity's texture stretched over its rectangle."""
        dest = _rect(entity.position, entity.width, entity.height)
        self._blit_texture(entity.texture, entity.current_frame, dest)

    def render_square(self, square: Square) -> None:
        """Draw a square's fill colour, grey border and texture."""
        dest = _rect(square.position, square.width, square.height)
        self.screen.fill(square.color, dest)
        pygame.draw.rect(self.screen, GRID_GREY, dest, 1)
        self._blit_texture(square.texture, square.current_frame, dest)
        self._draw_color = BACKGROUND_GREY

    def render_board(self, board: Board) -> None:
        """Draw every square, then the outlines of the nine 3x3 boxes."""
        for square in board.squares:
            self.render_square(square)
        size = board.square_size
        start = board.start_point
        for box_row in range(3):
            for box_column in range(3):
                corner = Vector2f(start.x + box_column * 3 * size, start.y + box_row * 3 * size)
                self.render_box(corner, 3 * size, 3 * size)

    def display(self) -> None:
        """Show what has been drawn."""
        pygame.display.flip()

    def show_message_box(self, message: str) -> None:
        """Show an information message to the player."""
        box = getattr(pygame.display, "message_box", None)
        if box is not None:
            box("Sudoku", message)
        else:
            print(f"Sudoku: {message}", file=sys.stderr)