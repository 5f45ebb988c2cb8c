"""Entry point: open the window and run the game loop."""

from __future__ import annotations

import argparse
import contextlib
from collections.abc import Sequence

import pygame

from .board import DEFAULT_PROBLEM_PATH, Board
from .entity import Entity
from .mouse import Mouse
from .render_window import RenderWindow
from .vector import Vector2f

BOARD_START_Y = 120
DEFAULT_TITLE = "SUDOKU X VALORANT"
DEFAULT_WIDTH = 540
DEFAULT_HEIGHT = 810
BACKGROUND_IMAGE = "res/images/yuki.jpg"
RESTART_IMAGE = "res/images/restart.png"
TEXTURE_LIST = "res/dev/texture_list.txt"
LEFT_BUTTON = 1


def square_size(width: int, height: int) -> int:
    """Cell size that fits the board in a window of this size."""
    return min(width // 12, height // 18)


def board_start(width: int, height: int) -> Vector2f:
    """Top-left corner of a horizontally centred board."""
    return Vector2f((width - 9 * square_size(width, height)) * 0.5, BOARD_START_Y)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sudoku", description="Play sudoku.")
    parser.add_argument("--title", default=DEFAULT_TITLE)
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--problems", default=DEFAULT_PROBLEM_PATH)
    parser.add_argument("--textures", default=TEXTURE_LIST)
    parser.add_argument("--background", default=BACKGROUND_IMAGE)
    parser.add_argument("--restart-image", default=RESTART_IMAGE)
    return parser.parse_args(argv)


def _set_cursor(cursor: int) -> None:
    with contextlib.suppress(pygame.error):
        pygame.mouse.set_system_cursor(cursor)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game until the window is closed."""
    args = _parse_args(argv)
    pygame.init()
    window = RenderWindow(args.title, args.width, args.height)
    background = Entity(
        Vector2f(0, 0), window.width, window.height, window.load_texture(args.background)
    )
    restart_button = Entity(Vector2f(25, 25), 30, 30, window.load_texture(args.restart_image))
    board = Board(
        board_start(window.width, window.height),
        window.load_textures(args.textures),
        args.problems,
    )
    mouse = Mouse()
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                window.update_size()
                background.width = window.width
                background.height = window.height
                board.resize(
                    board_start(window.width, window.height),
                    square_size(window.width, window.height),
                )
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
                if mouse.is_inside(restart_button):
                    board.restart()
                board.update_selected(mouse)
            elif event.type == pygame.KEYDOWN:
                board.set_selected_square_value(event.key)

        if mouse.is_inside(restart_button):
            _set_cursor(pygame.SYSTEM_CURSOR_HAND)
        else:
            _set_cursor(pygame.SYSTEM_CURSOR_ARROW)

        window.clear_screen()
        window.render_entity(background)
        window.render_entity(restart_button)
        board.set_all_square_color(255, 255, 255, 255)
        board.update(mouse)
        window.render_board(board)
        window.display()
        clock.tick(window.refresh_rate())

    window.clean()
    pygame.quit()
    return 0