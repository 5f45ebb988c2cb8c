import pytest

from sudoku_game.entity import Entity
from sudoku_game.mouse import Mouse
from sudoku_game.vector import Vector2f


def test_pos_reads_source():
    mouse = Mouse(lambda: (10, 20))
    assert mouse.pos() == Vector2f(10, 20)


def test_pos_is_read_each_time():
    points = iter([(1, 1), (2, 3)])
    mouse = Mouse(lambda: next(points))
    assert mouse.pos() == Vector2f(1, 1)
    assert mouse.pos() == Vector2f(2, 3)


@pytest.mark.parametrize(
    "point, inside",
    [
        ((10, 10), True),
        ((30, 30), True),
        ((20, 15), True),
        ((31, 30), False),
        ((9, 20), False),
        ((20, 31), False),
    ],
)
def test_is_inside_includes_edges(point, inside):
    entity = Entity(Vector2f(10, 10), 20, 20)
    mouse = Mouse(lambda: point)
    assert mouse.is_inside(entity) is inside