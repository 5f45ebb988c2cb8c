import pytest

from sudoku_game.board import Board, format_solution, load_problem
from sudoku_game.mouse import Mouse
from sudoku_game.vector import Vector2f

TEXTURES = [f"t{i}" for i in range(19)]


class FixedRng:
    def __init__(self, number):
        self.number = number

    def randint(self, a, b):
        return self.number


def _solution(shift=0):
    return "".join(
        str((r * 3 + r // 3 + c + shift) % 9 + 1) for r in range(9) for c in range(9)
    )


def _puzzle(solution):
    return "".join(ch if i % 2 else "0" for i, ch in enumerate(solution))


def _write_csv(tmp_path, solutions):
    path = tmp_path / "sudoku.csv"
    path.write_text(
        "".join(f"{_puzzle(s)},{s}\n" for s in solutions), encoding="utf-8"
    )
    return path


@pytest.fixture
def board(tmp_path):
    path = _write_csv(tmp_path, [_solution(), _solution(4)])
    return Board(Vector2f(0, 0), TEXTURES, path, FixedRng(1))


def _at(r, c, size=40, start=Vector2f(0, 0)):
    point = (start.x + c * size + size / 2, start.y + r * size + size / 2)
    return Mouse(lambda: point)


def test_load_problem_picks_line_chosen_by_rng(tmp_path):
    path = _write_csv(tmp_path, [_solution(), _solution(4)])
    second = _solution(4)
    assert load_problem(path, FixedRng(2)) == (_puzzle(second), second)


def test_load_problem_too_few_lines(tmp_path):
    path = _write_csv(tmp_path, [_solution()])
    with pytest.raises(ValueError):
        load_problem(path, FixedRng(5))


def test_load_problem_malformed_line(tmp_path):
    path = tmp_path / "sudoku.csv"
    path.write_text("quizzes,solutions\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_problem(path, FixedRng(1))


def test_format_solution_layout():
    sol = _solution()
    out = format_solution(sol)
    assert "".join(ch for ch in out if ch.isdigit()) == sol
    assert out.split("\n")[0] == f"{sol[0:3]} {sol[3:6]} {sol[6:9]} "
    assert out.endswith("=================================\n")


def test_construction(board, tmp_path, capsys):
    sol = _solution()
    puzzle = _puzzle(sol)
    assert len(board.squares) == 81
    for i, s in enumerate(board.squares):
        assert (s.row, s.column) == divmod(i, 9)
        assert s.value == int(puzzle[i])
        assert s.correct_value == int(sol[i])
        assert s.texture == TEXTURES[s.value]
        assert s.position == Vector2f(s.column * 40, s.row * 40)
        assert len(s.relatives) >= 20
    path = _write_csv(tmp_path, [sol])
    Board(Vector2f(0, 0), TEXTURES, path, FixedRng(1))
    assert capsys.readouterr().out == format_solution(sol)


def test_resize(board):
    board.resize(Vector2f(10, 120), 25)
    assert board.start_point == Vector2f(10, 120)
    assert board.square_size == 25
    for s in board.squares:
        assert (s.width, s.height) == (25, 25)
        assert s.position == Vector2f(10 + s.column * 25, 120 + s.row * 25)


def test_restart_loads_new_problem(board):
    board.rng = FixedRng(2)
    board.restart()
    sol = _solution(4)
    puzzle = _puzzle(sol)
    assert [s.value for s in board.squares] == [int(ch) for ch in puzzle]
    assert [s.correct_value for s in board.squares] == [int(ch) for ch in sol]
    assert all(s.texture == TEXTURES[s.value] for s in board.squares)


def test_update_selected(board):
    board.update_selected(_at(2, 5))
    selected = [s for s in board.squares if s.selected]
    assert [(s.row, s.column) for s in selected] == [(2, 5)]
    board.update_selected(_at(3, 3))
    assert [(s.row, s.column) for s in board.squares if s.selected] == [(3, 3)]
    board.update_selected(Mouse(lambda: (1000, 1000)))
    assert not any(s.selected for s in board.squares)


def test_set_selected_square_value(board):
    board.update_selected(_at(0, 0))
    target = board.squares[0]
    board.set_selected_square_value("5")
    assert target.value == 5
    board.set_selected_square_value("a")
    assert target.value == 5
    board.set_selected_square_value("\b")
    assert target.value == 0
    board.set_selected_square_value(ord("7"))
    assert target.value == 7
    assert all(s.value == int(ch) for s, ch in zip(board.squares[1:], _puzzle(_solution())[1:]))


def test_update_hover_colours(board):
    board.set_all_square_color(255, 255, 255, 255)
    board.update(_at(4, 4))
    target = board.squares[40]
    assert target.color == (165, 165, 165, 255)
    for r in target.relatives:
        if r is not target:
            assert r.color == (200, 200, 200, 255)


def test_update_selected_colours(board):
    board.update_selected(_at(4, 4))
    board.set_all_square_color(255, 255, 255, 255)
    board.update(Mouse(lambda: (1000, 1000)))
    target = board.squares[40]
    assert target.color == (120, 163, 214, 255)
    peers = [r for r in target.relatives if r is not target]
    assert all(r.color == (150, 198, 249, 255) for r in peers)


def test_update_picks_wrong_texture_for_wrong_answer(board):
    target = board.squares[0]
    wrong = 1 if target.correct_value != 1 else 2
    board.update_selected(_at(0, 0))
    board.set_selected_square_value(str(wrong))
    board.update(Mouse(lambda: (1000, 1000)))
    assert target.texture == TEXTURES[wrong + 9]
    board.set_selected_square_value(str(target.correct_value))
    board.update(Mouse(lambda: (1000, 1000)))
    assert target.texture == TEXTURES[target.correct_value]