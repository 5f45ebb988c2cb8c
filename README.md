# sudoku_game

A Sudoku game that you play with the mouse and keyboard, drawn with pygame.
Each round takes a puzzle at random from a CSV file of puzzles. A cell is drawn
with a red digit when its value is wrong. It is also drawn red when it has the
same value as a wrong cell that it is related to.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Playing

Start the game from the directory that holds the game's `res/` folder:

```
sudoku-game
```

Options (all optional):

| Option | Default |
| --- | --- |
| `--title` | `SUDOKU X VALORANT` |
| `--width` | `540` |
| `--height` | `810` |
| `--problems` | `res/dev/sudoku.csv` |
| `--textures` | `res/dev/texture_list.txt` |
| `--background` | `res/images/yuki.jpg` |
| `--restart-image` | `res/images/restart.png` |

The game uses these resources:

- **The problems file.** It holds one puzzle per line. A line starts with 81
  digits for the starting grid, with `0` for an empty cell. Then comes one
  separator character, then 81 digits for the solution. A line number from 1
  to 1000 is picked at random. If the file is too short for that line, or the
  line is malformed, `ValueError` is raised.
- **The texture list.** It gives image paths, one per line. Entries 0 to 9 are
  the normal digit images, and 0 is the blank cell. Entries 10 to 18 are the red
  images for digits 1 to 9. If an image cannot be loaded, an error is printed
  to standard error and that cell is drawn without an image.
- **The background image and the restart button image.**

Controls:

- Left-click a cell to select it. The selected cell is highlighted, and so are
  the cells in its row, its column and its 3×3 box. If the cell held a given
  digit when the puzzle was first loaded, the cells that held the same digit at
  that time are highlighted too.
- Moving the pointer over a cell gives it and its related cells a grey
  highlight.
- Press `1` to `9` to write that digit in the selected cell. Press Backspace to
  clear the cell.
- Click the restart button in the top-left corner to load a new puzzle.
- When the window is resized, the board is scaled to fit it.

Each time a puzzle is loaded, its solution is printed to standard output as a
9×9 grid.

## Using the pieces

The game logic does not need a display:

```python
import random
from sudoku_game.board import load_problem, format_solution

start, solution = load_problem("res/dev/sudoku.csv", random.Random(1))
print(format_solution(solution), end="")
```

- `sudoku_game.board.Board` holds the 81 `sudoku_game.square.Square` cells. It
  handles selection (`update_selected`), colouring and texture choice
  (`update`), key input (`set_selected_square_value`), layout (`resize`) and
  new puzzles (`restart`).
- `sudoku_game.mouse.Mouse` reports the pointer position and does hit tests. It
  can take any function that returns an `(x, y)` pair in place of pygame's
  mouse.
- `sudoku_game.vector.Vector2f` is a small 2-D vector.
  `sudoku_game.entity.Entity` is a textured rectangle.
- `sudoku_game.render_window.RenderWindow` draws entities, squares and the
  board in a pygame window.
- `sudoku_game.app.square_size` and `sudoku_game.app.board_start` give the
  cell size and the board's top-left corner for a given window size.

## What it does not do

- It does not generate or solve puzzles. Every puzzle and its solution come
  from the problems file.
- It does not notice when the grid is complete or solved.
- It has no pencil marks. Only definite digits can be written.
- It does not save or restore a game in progress.