# gomoku

This package plays five-in-a-row against a computer opponent on a square grid.

Stones are placed on grid intersections. A side wins when the stone it has just placed
completes an unbroken line of five. The line can run along a row, along a column or
along either diagonal. When a game is won, the board is cleared and the next game
begins. The side that moves first always places stones stored as `ChessKind.JY`
(value `1`). The other side places stones stored as `ChessKind.JL` (value `-1`).

## Installation

```
pip install .
```

## Playing in the terminal

```
gomoku [--size N] [--side {jy,jl}] [--seed S] [--games G]
```

- `--size`: the number of lines on the board. The default is 15 and the minimum is 5.
- `--side`: the piece set the human is given. The default is `jy`.
- `--seed`: the random seed the computer uses to break ties between equally scored points.
- `--games`: stop after this many games have been won. Without it, play continues until
  the input ends.

Before each move the board is printed. `X` marks the first mover's stones, `.` marks
an empty point and `O` marks the computer's stones. To move, enter the row and the
column, separated by a space. Input that is not two integers is reported and asked for
again. A point that is already taken is ignored. When a game ends, the program prints
`game over: you won` or `game over: computer won`. End the input (Ctrl-D) to quit.

## Using the library

```python
import random

from gomoku.board import Board, ChessKind
from gomoku.ai import AI
from gomoku.player import HumanPlayer
from gomoku.game import Game

board = Board(13, 44, 43, 67.3)   # lines, left margin, top margin, cell size in pixels
ai = AI(board, ChessKind.JL, random.Random(0))
human = HumanPlayer(board, ChessKind.JY, [(44, 43), (111, 43)])
game = Game(human, ai, board)
winners = game.play(max_games=1)
```

### `gomoku.board`

- `ChessPos(row, col)` is a frozen dataclass that names one intersection.
- `ChessKind` is an `IntEnum` with the members `JY = 1` and `JL = -1`.
- `dist(x, y)` returns the Euclidean length of the offset `(x, y)`.
- `Board(grade_size, margin_x, margin_y, chess_size)` holds the stones and the pixel
  geometry of the board.
  - `click_board(x, y)` snaps a pixel position to the nearest free intersection. The
    position must lie within 40% of a cell of that intersection. The method returns a
    `ChessPos`, or `None` if no free intersection is close enough.
  - `chess_down(pos, kind)` places the stone of the side to move at `pos` and passes
    the turn to the other side. It returns the top-left pixel at which the piece would
    be drawn. `kind` only names the piece set; the colour that is stored follows the
    turn order.
  - `get(row, col)` returns `0` for an empty point, `1` for a `JY` stone and `-1` for
    a `JL` stone.
  - `check_win()` reports whether the last stone placed completes five in a row.
  - `check_over()` returns the winning `ChessKind`, or `None` if nobody has won yet.
  - `reset()` clears the board and gives the first move back to `JY`.
  - `jy_to_move` and `last_pos` hold the turn and the last stone placed.

### `gomoku.ai`

- `AI(board, kind=ChessKind.JL, rng=None)` is the computer opponent.
  - `calculate_score()` scores every empty intersection. The score counts the lines
    the computer would block for the `JY` stones and the lines it would build for
    itself. The method stores the grid in `score_map` and also returns it.
  - `think()` returns a highest-scoring free point, chosen at random among ties with
    `rng`. It raises `RuntimeError` when no free point is left.
  - `go()` thinks, places the stone and returns its position.

### `gomoku.player`

- `HumanPlayer(board, kind=ChessKind.JY, clicks=())` takes its moves from an iterable
  of `(x, y)` pixel clicks.
  - `go()` reads clicks until one lands on a free intersection, then places a stone
    there and returns the position. It raises `EOFError` when the clicks run out.

### `gomoku.game`

- `Game(human, ai, board)` runs the turn loop.
  - `turn()` plays one human move, then one computer move. The computer does not move
    if the human has just won. The method returns the winner, or `None`. After a win
    the board is reset.
  - `play(max_games=None)` resets the board and plays turns until `max_games` games
    have been won or the human runs out of moves. It returns the list of winners.
- `main(argv=None)` is the terminal front end described above.

## What it does not do

The package has no graphical window, board images, piece images or sound. It is played
from the text board in the terminal, or driven as a library with pixel clicks.

## Tests

```
pip install .[test]
pytest
```