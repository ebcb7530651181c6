"""Gomoku board: stone placement, click hit-testing and win detection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum


@dataclass(frozen=True)
class ChessPos:
    """A board intersection given by row and column."""

    row: int = 0
    col: int = 0


class ChessKind(IntEnum):
    """Stone colours as stored on the board."""

    JL = -1
    JY = 1


# (dy, dx) for the four line directions checked around a stone.
DIRECTIONS = ((-1, -1), (-1, 0), (-1, 1), (0, 1))


def dist(x, y):
    """Euclidean distance of the offset (x, y) from the origin."""
    return math.sqrt(x * x + y * y)


class Board:
    """A square board of ``grade_size`` lines drawn with the given pixel geometry."""

    def __init__(self, grade_size, margin_x, margin_y, chess_size):
        self.grade_size = grade_size
        self.margin_x = margin_x
        self.margin_y = margin_y
        self.chess_size = float(chess_size)
        self.jy_to_move = True
        self.last_pos: ChessPos | None = None
        # One extra row and column: a click near the far edge may snap to it.
        self._grid = [[0] * (grade_size + 1) for _ in range(grade_size + 1)]

    def _in_grid(self, row, col):
        return 0 <= row < len(self._grid) and 0 <= col < len(self._grid)

    def reset(self):
        """Clear every stone and give the first move back to JY."""
        for line in self._grid:
            line[:] = [0] * len(line)
        self.jy_to_move = True
        self.last_pos = None

    def click_board(self, x, y):
        """Snap a pixel click to a free intersection, or return None."""
        size = self.chess_size
        col = int((x - self.margin_x) / size)
        row = int((y - self.margin_y) / size)
        left_x = int(x - self.margin_x - col * size)
        right_x = int(size - left_x)
        up_y = int(y - self.margin_y - row * size)
        down_y = int(size - up_y)
        threshold = int(size * 0.4)

        candidates = (
            (left_x, up_y, row, col),
            (left_x, down_y, row + 1, col),
            (right_x, up_y, row, col + 1),
            (right_x, down_y, row + 1, col + 1),
        )
        for dx, dy, r, c in candidates:
            if dist(dx, dy) <= threshold:
                if self._in_grid(r, c) and self._grid[r][c] == 0:
                    return ChessPos(r, c)
                return None
        return None

    def chess_down(self, pos, kind):
        """Place the stone of the side to move at ``pos``.

        ``kind`` selects the piece image only; the stored colour follows the
        turn order. Returns the top-left pixel at which the piece is drawn.
        """
        x = int(self.margin_x + self.chess_size * pos.col - 0.5 * self.chess_size)
        y = int(self.margin_y + self.chess_size * pos.row - 0.5 * self.chess_size)
        self._grid[pos.row][pos.col] = ChessKind.JY if self.jy_to_move else ChessKind.JL
        self.jy_to_move = not self.jy_to_move
        self.last_pos = ChessPos(pos.row, pos.col)
        return x, y

    def get(self, row, col):
        """Stone value at (row, col): 0 empty, 1 JY, -1 JL."""
        return int(self._grid[row][col])

    def check_win(self):
        """True if the last stone placed completes five in a row."""
        if self.last_pos is None:
            return False
        row, col = self.last_pos.row, self.last_pos.col
        color = self._grid[row][col]
        for dy, dx in DIRECTIONS:
            total = 0
            for sign in (1, -1):
                for i in range(1, 5):
                    r, c = row + sign * i * dy, col + sign * i * dx
                    if not self._in_grid(r, c) or self._grid[r][c] != color:
                        break
                    total += 1
            if total >= 4:
                return True
        return False

    def check_over(self):
        """Return the winning colour if the game has ended, else None."""
        if self.check_win():
            return ChessKind(self.get(self.last_pos.row, self.last_pos.col))
        return None