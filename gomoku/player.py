"""Human player driven by a stream of left-button clicks."""

from __future__ import annotations

from .board import ChessKind


class HumanPlayer:
    """Takes pixel clicks until one lands on a free intersection."""

    def __init__(self, board, kind=ChessKind.JY, clicks=()):
        self.board = board
        self.kind = kind
        self._clicks = iter(clicks)

    def go(self):
        """Place a stone at the next valid click; EOFError when clicks run out."""
        for x, y in self._clicks:
            pos = self.board.click_board(x, y)
            if pos is not None:
                self.board.chess_down(pos, self.kind)
                return pos
        raise EOFError("no more clicks")