"""Turn loop between a human and the computer, plus a console front end."""

from __future__ import annotations

import argparse
import random
import sys

from .ai import AI
from .board import Board, ChessKind
from .player import HumanPlayer

_MARGIN = 20
_CELL = 40
_SYMBOLS = {0: ".", int(ChessKind.JY): "X", int(ChessKind.JL): "O"}


class Game:
    """Alternates human and AI moves, restarting the board after each win."""

    def __init__(self, human, ai, board):
        self.human = human
        self.ai = ai
        self.board = board

    def _finish(self):
        winner = self.board.check_over()
        if winner is not None:
            self.board.reset()
        return winner

    def turn(self):
        """Play one human move and one AI move; return the winner, if any."""
        self.human.go()
        winner = self._finish()
        if winner is not None:
            return winner
        self.ai.go()
        return self._finish()

    def play(self, max_games=None):
        """Play until ``max_games`` are won or the human runs out of moves."""
        self.board.reset()
        winners = []
        while max_games is None or len(winners) < max_games:
            try:
                winner = self.turn()
            except EOFError:
                break
            if winner is not None:
                winners.append(winner)
        return winners


def _render(board):
    size = board.grade_size
    header = "    " + " ".join(f"{c:2d}" for c in range(size))
    lines = [header]
    for r in range(size):
        cells = " ".join(f"{_SYMBOLS[board.get(r, c)]:>2}" for c in range(size))
        lines.append(f"{r:2d}  {cells}")
    return "\n".join(lines)


def _console_clicks(board, stream, out):
    while True:
        out.write(_render(board) + "\n")
        out.write("Your move (row col): ")
        out.flush()
        line = stream.readline()
        if not line:
            out.write("\n")
            return
        try:
            row, col = map(int, line.split())
        except ValueError:
            out.write(f"invalid move: {line.strip()!r}\n")
            continue
        yield board.margin_x + col * board.chess_size, board.margin_y + row * board.chess_size


def main(argv=None):
    parser = argparse.ArgumentParser(prog="gomoku", description="Play five-in-a-row against the computer.")
    parser.add_argument("--size", type=int, default=15, help="number of board lines")
    parser.add_argument("--side", choices=("jy", "jl"), default="jy", help="piece set for the human")
    parser.add_argument("--seed", type=int, default=None, help="random seed for the computer")
    parser.add_argument("--games", type=int, default=None, help="stop after this many games")
    args = parser.parse_args(argv)
    if args.size < 5:
        parser.error("--size must be at least 5")

    board = Board(args.size, _MARGIN, _MARGIN, _CELL)
    human_kind = ChessKind.JL if args.side == "jl" else ChessKind.JY
    ai_kind = ChessKind.JY if human_kind == ChessKind.JL else ChessKind.JL
    human = HumanPlayer(board, human_kind, _console_clicks(board, sys.stdin, sys.stdout))
    ai = AI(board, ai_kind, random.Random(args.seed))
    game = Game(human, ai, board)

    board.reset()
    played = 0
    while args.games is None or played < args.games:
        try:
            winner = game.turn()
        except EOFError:
            break
        if winner is not None:
            played += 1
            side = "you" if winner == ChessKind.JY else "computer"
            print(f"game over: {side} won")
    return 0


if __name__ == "__main__":
    sys.exit(main())