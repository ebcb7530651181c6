"""Heuristic computer opponent that scores every empty intersection."""

from __future__ import annotations

import random

from .board import DIRECTIONS, ChessKind, ChessPos


def _person_score(count, empty):
    if count == 1:
        return 10
    if count == 2:
        return {1: 30, 2: 40}.get(empty, 0)
    if count == 3:
        return {1: 60, 2: 200}.get(empty, 0)
    if count == 4:
        return 20000
    return 0


def _ai_score(count, empty):
    if count == 0:
        return 5
    if count == 1:
        return 10
    if count == 2:
        return {1: 25, 2: 50}.get(empty, 0)
    if count == 3:
        return {1: 55, 2: 10000}.get(empty, 0)
    return 30000


class AI:
    """Picks the highest-scoring empty point, breaking ties at random."""

    def __init__(self, board, kind=ChessKind.JL, rng=None):
        self.board = board
        self.kind = kind
        self.rng = rng if rng is not None else random.Random()
        size = board.grade_size
        self.score_map = [[0] * size for _ in range(size)]

    def _cells(self, row, col, dy, dx, sign):
        size = self.board.grade_size
        for i in range(1, 5):
            r, c = row + sign * i * dy, col + sign * i * dx
            if not (0 <= r < size and 0 <= c < size):
                return
            yield self.board.get(r, c)

    def _scan_person(self, row, col, dy, dx):
        count = empty = 0
        for sign in (1, -1):
            for value in self._cells(row, col, dy, dx, sign):
                if value == ChessKind.JY:
                    count += 1
                elif value == 0:
                    empty += 1
                else:
                    break
        return count, empty

    def _scan_ai(self, row, col, dy, dx):
        count = empty = 0
        # The backward pass counts JY stones, the forward pass JL stones.
        for sign, target in ((1, ChessKind.JL), (-1, ChessKind.JY)):
            for value in self._cells(row, col, dy, dx, sign):
                if value == target:
                    count += 1
                else:
                    if value == 0:
                        empty += 1
                    break
        return count, empty

    def calculate_score(self):
        """Recompute and return the score of every intersection."""
        size = self.board.grade_size
        scores = [[0] * size for _ in range(size)]
        for row in range(size):
            for col in range(size):
                if self.board.get(row, col):
                    continue
                total = 0
                for dy, dx in DIRECTIONS:
                    total += _person_score(*self._scan_person(row, col, dy, dx))
                    total += _ai_score(*self._scan_ai(row, col, dy, dx))
                scores[row][col] = total
        self.score_map = scores
        return scores

    def think(self):
        """Choose the next move; raises RuntimeError if no point is free."""
        scores = self.calculate_score()
        size = self.board.grade_size
        best = 0
        points: list[ChessPos] = []
        for row in range(size):
            for col in range(size):
                if self.board.get(row, col):
                    continue
                score = scores[row][col]
                if score > best:
                    best = score
                    points = [ChessPos(row, col)]
                elif score == best:
                    points.append(ChessPos(row, col))
        if not points:
            raise RuntimeError("no free intersection left")
        return self.rng.choice(points)

    def go(self):
        """Think and place a stone; returns the chosen position."""
        pos = self.think()
        self.board.chess_down(pos, self.kind)
        return pos