import random
from itertools import zip_longest

import pytest

from gomoku.ai import AI
from gomoku.board import Board, ChessKind, ChessPos


def make_board(size=15):
    return Board(size, 20, 20, 40)


def place(board, jy, jl):
    for a, b in zip_longest(jy, jl):
        if a is not None:
            board.chess_down(ChessPos(*a), ChessKind.JY)
        if b is not None:
            board.chess_down(ChessPos(*b), ChessKind.JL)


def test_empty_board_scores_are_uniform():
    board = make_board()
    ai = AI(board, ChessKind.JL, random.Random(1))
    scores = ai.calculate_score()
    values = {v for line in scores for v in line}
    assert len(values) == 1
    assert len(scores) == board.grade_size


def test_occupied_cells_score_zero():
    board = make_board()
    place(board, [(7, 7)], [(3, 3)])
    scores = AI(board, ChessKind.JL, random.Random(1)).calculate_score()
    assert scores[7][7] == 0
    assert scores[3][3] == 0
    assert scores[7][8] > 0


def test_seeded_choice_is_deterministic():
    a = AI(make_board(), ChessKind.JL, random.Random(5)).think()
    b = AI(make_board(), ChessKind.JL, random.Random(5)).think()
    assert a == b


def test_blocks_open_four():
    board = make_board()
    place(board, [(7, c) for c in range(3, 7)], [(0, 0), (0, 14), (14, 0), (14, 14)])
    pos = AI(board, ChessKind.JL, random.Random(0)).think()
    assert pos in {ChessPos(7, 2), ChessPos(7, 7)}


def test_never_picks_occupied_point():
    board = make_board()
    ai = AI(board, ChessKind.JL, random.Random(3))
    for seed in range(6):
        board.chess_down(ChessPos(seed, seed), ChessKind.JY)
        pos = ai.go()
        assert board.get(pos.row, pos.col) == ChessKind.JL


def test_go_places_stone():
    board = make_board()
    board.chess_down(ChessPos(7, 7), ChessKind.JY)
    pos = AI(board, ChessKind.JL, random.Random(2)).go()
    assert board.get(pos.row, pos.col) == ChessKind.JL
    assert board.last_pos == pos


def test_full_board_raises():
    board = make_board(3)
    for r in range(3):
        for c in range(3):
            board.chess_down(ChessPos(r, c), ChessKind.JY)
    with pytest.raises(RuntimeError):
        AI(board, ChessKind.JL, random.Random(0)).think()