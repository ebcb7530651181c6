import io
import random
from itertools import zip_longest

from gomoku.ai import AI
from gomoku.board import Board, ChessKind, ChessPos
from gomoku.game import Game, main
from gomoku.player import HumanPlayer


def make_game(clicks, seed=0):
    board = Board(15, 20, 20, 40)
    human = HumanPlayer(board, ChessKind.JY, clicks)
    ai = AI(board, ChessKind.JL, random.Random(seed))
    return Game(human, ai, board), board


def cells(board):
    return [board.get(r, c) for r in range(board.grade_size) for c in range(board.grade_size)]


def test_turn_places_one_stone_each():
    game, board = make_game([(140, 100)])
    assert game.turn() is None
    values = cells(board)
    assert board.get(2, 3) == ChessKind.JY
    assert values.count(ChessKind.JY) == 1
    assert values.count(ChessKind.JL) == 1


def test_turn_reports_human_win_and_resets():
    game, board = make_game([(20 + 7 * 40, 20 + 7 * 40)])
    jy = [(7, c) for c in range(3, 7)]
    jl = [(0, 0), (0, 14), (14, 0), (14, 14)]
    for a, b in zip_longest(jy, jl):
        board.chess_down(ChessPos(*a), ChessKind.JY)
        board.chess_down(ChessPos(*b), ChessKind.JL)
    assert game.turn() == ChessKind.JY
    assert set(cells(board)) == {0}


def test_play_stops_when_clicks_run_out():
    game, board = make_game([])
    board.chess_down(ChessPos(1, 1), ChessKind.JY)
    assert game.play(max_games=2) == []
    assert set(cells(board)) == {0}


def test_main_plays_a_move(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7 7\n"))
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "X" in out
    assert "O" in out


def test_main_rejects_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "invalid move" in out
    assert "X" not in out