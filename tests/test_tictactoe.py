import io
import random

import pytest

from dsworkbench.tictactoe import COMPUTER, EMPTY, PLAYER, Board, Outcome, main


def _fill(board, moves, mark):
    for row, col in moves:
        board.place(row, col, mark)


def test_new_board_state():
    board = Board()
    assert not board.is_full()
    assert board.outcome() is Outcome.CONTINUE
    assert board[1, 1] == EMPTY


def test_render_empty_board():
    lines = Board().render().splitlines()
    assert lines[0] == "   |   |   "
    assert lines[1] == "---|---|---"
    assert len(lines) == 5


def test_render_shows_marks():
    board = Board()
    board.place(1, 1, PLAYER)
    board.place(3, 3, COMPUTER)
    lines = board.render().splitlines()
    assert lines[0].startswith(" * ")
    assert lines[4].endswith(" # ")


def test_place_off_board_raises():
    with pytest.raises(ValueError):
        Board().place(0, 1, PLAYER)
    with pytest.raises(ValueError):
        Board().place(1, 4, PLAYER)


def test_place_taken_square_raises():
    board = Board()
    board.place(2, 2, PLAYER)
    with pytest.raises(ValueError):
        board.place(2, 2, COMPUTER)


def test_row_win():
    board = Board()
    _fill(board, [(2, 1), (2, 2), (2, 3)], PLAYER)
    assert board.outcome() is Outcome.PLAYER_WINS


def test_column_win():
    board = Board()
    _fill(board, [(1, 3), (2, 3), (3, 3)], COMPUTER)
    assert board.outcome() is Outcome.COMPUTER_WINS


@pytest.mark.parametrize(
    "moves", [[(1, 1), (2, 2), (3, 3)], [(1, 3), (2, 2), (3, 1)]]
)
def test_diagonal_wins(moves):
    board = Board()
    _fill(board, moves, PLAYER)
    assert board.outcome() is Outcome.PLAYER_WINS


def test_draw():
    board = Board()
    _fill(board, [(1, 1), (1, 2), (2, 3), (3, 1), (3, 3)], PLAYER)
    _fill(board, [(1, 3), (2, 1), (2, 2), (3, 2)], COMPUTER)
    assert board.is_full()
    assert board.outcome() is Outcome.DRAW


def test_outcome_values_match_marks():
    player_board = Board()
    _fill(player_board, [(1, 1), (1, 2), (1, 3)], PLAYER)
    assert player_board.outcome().value == PLAYER

    computer_board = Board()
    _fill(computer_board, [(3, 1), (3, 2), (3, 3)], COMPUTER)
    assert computer_board.outcome().value == COMPUTER

    draw_board = Board()
    _fill(draw_board, [(1, 1), (1, 2), (2, 3), (3, 1), (3, 3)], PLAYER)
    _fill(draw_board, [(1, 3), (2, 1), (2, 2), (3, 2)], COMPUTER)
    assert draw_board.outcome().value == "Q"


def test_computer_move_takes_empty_square():
    board = Board()
    board.place(1, 1, PLAYER)
    row, col = board.computer_move(random.Random(0))
    assert board[row, col] == COMPUTER
    assert (row, col) != (1, 1)


def test_computer_fills_board():
    board = Board()
    rng = random.Random(1)
    squares = {board.computer_move(rng) for _ in range(9)}
    assert len(squares) == 9
    assert board.is_full()
    with pytest.raises(ValueError):
        board.computer_move(rng)


def test_main_exit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert "退出游戏" in capsys.readouterr().out


def test_main_plays_a_game(monkeypatch, capsys):
    moves = "".join(f"{r} {c}\n" for r in range(1, 4) for c in range(1, 4))
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n" + moves + "0\n"))
    assert main(["--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert any(result in out for result in ("玩家赢", "电脑赢", "平局"))