import pytest

from connectfour.board import Board
from connectfour.piece import Piece
from connectfour.win_validator import WinValidator

R = Piece.RED
B = Piece.BLUE


def _board(columns):
    board = Board()
    for column, pieces in columns.items():
        for piece in pieces:
            assert board.place_piece(column, piece)
    return board


def test_empty_board_is_not_over():
    assert WinValidator(Board()).is_game_over() is False


def test_four_in_a_column_wins():
    board = _board({0: [R, R, R, R]})
    assert WinValidator(board).is_game_over() is True


def test_three_in_a_column_is_not_enough_by_default():
    board = _board({0: [R, R, R]})
    assert WinValidator(board).is_game_over() is False


def test_streak_length_is_configurable():
    board = _board({0: [R, R, R]})
    assert WinValidator(board).is_game_over(3) is True


def test_column_switching_kind_restarts_count():
    board = _board({0: [B, R, R, R]})
    assert WinValidator(board).is_game_over() is False


def test_four_in_a_row_from_left_edge_wins():
    board = _board({c: [B] for c in range(4)})
    assert WinValidator(board).is_game_over() is True


def test_row_scan_stops_at_first_empty_cell():
    board = _board({c: [B] for c in range(1, 5)})
    assert WinValidator(board).is_game_over() is False


def test_forward_diagonal_wins():
    board = _board({
        0: [R],
        1: [B, R],
        2: [B, B, R],
        3: [B, B, B, R],
    })
    assert WinValidator(board).is_game_over() is True


def test_short_forward_diagonal_does_not_win():
    board = _board({
        0: [R],
        1: [B, R],
        2: [B, B, R],
    })
    assert WinValidator(board).is_game_over() is False


def test_backward_diagonal_wins():
    board = _board({
        6: [R],
        5: [B, R],
        4: [B, B, R],
        3: [B, B, B, R],
    })
    assert WinValidator(board).is_game_over() is True


def test_full_board_is_over():
    board = Board()
    for column in range(board.width):
        for row in range(board.height):
            board.place_piece(column, R if (column // 2 + row) % 2 else B)
    assert board.is_full()
    assert WinValidator(board).is_game_over() is True


@pytest.mark.parametrize("streak_length", [2, 3, 4])
def test_result_does_not_change_board(streak_length):
    board = _board({0: [R, B], 3: [B, B, R]})
    before = board.render()
    WinValidator(board).is_game_over(streak_length)
    assert board.render() == before
    assert board.top_of_columns()[3] == len([B, B, R])