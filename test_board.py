"""
Tests for the board, win checker and move validator.
"""

import itertools

import pytest

from tictactoe.board import Board, Cell, Move
from tictactoe.move_validator import MoveValidator
from tictactoe.win_checker import WinChecker


def _reference_is_win(cells, symbol):
    """Straightforward 3-in-a-row check on a flat tuple of 9 cells."""
    rows = [cells[0:3], cells[3:6], cells[6:9]]
    cols = [cells[0::3], cells[1::3], cells[2::3]]
    diags = [(cells[0], cells[4], cells[8]), (cells[2], cells[4], cells[6])]
    return any(all(c == symbol for c in line) for line in rows + cols + diags)


def _boards_with_valid_counts():
    for cells in itertools.product((Cell.EMPTY, Cell.X, Cell.O), repeat=9):
        diff = cells.count(Cell.X) - cells.count(Cell.O)
        if diff in (0, 1):
            yield cells


def test_is_win_matches_reference_for_every_board():
    checker = WinChecker()
    checked = 0
    for cells in _boards_with_valid_counts():
        board = Board([cells[0:3], cells[3:6], cells[6:9]])
        for symbol in (Cell.X, Cell.O):
            assert checker.is_win(board, symbol) == _reference_is_win(cells, symbol), board
        checked += 1
    # 3^9 grids filtered down to X count - O count in {0, 1}
    assert checked == 6046


def test_is_win_each_line():
    checker = WinChecker()
    for line in WinChecker.WINNING_LINES:
        board = Board()
        for row, col in line:
            board.place(row, col, Cell.O)
        assert checker.is_win(board, Cell.O)
        assert not checker.is_win(board, Cell.X)
        assert checker.get_winning_line(board) == line


def test_is_win_never_true_for_empty():
    checker = WinChecker()
    assert not checker.is_win(Board(), Cell.EMPTY)
    assert not checker.is_win(Board(), Cell.X)


def test_is_full_and_draw():
    checker = WinChecker()
    draw = Board.from_rows(["XOX", "XOO", "OXX"])
    assert checker.is_full(draw)
    assert checker.check_draw(draw)
    assert checker.check_winner(draw) is None

    won_full = Board.from_rows(["XXX", "OOX", "XOO"])
    assert checker.is_full(won_full)
    assert not checker.check_draw(won_full)
    assert checker.check_winner(won_full) == Cell.X

    assert not checker.is_full(Board.from_rows(["XOX", "XOO", "OX "]))


def test_place_sets_cell():
    board = Board()
    assert board.place(2, 1, Cell.X)
    assert board[2, 1] == Cell.X
    assert board.count(Cell.X) == 1


@pytest.mark.parametrize("row,col", [(0, 0), (1, 1), (3, 0), (0, 3), (-1, 0), (0, -1), (9, 9)])
def test_place_failure_leaves_board_untouched(row, col):
    board = Board.from_rows(["X  ", " O ", "   "])
    before = board.to_bytes()
    assert not board.place(row, col, Cell.X)
    assert board.to_bytes() == before
    # Failing twice changes nothing either
    assert not board.place(row, col, Cell.O)
    assert board.to_bytes() == before


def test_undo_restores_cell():
    board = Board()
    before = board.to_bytes()
    board.place(0, 2, Cell.O)
    board.undo(0, 2)
    assert board.to_bytes() == before


def test_get_empty_cells_row_major():
    board = Board.from_rows(["X O", "   ", "OX "])
    assert board.get_empty_cells() == [
        Move(0, 1), Move(1, 0), Move(1, 1), Move(1, 2), Move(2, 2)
    ]
    assert Board().get_empty_cells() == [(r, c) for r in range(3) for c in range(3)]
    assert Board.from_rows(["XOX", "XOO", "OXX"]).get_empty_cells() == []


def test_move_validator():
    validator = MoveValidator()
    board = Board.from_rows(["X  ", "   ", "   "])

    assert validator.is_legal(board, 1, 1)
    assert not validator.is_legal(board, 0, 0)
    assert not validator.is_legal(board, 3, 1)

    ok = validator.validate_move(board, 2, 2)
    assert ok.is_valid and ok.error_message is None

    occupied = validator.validate_move(board, 0, 0)
    assert not occupied.is_valid
    assert "occupied" in occupied.error_message

    off_board = validator.validate_move(board, 5, 5)
    assert not off_board.is_valid
    assert "Invalid position" in off_board.error_message

    assert validator.get_valid_moves(board) == board.get_empty_cells()


def test_from_rows_and_render():
    board = Board.from_rows(["X_O", ".X.", "  O"])
    assert board[0, 0] == Cell.X
    assert board[0, 1] == Cell.EMPTY
    assert board[2, 2] == Cell.O
    assert board.render() == "\n".join([
        "  0 1 2",
        "0 X| |O",
        "  -+-+-",
        "1  |X| ",
        "  -+-+-",
        "2  | |O",
    ])


def test_copy_is_independent():
    board = Board.from_rows(["X  ", "   ", "   "])
    clone = board.copy()
    assert clone == board
    clone.place(1, 1, Cell.O)
    assert clone != board
    assert board[1, 1] == Cell.EMPTY


def test_cell_helpers():
    assert Cell.X.opposite() == Cell.O
    assert Cell.O.opposite() == Cell.X
    with pytest.raises(ValueError):
        Cell.EMPTY.opposite()
    with pytest.raises(ValueError):
        Cell.from_symbol("Z")
    assert Cell.from_symbol("o") == Cell.O


def test_bad_shape_rejected():
    with pytest.raises(ValueError):
        Board([[0, 0], [0, 0]])
