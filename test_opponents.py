"""
Tests for the Easy/Medium policies and the opponent dispatcher.
"""

import random

import pytest

from tictactoe.board import Board, Cell, Move
from tictactoe.heuristic_player import HeuristicPlayer, CORNERS
from tictactoe.opponent import Difficulty, Opponent, NoMovesAvailableError, choose_move


class FixedSource:
    """Random source that hands out a fixed list of indexes."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.requests = []

    def randrange(self, n):
        self.requests.append(n)
        value = self.draws.pop(0)
        assert 0 <= value < n
        return value


FULL_BOARD = ["XOX", "XOO", "OXX"]


def test_easy_uses_first_draw():
    source = FixedSource([4])
    move = HeuristicPlayer(Cell.O, rng=source).get_easy_move(Board())
    assert move == (1, 1)
    assert source.requests == [9]


def test_easy_with_seeded_random():
    expected_index = random.Random(1234).randrange(9)
    expected = Board().get_empty_cells()[expected_index]

    player = HeuristicPlayer(Cell.O, rng=random.Random(1234))
    assert player.get_easy_move(Board()) == expected


def test_easy_only_picks_empty_cells():
    board = Board.from_rows(["XO ", "  X", "O  "])
    player = HeuristicPlayer(Cell.O, rng=random.Random(0))
    empty = board.get_empty_cells()
    for _ in range(50):
        assert player.get_easy_move(board) in empty


def test_medium_wins_before_blocking():
    board = Board.from_rows(["XX ", "OO ", "   "])
    before = board.to_bytes()
    move = HeuristicPlayer(Cell.O, rng=FixedSource([])).get_medium_move(board)
    assert move == (1, 2)
    assert board.to_bytes() == before


def test_medium_blocks_when_it_cannot_win():
    board = Board.from_rows(["XX ", " O ", "   "])
    before = board.to_bytes()
    move = HeuristicPlayer(Cell.O, rng=FixedSource([])).get_medium_move(board)
    assert move == (0, 2)
    assert board.to_bytes() == before


def test_medium_blocks_first_threat_in_row_major_order():
    # X threatens both (0, 2) and (2, 0)
    board = Board.from_rows(["XX ", "XO ", "  O"])
    move = HeuristicPlayer(Cell.O, rng=FixedSource([])).get_medium_move(board)
    assert move == (0, 2)


def test_medium_takes_center():
    board = Board.from_rows(["X  ", "   ", "   "])
    source = FixedSource([])
    assert HeuristicPlayer(Cell.O, rng=source).get_medium_move(board) == (1, 1)
    assert source.requests == []


def test_medium_takes_random_corner():
    board = Board.from_rows(["   ", " X ", "   "])
    source = FixedSource([2])
    move = HeuristicPlayer(Cell.O, rng=source).get_medium_move(board)
    assert move == CORNERS[2] == (2, 0)
    assert source.requests == [4]


def test_medium_corner_choice_skips_taken_corners():
    board = Board.from_rows(["X  ", " X ", "  O"])
    # Free corners are (0, 2) and (2, 0); nobody threatens a line
    source = FixedSource([1])
    move = HeuristicPlayer(Cell.O, rng=source).get_medium_move(board)
    assert move == (2, 0)
    assert source.requests == [2]


def test_medium_falls_back_to_any_cell():
    board = Board.from_rows(["XOX", " X ", "OXO"])
    source = FixedSource([1])
    move = HeuristicPlayer(Cell.O, rng=source).get_medium_move(board)
    assert move == (1, 2)
    assert source.requests == [2]


def test_heuristics_return_none_on_full_board():
    player = HeuristicPlayer(Cell.O, rng=FixedSource([]))
    board = Board.from_rows(FULL_BOARD)
    assert player.get_easy_move(board) is None
    assert player.get_medium_move(board) is None


def test_dispatcher_routes_by_difficulty():
    board = Board.from_rows(["XX ", " O ", "   "])
    before = board.to_bytes()
    opponent = Opponent(Cell.O, rng=FixedSource([0]))

    assert opponent.choose_move(board, Difficulty.HARD) == (0, 2)
    assert opponent.choose_move(board, Difficulty.MEDIUM) == (0, 2)
    # Easy takes the first empty cell for draw 0
    assert opponent.choose_move(board, Difficulty.EASY) == (0, 2)
    assert board.to_bytes() == before


def test_dispatcher_hard_plays_search_move():
    board = Board.from_rows(["X  ", "   ", "   "])
    assert choose_move(board, Difficulty.HARD) == (1, 1)


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_dispatcher_fails_loudly_on_full_board(difficulty):
    board = Board.from_rows(FULL_BOARD)
    with pytest.raises(NoMovesAvailableError):
        Opponent(Cell.O, rng=FixedSource([])).choose_move(board, difficulty)


@pytest.mark.parametrize("choice,expected", [
    (1, Difficulty.EASY),
    ("2", Difficulty.MEDIUM),
    (" hard ", Difficulty.HARD),
    ("Easy", Difficulty.EASY),
])
def test_difficulty_from_choice(choice, expected):
    assert Difficulty.from_choice(choice) == expected


@pytest.mark.parametrize("choice", ["0", "4", "expert", ""])
def test_difficulty_from_choice_rejects_unknown(choice):
    with pytest.raises(ValueError):
        Difficulty.from_choice(choice)


def test_computer_symbol_can_be_x():
    board = Board.from_rows(["OO ", "XX ", "   "])
    # X to move would be unusual here, but the policy only looks at lines
    move = HeuristicPlayer(Cell.X, rng=FixedSource([])).get_medium_move(board)
    assert move == Move(1, 2)
