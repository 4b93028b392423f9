"""
Rule-based computer opponents for the Easy and Medium difficulties.
"""

import random
from typing import List, Optional

from .board import Board, Cell, Move
from .move_validator import MoveValidator
from .win_checker import WinChecker


CENTER = Move(1, 1)
CORNERS = [Move(0, 0), Move(0, 2), Move(2, 0), Move(2, 2)]


class HeuristicPlayer:
    """
    Plays without searching the game tree.

    Easy picks any empty cell at random. Medium follows fixed rules:
    win, block, center, corner, anything.

    Randomness comes from `rng`, any object with a `randrange(n)` method
    returning an index in [0, n). A seeded `random.Random` makes the
    choices reproducible.
    """

    def __init__(self, player: Cell = Cell.O, rng=None):
        self.player = player
        self.opponent = player.opposite()
        self.rng = rng if rng is not None else random.Random()
        self.win_checker = WinChecker()
        self.move_validator = MoveValidator()

    def _pick(self, moves: List[Move]) -> Move:
        return moves[self.rng.randrange(len(moves))]

    def get_easy_move(self, board: Board) -> Optional[Move]:
        """Get a random valid move (easy difficulty)."""
        valid_moves = self.move_validator.get_valid_moves(board)
        if not valid_moves:
            return None
        return self._pick(valid_moves)

    def get_medium_move(self, board: Board) -> Optional[Move]:
        """
        Get a somewhat strategic move (medium difficulty).

        Rules, in order:
        1. Complete our own line if we can
        2. Block the opponent's winning cell
        3. Take the center
        4. Take a random free corner
        5. Take any random free cell
        """
        valid_moves = self.move_validator.get_valid_moves(board)
        if not valid_moves:
            return None

        winning = self._find_winning_cell(board, valid_moves, self.player)
        if winning is not None:
            return winning

        blocking = self._find_winning_cell(board, valid_moves, self.opponent)
        if blocking is not None:
            return blocking

        if board.is_legal(*CENTER):
            return CENTER

        free_corners = [corner for corner in CORNERS if board.is_legal(*corner)]
        if free_corners:
            return self._pick(free_corners)

        return self._pick(valid_moves)

    def _find_winning_cell(
        self,
        board: Board,
        valid_moves: List[Move],
        symbol: Cell
    ) -> Optional[Move]:
        """First cell (row-major) where `symbol` would complete a line."""
        for row, col in valid_moves:
            board.place(row, col, symbol)
            try:
                won = self.win_checker.is_win(board, symbol)
            finally:
                board.undo(row, col)
            if won:
                return Move(row, col)
        return None
