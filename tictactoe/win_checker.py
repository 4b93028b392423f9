"""
Win checker for Tic Tac Toe.
Checks if a player has won or if the board is a draw.
"""

from typing import Optional, List, Tuple

import numpy as np

from .board import Board, Cell, BOARD_SIZE


class WinChecker:
    """
    Checks for win conditions in Tic Tac Toe.

    Win condition: 3 of the same symbol in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    # Same lines as flat indexes into the raveled grid, shape (8, 3)
    _LINE_INDEX = np.array(
        [[row * BOARD_SIZE + col for row, col in line] for line in WINNING_LINES]
    )

    def is_win(self, board: Board, symbol: Cell) -> bool:
        """
        Check if a symbol holds a complete line.

        Args:
            board: The board to check.
            symbol: Cell.X or Cell.O.

        Returns:
            True if any row, column or diagonal is entirely `symbol`.
        """
        if symbol == Cell.EMPTY:
            return False

        lines = board.grid.ravel()[self._LINE_INDEX]
        return bool((lines == symbol).all(axis=1).any())

    def is_full(self, board: Board) -> bool:
        """True if no empty cell is left."""
        return not bool((board.grid == Cell.EMPTY).any())

    def check_winner(self, board: Board) -> Optional[Cell]:
        """
        Check if there's a winner.

        Returns:
            The winning symbol, or None if no winner yet.
        """
        for symbol in (Cell.X, Cell.O):
            if self.is_win(board, symbol):
                return symbol

        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the board is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        # First check if there's a winner - if so, not a draw
        if self.check_winner(board) is not None:
            return False

        return self.is_full(board)

    def get_winning_line(self, board: Board) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            first = board[line[0]]
            if first != Cell.EMPTY and all(board[pos] == first for pos in line[1:]):
                return line
        return None


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    board1 = Board.from_rows(["XXX", " O ", "O  "])
    winner = checker.check_winner(board1)
    print(f"Test 1 (horizontal): winner = {winner}")
    assert winner == Cell.X

    # Test 2: Vertical win
    board2 = Board.from_rows(["OX ", "OX ", "O  "])
    winner = checker.check_winner(board2)
    print(f"Test 2 (vertical): winner = {winner}")
    assert winner == Cell.O

    # Test 3: Diagonal win
    board3 = Board.from_rows(["XO ", " XO", "  X"])
    winner = checker.check_winner(board3)
    print(f"Test 3 (diagonal): winner = {winner}")
    assert winner == Cell.X

    # Test 4: Draw (full board, no winner)
    board4 = Board.from_rows(["XOX", "OXO", "OXO"])
    print(f"Test 4 (draw): is_draw = {checker.check_draw(board4)}")
    assert checker.check_draw(board4)

    print("\nWinChecker test done!")
