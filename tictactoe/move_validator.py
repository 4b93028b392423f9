"""
Move validator for Tic Tac Toe.
Validates moves and generates the list of legal moves.
"""

from typing import Optional, List
from dataclasses import dataclass

from .board import Board, Move, BOARD_SIZE


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates Tic Tac Toe moves.

    Rules:
    1. Position must be on the board (0-2 for row and column)
    2. Can only place on empty cells
    """

    def is_legal(self, board: Board, row: int, col: int) -> bool:
        """True iff (row, col) is on the board and the cell is empty."""
        return board.is_legal(row, col)

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place symbol (0-2).
            col: Column to place symbol (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if row/col are in valid range
        if not board.in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{BOARD_SIZE - 1}."
            )

        # Check if cell is empty
        if not board.is_legal(row, col):
            return ValidationResult(
                is_valid=False,
                error_message="Cell already occupied. Try again."
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[Move]:
        """
        Get all legal moves, in row-major order.

        The order is fixed so that policies breaking ties by position
        always pick the same square.
        """
        return board.get_empty_cells()
