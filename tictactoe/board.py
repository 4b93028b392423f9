"""
Board state for Tic Tac Toe.
Holds the 3x3 grid, the cell symbols and the (row, col) move type.
"""

from enum import IntEnum
from typing import Iterable, List, NamedTuple, Optional

import numpy as np


# TicTacToe is a 3x3 grid
BOARD_SIZE = 3


class Cell(IntEnum):
    """The three states a square can be in."""
    EMPTY = 0
    X = 1     # Moves first
    O = 2     # Computer's symbol

    def opposite(self) -> "Cell":
        """Get the opposite player symbol."""
        if self == Cell.EMPTY:
            raise ValueError("EMPTY has no opposite")
        return Cell.O if self == Cell.X else Cell.X

    @property
    def symbol(self) -> str:
        """Character used when drawing the board."""
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, char: str) -> "Cell":
        """Parse 'X', 'O', ' ', '_' or '.' into a Cell."""
        char = char.upper()
        if char in (" ", "_", "."):
            return cls.EMPTY
        if char == "X":
            return cls.X
        if char == "O":
            return cls.O
        raise ValueError(f"Unknown cell symbol: {char!r}")


_SYMBOLS = {Cell.EMPTY: " ", Cell.X: "X", Cell.O: "O"}


class Move(NamedTuple):
    """A square on the board."""
    row: int    # Row (0-2)
    col: int    # Column (0-2)


class Board:
    """
    The 3x3 playing grid.

    Cells are stored in a fixed-size int8 numpy array holding Cell values.
    The board never checks whose turn it is; callers alternate symbols.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        if grid is None:
            grid = np.full((BOARD_SIZE, BOARD_SIZE), Cell.EMPTY, dtype=np.int8)
        else:
            grid = np.array(grid, dtype=np.int8)
            if grid.shape != (BOARD_SIZE, BOARD_SIZE):
                raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got {grid.shape}")
        self.grid = grid

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from row strings.

        Example:
            Board.from_rows(["XX ", "OO ", "   "])
        """
        grid = [[Cell.from_symbol(ch) for ch in row] for row in rows]
        return cls(grid)

    def __getitem__(self, move) -> Cell:
        row, col = move
        return Cell(int(self.grid[row, col]))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __repr__(self) -> str:
        rows = ["".join(Cell(int(v)).symbol for v in row) for row in self.grid]
        return f"Board.from_rows({rows!r})"

    def in_bounds(self, row: int, col: int) -> bool:
        """Check that (row, col) is on the board. Negative indexes are not."""
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def is_legal(self, row: int, col: int) -> bool:
        """True if (row, col) is on the board and empty."""
        return self.in_bounds(row, col) and bool(self.grid[row, col] == Cell.EMPTY)

    def place(self, row: int, col: int, symbol: Cell) -> bool:
        """
        Place a symbol on the board.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            symbol: Cell.X or Cell.O.

        Returns:
            True if the symbol was placed, False if the cell is occupied or
            off the board. The board is untouched on failure.
        """
        if not self.is_legal(row, col):
            return False

        self.grid[row, col] = symbol
        return True

    def undo(self, row: int, col: int):
        """Empty a cell again (used to take back speculative moves)."""
        self.grid[row, col] = Cell.EMPTY

    def get_empty_cells(self) -> List[Move]:
        """
        Get all empty cells on the board.

        Returns:
            List of Move, in row-major order.
        """
        empty = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self.grid[row, col] == Cell.EMPTY:
                    empty.append(Move(row, col))
        return empty

    def count(self, symbol: Cell) -> int:
        """How many cells hold the given symbol."""
        return int(np.count_nonzero(self.grid == symbol))

    def reset(self):
        """Clear every cell."""
        self.grid.fill(Cell.EMPTY)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(self.grid.copy())

    def to_bytes(self) -> bytes:
        """Raw cell bytes, handy for checking a board was left untouched."""
        return self.grid.tobytes()

    def render(self) -> str:
        """Draw the board as text with row/column labels."""
        lines = ["  " + " ".join(str(col) for col in range(BOARD_SIZE))]
        for row in range(BOARD_SIZE):
            cells = "|".join(Cell(int(v)).symbol for v in self.grid[row])
            lines.append(f"{row} {cells}")
            if row < BOARD_SIZE - 1:
                lines.append("  " + "+".join(["-"] * BOARD_SIZE))
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print(self.render())


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    moves = [
        ((1, 1), Cell.X),
        ((0, 0), Cell.O),
        ((1, 1), Cell.O),  # Occupied, should fail
        ((5, 5), Cell.O),  # Off the board, should fail
    ]

    for (row, col), symbol in moves:
        ok = board.place(row, col, symbol)
        print(f"{symbol.symbol} -> ({row}, {col}): {'ok' if ok else 'rejected'}")

    board.print_board()
    print(f"Empty cells: {board.get_empty_cells()}")

    print("\nBoard test done!")
