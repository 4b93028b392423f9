"""
Opponent dispatcher for Tic Tac Toe.
Picks the computer's move with the policy that matches the difficulty.
"""

from enum import Enum

from .board import Board, Cell, Move
from .ai_player import AIPlayer
from .heuristic_player import HeuristicPlayer


class NoMovesAvailableError(RuntimeError):
    """The computer was asked to move on a board with no empty cells."""


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Win, block, center, corner
    HARD = 3      # Full minimax

    @classmethod
    def from_choice(cls, choice) -> "Difficulty":
        """
        Parse a menu choice ("1"-"3") or a level name ("hard").

        Raises:
            ValueError: if the choice matches no level.
        """
        text = str(choice).strip()
        if text.isdigit():
            return cls(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {choice!r}") from None


class Opponent:
    """
    The computer player.

    Holds one policy object per difficulty so a whole match can reuse them,
    but keeps no board between calls.
    """

    def __init__(self, player: Cell = Cell.O, rng=None, verbose: bool = False):
        """
        Args:
            player: The computer's symbol.
            rng: Random source for Easy/Medium (needs `randrange(n)`).
            verbose: Let the search print how many positions it looked at.
        """
        self.player = player
        self.heuristic = HeuristicPlayer(player, rng=rng)
        self.ai = AIPlayer(player, verbose=verbose)

    def choose_move(self, board: Board, difficulty: Difficulty) -> Move:
        """
        Choose the computer's next move. The board is not modified.

        Raises:
            NoMovesAvailableError: if the board is already full.
        """
        if difficulty == Difficulty.EASY:
            move = self.heuristic.get_easy_move(board)
        elif difficulty == Difficulty.MEDIUM:
            move = self.heuristic.get_medium_move(board)
        else:
            move = self.ai.get_best_move(board)

        if move is None:
            raise NoMovesAvailableError(
                "Computer asked to move on a full board; the round should already be over"
            )

        return move


def choose_move(
    board: Board,
    difficulty: Difficulty,
    player: Cell = Cell.O,
    rng=None
) -> Move:
    """One-shot form of Opponent.choose_move."""
    return Opponent(player, rng=rng).choose_move(board, difficulty)
