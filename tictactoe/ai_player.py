"""
AI player for Tic Tac Toe.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

from dataclasses import dataclass
from typing import Optional

from .board import Board, Cell, Move
from .move_validator import MoveValidator
from .win_checker import WinChecker


# A win scores WIN_SCORE minus the depth it happens at
WIN_SCORE = 10

# Wider than any reachable score, used as the open alpha-beta window
SCORE_BOUND = 1000


@dataclass
class SearchResult:
    """Outcome of one search: best move (None if no moves) and its score."""
    move: Optional[Move]
    score: int
    nodes: int = 0


class AIPlayer:
    """
    An AI that plays Tic Tac Toe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    Faster wins score higher and losses are put off as long as possible.
    """

    def __init__(
        self,
        player: Cell = Cell.O,
        use_pruning: bool = True,
        verbose: bool = False
    ):
        """
        Initialize the AI player.

        Args:
            player: Which symbol the AI maximizes for (default: O)
            use_pruning: Cut branches with alpha-beta. Turning it off only
                changes how many positions are visited.
            verbose: Print a summary line after every search.
        """
        self.player = player
        self.opponent = player.opposite()
        self.use_pruning = use_pruning
        self.verbose = verbose
        self.win_checker = WinChecker()
        self.move_validator = MoveValidator()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def best_move(self, board: Board) -> SearchResult:
        """
        Search the full game tree for the best move.

        The board is modified during the search and restored before
        returning.

        Args:
            board: Current board. The AI is the side to move.

        Returns:
            SearchResult with the best move, or move=None if the board
            has no empty cells.
        """
        self.moves_evaluated = 0

        valid_moves = self.move_validator.get_valid_moves(board)

        if not valid_moves:
            return SearchResult(move=None, score=0, nodes=0)

        best_score = -SCORE_BOUND
        best_move = None

        for row, col in valid_moves:
            # Try this move
            board.place(row, col, self.player)
            try:
                score = self._minimax(board, depth=0, is_maximizing=False)
            finally:
                board.undo(row, col)

            # Strictly greater: the first of equal moves is kept
            if score > best_score:
                best_score = score
                best_move = Move(row, col)

        if self.verbose:
            print(f"AI evaluated {self.moves_evaluated} positions. "
                  f"Best move: {tuple(best_move)} (score: {best_score})")

        return SearchResult(move=best_move, score=best_score, nodes=self.moves_evaluated)

    def get_best_move(self, board: Board) -> Optional[Move]:
        """
        Get the best move for the current position.

        Returns:
            (row, col) of best move, or None if no moves available.
        """
        return self.best_move(board).move

    def _minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        alpha: int = -SCORE_BOUND,
        beta: int = SCORE_BOUND
    ) -> int:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Position to evaluate. Left unchanged on return.
            depth: Plies played since the root move.
            is_maximizing: True if it's the AI's turn at this node.
            alpha: Best score the AI can already guarantee.
            beta: Best score the opponent can already guarantee.

        Returns:
            The score of the position.
        """
        self.moves_evaluated += 1

        # Check terminal states
        if self.win_checker.is_win(board, self.player):
            return WIN_SCORE - depth  # Win (prefer faster wins)
        if self.win_checker.is_win(board, self.opponent):
            return depth - WIN_SCORE  # Loss (prefer slower losses)
        if self.win_checker.is_full(board):
            return 0  # Draw

        if is_maximizing:
            max_score = -SCORE_BOUND
            for row, col in board.get_empty_cells():
                board.place(row, col, self.player)
                try:
                    score = self._minimax(board, depth + 1, False, alpha, beta)
                finally:
                    board.undo(row, col)
                max_score = max(max_score, score)
                alpha = max(alpha, max_score)
                if self.use_pruning and beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = SCORE_BOUND
            for row, col in board.get_empty_cells():
                board.place(row, col, self.opponent)
                try:
                    score = self._minimax(board, depth + 1, True, alpha, beta)
                finally:
                    board.undo(row, col)
                min_score = min(min_score, score)
                beta = min(beta, min_score)
                if self.use_pruning and beta <= alpha:
                    break  # Prune
            return min_score


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(Cell.O, verbose=True)

    # Test 1: AI should block a winning move
    board = Board.from_rows(["XX ", " O ", "   "])
    board.print_board()
    print("\nAI is O. X is about to win with (0,2)!")

    move = ai.get_best_move(board)
    print(f"AI's move: {move}")

    assert move == (0, 2), f"Expected (0, 2), got {move}"
    print("AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board2 = Board.from_rows(["OO ", " X ", "X  "])
    board2.print_board()
    print("\nAI is O. Can win with (0,2)!")

    move = ai.get_best_move(board2)
    print(f"AI's move: {move}")

    assert move == (0, 2), f"Expected (0, 2), got {move}"
    print("AI correctly takes the win!")

    print("\nAIPlayer test done!")
