"""
Tic Tac Toe core.
Handles the board, rules, and the computer opponent.
"""

__version__ = "1.0.0"

from .board import Board, Cell, Move, BOARD_SIZE
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer, SearchResult
from .heuristic_player import HeuristicPlayer
from .opponent import Difficulty, Opponent, NoMovesAvailableError, choose_move
