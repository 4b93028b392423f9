"""
Match loop for Tic Tac Toe.
Plays rounds between two players and keeps the score.
"""

from dataclasses import dataclass, field
from typing import Optional

from tictactoe.board import Board, Cell
from tictactoe.move_validator import MoveValidator
from tictactoe.win_checker import WinChecker
from tictactoe.opponent import Difficulty, Opponent

from .config import GameConfig


@dataclass
class MatchSettings:
    """Everything chosen on the setup screen."""
    player1_name: str = "Player 1"
    player2_name: str = "Player 2"
    vs_computer: bool = False
    difficulty: Difficulty = Difficulty.EASY
    total_rounds: int = GameConfig.DEFAULT_ROUNDS
    wins_needed: int = GameConfig.DEFAULT_WINS_NEEDED


@dataclass
class MatchScore:
    """Running score of a match."""
    player1: int = 0
    player2: int = 0
    ties: int = 0
    rounds_played: int = 0
    winner: Optional[str] = field(default=None)

    def stats_line(self, settings: MatchSettings) -> str:
        return (f"{settings.player1_name} (X): {self.player1} | "
                f"{settings.player2_name} (O): {self.player2} | Ties: {self.ties}")


class Match:
    """
    Runs one match.

    Match flow:
    1. Player 1 (X) moves first every round
    2. Player 2 (O) is a human or the computer
    3. A round ends on a win or a full board
    4. Tied rounds are replayed without advancing the round counter
    5. The match ends when rounds run out or someone reaches the wins needed
    """

    def __init__(self, settings: MatchSettings, ui, opponent: Optional[Opponent] = None):
        """
        Args:
            settings: Names, mode, difficulty and match length.
            ui: ConsoleUI used for prompts and output.
            opponent: Computer player (created if needed and not given).
        """
        self.settings = settings
        self.ui = ui
        if opponent is None and settings.vs_computer:
            opponent = Opponent(GameConfig.COMPUTER_SYMBOL)
        self.opponent = opponent
        self.board = Board()
        self.score = MatchScore()
        self.win_checker = WinChecker()
        self.move_validator = MoveValidator()

    def play(self) -> MatchScore:
        """Play rounds until the match is decided."""
        settings = self.settings
        current_round = 1

        while (current_round <= settings.total_rounds
               and self.score.player1 < settings.wins_needed
               and self.score.player2 < settings.wins_needed):

            self.ui.clear_screen()
            self.ui.banner(f"ROUND {current_round}/{settings.total_rounds}")
            self.ui.show_stats(self.score, settings)

            winner = self.play_round()

            if winner is None:
                self.ui.say("Tied game will be reset without advancing round.")
            else:
                current_round += 1
            self.score.rounds_played += 1

            if self.score.player1 >= settings.wins_needed:
                self.score.winner = settings.player1_name
            elif self.score.player2 >= settings.wins_needed:
                self.score.winner = settings.player2_name

            if self.score.winner is not None:
                self.ui.say(f"{self.score.winner} wins the game with "
                            f"{settings.wins_needed} victories!")
                break

            if current_round <= settings.total_rounds:
                self.ui.wait_for_enter()

        self.ui.banner("FINAL RESULTS")
        self.ui.show_stats(self.score, settings)
        return self.score

    def play_round(self) -> Optional[Cell]:
        """
        Play a single round on a fresh board.

        Returns:
            The winning symbol, or None for a tie.
        """
        self.board.reset()
        symbol = Cell.X

        while True:
            self.ui.show_board(self.board)
            self._take_turn(symbol)

            if self.win_checker.is_win(self.board, symbol):
                self.ui.show_board(self.board)
                self.ui.say(f"{self._name_of(symbol)} wins this round!")
                if symbol == Cell.X:
                    self.score.player1 += 1
                else:
                    self.score.player2 += 1
                return symbol

            if self.win_checker.is_full(self.board):
                self.ui.show_board(self.board)
                self.ui.say("This round is a tie!")
                self.score.ties += 1
                return None

            symbol = symbol.opposite()

    def _take_turn(self, symbol: Cell):
        name = self._name_of(symbol)

        if symbol == GameConfig.COMPUTER_SYMBOL and self.settings.vs_computer:
            self.ui.say(f"{name}'s turn ({symbol.symbol})...")
            row, col = self.opponent.choose_move(self.board, self.settings.difficulty)
            self.board.place(row, col, symbol)
            return

        self.ui.say(f"{name}'s turn ({symbol.symbol}).")
        while True:
            row, col = self.ui.ask_move()
            result = self.move_validator.validate_move(self.board, row, col)
            if result.is_valid:
                self.board.place(row, col, symbol)
                return
            self.ui.say(result.error_message)

    def _name_of(self, symbol: Cell) -> str:
        if symbol == Cell.X:
            return self.settings.player1_name
        return self.settings.player2_name
