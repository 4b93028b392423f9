"""
Text interface for Tic Tac Toe.

Shows:
- Main menu, rules and about screens
- Match setup prompts (mode, names, difficulty, rounds)
- The board and the running score
"""

import os
from typing import Callable, Optional

from tictactoe import __version__
from tictactoe.board import Board, Move, BOARD_SIZE
from tictactoe.opponent import Difficulty

from .config import GameConfig
from .match import MatchScore, MatchSettings


MENU_PLAY = 1
MENU_HOW_TO_PLAY = 2
MENU_ABOUT = 3
MENU_EXIT = 4


class ConsoleUI:
    """
    Console front end.

    All reading goes through `input_func` so a script of answers can
    stand in for the keyboard.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        clear: bool = GameConfig.CLEAR_SCREEN
    ):
        self.input_func = input_func
        self.clear = clear

    # ==================== OUTPUT ====================

    def say(self, message: str):
        print(message)

    def clear_screen(self):
        """Clear the terminal (cls on Windows, clear elsewhere)."""
        if self.clear:
            os.system("cls" if os.name == "nt" else "clear")

    def banner(self, title: str):
        rule = "=" * GameConfig.BANNER_WIDTH
        print(rule)
        print(title.center(GameConfig.BANNER_WIDTH))
        print(rule)

    def show_board(self, board: Board):
        board.print_board()

    def show_stats(self, score: MatchScore, settings: MatchSettings):
        print(score.stats_line(settings))

    def wait_for_enter(self):
        self.input_func("Press Enter to continue...")

    # ==================== INPUT ====================

    def ask_line(self, prompt: str) -> str:
        return self.input_func(prompt).strip()

    def ask_choice(self, prompt: str, low: int, high: int) -> int:
        """Keep asking until a whole number in [low, high] is entered."""
        answer = self.ask_line(prompt)
        while True:
            try:
                value = int(answer)
                if low <= value <= high:
                    return value
            except ValueError:
                pass
            answer = self.ask_line(f"Invalid input. Please enter a number between {low} and {high}: ")

    def ask_yes_no(self, prompt: str) -> bool:
        """True only when the answer starts with 'y' or 'Y'."""
        return self.ask_line(prompt).lower().startswith("y")

    def ask_count(self, prompt: str, default: int) -> int:
        """
        Ask for a positive number.
        Blank, non-numeric or values below 1 fall back to `default`.
        """
        answer = self.ask_line(prompt)
        if not answer:
            return default
        try:
            value = int(answer)
        except ValueError:
            return default
        return value if value >= 1 else default

    def ask_move(self) -> Move:
        """
        Read "row col" from the player.

        Re-prompts on anything that isn't two numbers in range. Whether
        the cell is free is checked by the caller.
        """
        last = BOARD_SIZE - 1
        answer = self.ask_line(f"Enter row (0-{last}) and column (0-{last}): ")
        while True:
            parsed = self._parse_move(answer)
            if parsed is None:
                answer = self.ask_line(f"Invalid input. Enter row (0-{last}) and column (0-{last}): ")
            elif not (0 <= parsed.row <= last and 0 <= parsed.col <= last):
                answer = self.ask_line(f"Invalid position. Enter row (0-{last}) and column (0-{last}): ")
            else:
                return parsed

    @staticmethod
    def _parse_move(answer: str) -> Optional[Move]:
        parts = answer.replace(",", " ").split()
        if len(parts) != 2:
            return None
        try:
            return Move(int(parts[0]), int(parts[1]))
        except ValueError:
            return None

    # ==================== SCREENS ====================

    def show_menu(self) -> int:
        """Show the main menu and return the chosen entry."""
        self.clear_screen()
        self.banner("TIC TAC TOE GAME")
        print(f"{MENU_PLAY}. Play Game")
        print(f"{MENU_HOW_TO_PLAY}. How to Play")
        print(f"{MENU_ABOUT}. About")
        print(f"{MENU_EXIT}. Exit")
        print("=" * GameConfig.BANNER_WIDTH)
        return self.ask_choice(f"Enter your choice ({MENU_PLAY}-{MENU_EXIT}): ", MENU_PLAY, MENU_EXIT)

    def prompt_settings(self) -> MatchSettings:
        """Ask for mode, names, difficulty and match length."""
        self.clear_screen()
        self.banner("PLAY GAME")
        print("Choose game mode:")
        print("1. Player vs Player")
        print("2. Player vs Computer")
        vs_computer = self.ask_choice("Enter your choice (1-2): ", 1, 2) == 2

        settings = MatchSettings(vs_computer=vs_computer)
        settings.player1_name = self.ask_line("Enter Player 1 name: ") or settings.player1_name

        if vs_computer:
            print("Choose difficulty level:")
            for level in Difficulty:
                print(f"{level.value}. {level.name.capitalize()}")
            choice = self.ask_choice("Enter your choice (1-3): ", 1, len(Difficulty))
            settings.difficulty = Difficulty.from_choice(choice)
            settings.player2_name = GameConfig.COMPUTER_NAME
        else:
            settings.player2_name = self.ask_line("Enter Player 2 name: ") or settings.player2_name

        settings.total_rounds = self.ask_count(
            f"Enter number of rounds (default is {GameConfig.DEFAULT_ROUNDS}): ",
            GameConfig.DEFAULT_ROUNDS
        )
        settings.wins_needed = self.ask_count(
            f"Enter number of wins needed to win the game (default is {GameConfig.DEFAULT_WINS_NEEDED}): ",
            GameConfig.DEFAULT_WINS_NEEDED
        )
        return settings

    def show_how_to_play(self):
        self.clear_screen()
        self.banner("HOW TO PLAY")
        print("Game Rules:")
        print("1. The game is played on a 3x3 grid.")
        print("2. Players take turns placing their symbol (X or O) in empty cells.")
        print("3. The first player to get 3 of their symbols in a row (horizontally,")
        print("   vertically, or diagonally) wins the round.")
        print("4. If all cells are filled and no player has won, the round is a tie.\n")

        print("Game Features:")
        print("- Two game modes: Player vs Player or Player vs Computer")
        print("- Three difficulty levels for computer opponent")
        print("- Customizable number of rounds")
        print("- Customizable win condition (how many rounds to win)")
        print("- Tied rounds do not count and will be replayed\n")

        print("How to Enter Moves:")
        print("- Enter the row number (0-2) followed by a space")
        print("- Then enter the column number (0-2)")
        print("- Example: '1 2' will place your symbol in the middle row, rightmost column\n")

        print("Computer Difficulty Levels:")
        print("- Easy: Makes random moves")
        print("- Medium: Can block your winning moves and try to win itself")
        print("- Hard: Uses an optimal strategy (minimax algorithm) - very difficult to beat!\n")
        self.wait_for_enter()

    def show_about(self):
        self.clear_screen()
        self.banner("ABOUT")
        print(f"Tic Tac Toe {__version__}")
        print("A console Tic Tac Toe with an unbeatable minimax opponent.\n")
        self.wait_for_enter()

    def confirm_exit(self) -> bool:
        """Returns True if the player really wants to quit."""
        self.clear_screen()
        self.banner("GOODBYE!")
        print("Thank you for playing Tic Tac Toe!")
        return not self.ask_yes_no("Do you want to play again? (y/n): ")
