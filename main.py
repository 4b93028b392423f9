"""
Main entry point for console Tic Tac Toe.

This script ties together:
- Console (menus, prompts, match loop)
- Logic (board, rules, computer opponent)

Run this script to play Tic Tac Toe in the terminal!
"""

import argparse
import random
from typing import Optional

from tictactoe.opponent import Opponent

from console.config import GameConfig
from console.match import Match, MatchScore
from console.ui import ConsoleUI, MENU_PLAY, MENU_HOW_TO_PLAY, MENU_ABOUT, MENU_EXIT


class TicTacToeApp:
    """
    Main controller for the console game.

    Menu flow:
    1. Play Game - set up a match and play it, then offer a rematch
    2. How to Play - rules and controls
    3. About
    4. Exit - asks for confirmation
    """

    def __init__(self, ui: ConsoleUI, rng: Optional[random.Random] = None, verbose: bool = False):
        self.ui = ui
        self.rng = rng if rng is not None else random.Random()
        self.verbose = verbose

    def run(self):
        """Show the main menu until the player exits."""
        running = True
        while running:
            choice = self.ui.show_menu()

            if choice == MENU_PLAY:
                self.play_game()
            elif choice == MENU_HOW_TO_PLAY:
                self.ui.show_how_to_play()
            elif choice == MENU_ABOUT:
                self.ui.show_about()
            elif choice == MENU_EXIT:
                running = not self.ui.confirm_exit()

    def play_game(self) -> MatchScore:
        """Set up and play matches until the player declines a rematch."""
        while True:
            settings = self.ui.prompt_settings()
            opponent = None
            if settings.vs_computer:
                opponent = Opponent(GameConfig.COMPUTER_SYMBOL, rng=self.rng, verbose=self.verbose)

            score = Match(settings, self.ui, opponent).play()

            if not self.ui.ask_yes_no("Do you want to play again? (y/n): "):
                return score


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Console Tic Tac Toe")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the computer's random choices (Easy/Medium) for repeatable games"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print how many positions the Hard computer evaluated"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the screen between menus and rounds"
    )

    args = parser.parse_args(argv)

    ui = ConsoleUI(clear=GameConfig.CLEAR_SCREEN and not args.no_clear)
    app = TicTacToeApp(ui, rng=random.Random(args.seed), verbose=args.verbose)

    try:
        app.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
