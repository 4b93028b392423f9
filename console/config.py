"""
Console configuration for Tic Tac Toe.
All the settings for the text interface and match defaults.
"""

from tictactoe.board import Cell


class GameConfig:
    """
    Configuration class for match and console settings.
    Change these values to tweak the defaults!
    """

    # ==================== MATCH SETTINGS ====================
    DEFAULT_ROUNDS = 5        # Rounds in a match (tied rounds are replayed)
    DEFAULT_WINS_NEEDED = 3   # Round wins that end the match early

    # ==================== PLAYER SETTINGS ====================
    # Player 1 is always X and moves first each round
    HUMAN_SYMBOL = Cell.X
    COMPUTER_SYMBOL = Cell.O
    COMPUTER_NAME = "Computer"

    # ==================== SCREEN SETTINGS ====================
    CLEAR_SCREEN = True   # Set False to keep the scrollback (e.g. when piping output)
    BANNER_WIDTH = 38
