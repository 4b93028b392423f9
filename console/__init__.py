"""
Console module for Tic Tac Toe.
Handles menus, prompts and the match loop.
"""

from .config import GameConfig
from .match import Match, MatchScore, MatchSettings
from .ui import ConsoleUI
