"""
Game configuration for the TicTacToe engine.
"""

from .board import Mark


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== TURN SETTINGS ====================
    # Mark that plays the first move of a new game
    FIRST_MARK = Mark.X

    # ==================== DEBUG SETTINGS ====================
    # Print every accepted and rejected move
    DEBUG_MODE = False
