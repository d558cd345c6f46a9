"""
Display module for the TicTacToe engine.
Renders the board as text and as an image.
"""

from .config import DisplayConfig
from .renderer import BoardRenderer
