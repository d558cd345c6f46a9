"""
Logic module for the TicTacToe engine.
Handles the board, move rules, and win/tie detection.
"""

__version__ = "1.0.0"

from .board import Board, Coordinate, Mark, TicTacToeError, OutOfBounds
from .config import GameConfig
from .move_validator import MoveValidator, ValidationResult, MoveError, TileOccupied, GameOver
from .win_checker import WinChecker
from .game_state import GameEngine, GameResult, Winner, Tie, Move
