"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass
from .board import Board, Coordinate, Mark, TicTacToeError


class MoveError(TicTacToeError):
    """Base class for rejected moves. The engine is left unchanged."""


class TileOccupied(MoveError):
    """The target tile already holds a mark."""

    def __init__(self, mark: Mark):
        self.mark = mark
        super().__init__(f"{mark} is already in that spot!")


class GameOver(MoveError):
    """A move was attempted after the game was decided."""

    def __init__(self, result):
        self.result = result
        super().__init__(f"Game is already over: {result}")


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Can only place on empty tiles

    Which mark is placed is not checked here; turn order
    belongs to the engine.
    """

    def validate_move(self, board: Board, result, coord: Coordinate) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            result: The cached game result, or None while in progress.
            coord: Where the mark would be placed.

        Returns:
            ValidationResult with is_valid and the error to raise.
        """
        # Check if game is over
        if result is not None:
            return ValidationResult(is_valid=False, error=GameOver(result))

        # Check if tile is empty
        occupant = board.value_at(coord)
        if occupant is not None:
            return ValidationResult(is_valid=False, error=TileOccupied(occupant))

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board, result) -> List[Coordinate]:
        """
        Get all valid moves.

        Args:
            board: Current board.
            result: The cached game result, or None.

        Returns:
            Empty coordinates, or an empty list once the game is over.
        """
        if result is not None:
            return []

        return board.empty_cells()
