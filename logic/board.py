"""
Board for the TicTacToe engine.
Coordinates, player marks, and the 3x3 grid of tiles.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass


# Valid range for rows and columns
BOARD_SIZE = 3


class TicTacToeError(Exception):
    """Base class for all TicTacToe errors."""


class OutOfBounds(TicTacToeError, ValueError):
    """Raised when a coordinate is built outside the 3x3 grid."""

    def __init__(self, row, col):
        self.row = row
        self.col = col
        super().__init__(f"Invalid position ({row}, {col}). Must be 0-2.")


class Mark(Enum):
    """The two player marks."""
    X = "X"
    O = "O"

    def toggle(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Coordinate:
    """
    A (row, col) position on the board.

    Both values are checked on construction, so a Coordinate
    can always be used to index the board safely.
    """
    row: int
    col: int

    def __post_init__(self):
        for value in (self.row, self.col):
            # bool is an int subclass, but True/False are not positions
            if not isinstance(value, int) or isinstance(value, bool):
                raise OutOfBounds(self.row, self.col)
            if not 0 <= value < BOARD_SIZE:
                raise OutOfBounds(self.row, self.col)

    @classmethod
    def all(cls) -> List["Coordinate"]:
        """All 9 coordinates in row-major order."""
        return [cls(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


class Board:
    """
    The 3x3 grid.

    Each tile is None (empty) or a Mark. The board knows nothing
    about turns or winning; the engine validates moves before
    calling set_tile().
    """

    def __init__(self):
        self._tiles: List[List[Optional[Mark]]] = [
            [None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]

    def value_at(self, coord: Coordinate) -> Optional[Mark]:
        """Get the mark at a coordinate, or None if the tile is empty."""
        return self._tiles[coord.row][coord.col]

    def set_tile(self, coord: Coordinate, value: Optional[Mark]):
        """Overwrite the tile at a coordinate. No occupancy check."""
        self._tiles[coord.row][coord.col] = value

    def empty_cells(self) -> List[Coordinate]:
        """
        Get all empty tiles on the board.

        Returns:
            List of Coordinates in row-major order.
        """
        return [coord for coord in Coordinate.all() if self.value_at(coord) is None]

    def is_full(self) -> bool:
        """True when every tile holds a mark."""
        return all(cell is not None for row in self._tiles for cell in row)

    def rows(self) -> List[List[Optional[Mark]]]:
        """Snapshot of the tiles as a list of rows."""
        return [list(row) for row in self._tiles]

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = Board()
        new_board._tiles = self.rows()
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._tiles == other._tiles

    def __repr__(self) -> str:
        cells = "/".join(
            "".join(str(cell) if cell else "-" for cell in row) for row in self._tiles
        )
        return f"Board({cells})"
