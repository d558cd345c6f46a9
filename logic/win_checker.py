"""
Win checker for the TicTacToe engine.
Finds three-in-a-row on a board and detects a full board.
"""

from typing import Optional, Tuple
from .board import Board, Coordinate, Mark


Line = Tuple[Coordinate, Coordinate, Coordinate]


def _line(*cells: Tuple[int, int]) -> Line:
    return tuple(Coordinate(row, col) for row, col in cells)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, checked in this order
    WINNING_LINES: Tuple[Line, ...] = (
        # Rows
        _line((0, 0), (0, 1), (0, 2)),
        _line((1, 0), (1, 1), (1, 2)),
        _line((2, 0), (2, 1), (2, 2)),
        # Columns
        _line((0, 0), (1, 0), (2, 0)),
        _line((0, 1), (1, 1), (2, 1)),
        _line((0, 2), (1, 2), (2, 2)),
        # Diagonals
        _line((0, 0), (1, 1), (2, 2)),
        _line((0, 2), (1, 1), (2, 0)),
    )

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to scan.

        Returns:
            The mark of the first complete line, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(self, board: Board, line: Line) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Args:
            board: The game board.
            line: The three coordinates to check.

        Returns:
            The winning Mark if all 3 tiles match, None otherwise.
        """
        marks = []
        for coord in line:
            mark = board.value_at(coord)
            if mark is None:
                return None  # Empty tile, no winner on this line
            marks.append(mark)

        if marks[0] == marks[1] == marks[2]:
            return marks[0]

        return None

    def check_tie(self, board: Board) -> bool:
        """
        Check if the game is a tie.

        A tie occurs when all tiles are filled and there is no winner.
        """
        if self.check_winner(board) is not None:
            return False

        return board.is_full()

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Args:
            board: The board.

        Returns:
            The winning line as three Coordinates, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    board = Board()
    for row, col, mark in [(0, 0, Mark.X), (0, 1, Mark.X), (0, 2, Mark.X), (1, 1, Mark.O)]:
        board.set_tile(Coordinate(row, col), mark)

    winner = checker.check_winner(board)
    print(f"Horizontal: winner = {winner}")
    assert winner == Mark.X

    print(f"Winning line: {[str(c) for c in checker.get_winning_line(board)]}")

    print("\nWinChecker test done!")
