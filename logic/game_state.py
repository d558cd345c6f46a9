"""
Game state management for the TicTacToe engine.
Owns the board, whose turn it is, the move history, and the result.
"""

from typing import Optional, List, Tuple
from dataclasses import dataclass

from .board import Board, Coordinate, Mark
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker, Line


@dataclass(frozen=True)
class Move:
    """
    A committed move in the game.
    """
    mark: Mark              # Who made the move
    coord: Coordinate       # Where it was placed


class GameResult:
    """Outcome of a finished game: Winner or Tie."""


@dataclass(frozen=True)
class Winner(GameResult):
    mark: Mark

    def __str__(self) -> str:
        return f"{self.mark} wins!"


@dataclass(frozen=True)
class Tie(GameResult):

    def __str__(self) -> str:
        return "It's a tie!"


class GameEngine:
    """
    The complete state of a TicTacToe game.

    Two ways to play:
    - submit_move(mark, coord) places any mark; it does not check turn order
    - play_next(coord) places the current player's mark, then switches turns

    Rejected moves raise TileOccupied or GameOver and leave the
    engine exactly as it was. Once a result is set it never changes.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize a fresh game.

        Args:
            config: Game configuration. Uses defaults if not provided.
        """
        self.config = config or GameConfig()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self._board = Board()
        self._history: List[Move] = []
        self._current_turn: Mark = self.config.FIRST_MARK
        self._result: Optional[GameResult] = None

    # ==================== READ-ONLY STATE ====================

    @property
    def board(self) -> Board:
        """A copy of the board. Changing it does not affect the game."""
        return self._board.copy()

    @property
    def history(self) -> Tuple[Move, ...]:
        """Accepted moves in the order they were played."""
        return tuple(self._history)

    @property
    def current_turn(self) -> Mark:
        return self._current_turn

    @property
    def cached_result(self) -> Optional[GameResult]:
        return self._result

    @property
    def is_game_over(self) -> bool:
        return self._result is not None

    # ==================== MOVES ====================

    def submit_move(self, mark: Mark, coord: Coordinate) -> Optional[GameResult]:
        """
        Place a mark on the board.

        Args:
            mark: The mark to place.
            coord: Where to place it.

        Returns:
            The result if this move ended the game, None otherwise.

        Raises:
            GameOver: The game was already decided.
            TileOccupied: The tile already holds a mark.
        """
        validation = self.validator.validate_move(self._board, self._result, coord)
        if not validation.is_valid:
            self._debug(f"Rejected {mark} at {coord}: {validation.error_message}")
            raise validation.error

        self._board.set_tile(coord, mark)
        self._history.append(Move(mark=mark, coord=coord))
        self._result = self.evaluate_end_state()

        self._debug(f"{mark} played {coord} (move {len(self._history)})")
        if self._result is not None:
            self._debug(f"Game over: {self._result}")

        return self._result

    def play_next(self, coord: Coordinate) -> Optional[GameResult]:
        """
        Play the current player's mark, then pass the turn.

        If the move is rejected the turn does not change,
        so the same player has to try again.
        """
        result = self.submit_move(self._current_turn, coord)
        self._current_turn = self._current_turn.toggle()
        return result

    # ==================== END STATE ====================

    def evaluate_end_state(self) -> Optional[GameResult]:
        """
        Work out the outcome of the game without changing anything.

        Returns:
            The cached result if there is one, otherwise Winner for the
            first complete line, Tie for a full board, or None.
        """
        # Result is sticky once set
        if self._result is not None:
            return self._result

        winner = self.win_checker.check_winner(self._board)
        if winner is not None:
            return Winner(winner)

        if self.win_checker.check_tie(self._board):
            return Tie()

        return None

    def available_moves(self) -> List[Coordinate]:
        """Empty tiles, or nothing once the game is over."""
        return self.validator.get_valid_moves(self._board, self._result)

    def winning_line(self) -> Optional[Line]:
        """The completed line of a won game, for highlighting."""
        if not isinstance(self._result, Winner):
            return None
        return self.win_checker.get_winning_line(self._board)

    def _debug(self, message: str):
        if self.config.DEBUG_MODE:
            print(f"[engine] {message}")


# Quick test
if __name__ == "__main__":
    print("Testing GameEngine...")

    game = GameEngine()

    # X wins on the diagonal
    moves = [(0, 0), (2, 0), (1, 1), (2, 1), (2, 2)]

    for row, col in moves:
        player = game.current_turn
        result = game.play_next(Coordinate(row, col))
        print(f"{player} moves to ({row}, {col}) -> {result}")

    assert game.cached_result == Winner(Mark.X)
    print("\nGame state test done!")
