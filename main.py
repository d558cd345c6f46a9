"""
Console game for the TicTacToe engine.

Two players share the keyboard. Each turn the current player
enters a row, a column, and confirms the tile.

Run this script to play TicTacToe in the terminal!
"""

from typing import Callable, Optional

# Logic imports
from logic.board import Coordinate
from logic.config import GameConfig
from logic.game_state import GameEngine, GameResult
from logic.move_validator import TileOccupied, GameOver

# Display imports
from display.renderer import BoardRenderer


def _read_index(prompt: str, input_fn: Callable[[str], str]) -> Optional[int]:
    """Read a 0-2 index, or None if the input is not one."""
    text = input_fn(prompt).strip()
    if text not in ("0", "1", "2"):
        return None
    return int(text)


def prompt_move(engine: GameEngine, input_fn: Callable[[str], str] = input) -> Coordinate:
    """
    Ask the current player for a tile until they confirm one.

    Args:
        engine: The running game (only read for whose turn it is).
        input_fn: Where answers come from. Defaults to input().

    Returns:
        The confirmed Coordinate.
    """
    player = engine.current_turn
    while True:
        row = _read_index(
            f"Player {player}, input the row you would like to play in (0, 1, or 2; e.g. 0 for top): ",
            input_fn
        )
        if row is None:
            print("Please enter a value between 0(top) and 2(bottom).")
            continue

        col = _read_index(
            f"Player {player}, input the column you would like to play in (0, 1, or 2; e.g. 0 for left): ",
            input_fn
        )
        if col is None:
            print("Please enter a value between 0(left) and 2(right).")
            continue

        answer = input_fn(f"Do you want to put your {player} in tile ({row},{col}) (y or n)? ")
        if answer.strip().lower() == "y":
            return Coordinate(row, col)


def play(
    engine: Optional[GameEngine] = None,
    input_fn: Callable[[str], str] = input,
    renderer: Optional[BoardRenderer] = None
) -> Optional[GameResult]:
    """
    Run one game in the console.

    Args:
        engine: Game to drive. A fresh one is created if not provided.
        input_fn: Where answers come from. Defaults to input().
        renderer: Board renderer. Uses defaults if not provided.

    Returns:
        The final result, or None if the game stopped early.
    """
    engine = engine or GameEngine()
    renderer = renderer or BoardRenderer()
    result = engine.cached_result
    if result is not None:
        print("Game is already over?")
        print(result)
        return result

    while True:
        print("\n" + renderer.render_text(engine.board) + "\n")
        try:
            result = engine.play_next(prompt_move(engine, input_fn))
        except TileOccupied as e:
            print(f"{e.mark} is already in that spot!")
            continue
        except GameOver as e:
            print("Game is already over?")
            result = e.result
            break

        if result is not None:
            print(result)
            break

    print("\n" + renderer.render_text(engine.board) + "\n")
    return result


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--ui",
        action="store_true",
        help="Play in a window instead of the console"
    )
    parser.add_argument(
        "--save-image",
        metavar="PATH",
        help="Save the final board as an image"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print every move the engine accepts or rejects"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.DEBUG_MODE = args.debug

    if args.ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(config=config)
        ui.run()
        return

    print("\n" + "="*60)
    print("   TicTacToe")
    print("="*60 + "\n")

    engine = GameEngine(config)
    renderer = BoardRenderer()

    try:
        play(engine, renderer=renderer)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        if args.save_image:
            renderer.save_image(engine.board, args.save_image, engine.winning_line())
        print("Goodbye!")


if __name__ == "__main__":
    main()
