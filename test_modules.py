"""
Smoke tests for the TicTacToe modules.
Run this to verify all components load and work together before playing.
"""

import sys


def test_game_config():
    """Test game configuration."""
    from logic import GameConfig, Mark

    config = GameConfig()
    assert config.FIRST_MARK == Mark.X
    assert config.DEBUG_MODE is False


def test_display_config():
    """Test display configuration."""
    from display import DisplayConfig, BoardRenderer

    config = DisplayConfig()
    assert BoardRenderer(config).board_size_px == config.CELL_SIZE_PX * 3
    assert len(config.EMPTY_SYMBOL) == 1


def test_package_exports():
    """Everything a collaborator needs comes from the package roots."""
    import logic
    import display

    for name in [
        "Board", "Coordinate", "Mark", "OutOfBounds", "GameEngine", "GameResult",
        "Winner", "Tie", "Move", "TileOccupied", "GameOver", "MoveError",
        "MoveValidator", "WinChecker", "GameConfig",
    ]:
        assert hasattr(logic, name), name

    assert issubclass(logic.TileOccupied, logic.MoveError)
    assert issubclass(logic.GameOver, logic.TicTacToeError)
    assert hasattr(display, "BoardRenderer")


def test_game_logic_with_renderer():
    """Play a short game and render every board along the way."""
    from logic import GameEngine, Coordinate, Winner, Mark
    from display import BoardRenderer

    game = GameEngine()
    renderer = BoardRenderer()

    for row, col in [(1, 1), (0, 0), (1, 0), (0, 1), (1, 2)]:
        game.play_next(Coordinate(row, col))
        text = renderer.render_text(game.board)
        assert text.count("X") + text.count("O") == len(game.history)

    assert game.cached_result == Winner(Mark.X)

    image = renderer.render_image(game.board, game.winning_line())
    assert image.size == (renderer.board_size_px, renderer.board_size_px)


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)

    tests = {
        "Game Config": test_game_config,
        "Display Config": test_display_config,
        "Package Exports": test_package_exports,
        "Game Logic": test_game_logic_with_renderer,
    }

    all_passed = True
    for name, test in tests.items():
        try:
            test()
            print(f"  {name}: ✓ PASS")
        except Exception as e:
            print(f"  {name}: ✗ FAIL ({e})")
            all_passed = False

    print("="*60)

    if all_passed:
        print("\n🎉 All tests passed! Ready to play TicTacToe.\n")
        return 0
    else:
        print("\n⚠ Some tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
