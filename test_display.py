"""
Tests for the board renderer.
"""

import numpy as np
import pytest
from PIL import Image

from display.config import DisplayConfig
from display.renderer import BoardRenderer
from logic.board import Board, Coordinate, Mark
from logic.win_checker import WinChecker


@pytest.fixture
def renderer():
    return BoardRenderer()


@pytest.fixture
def board():
    board = Board()
    board.set_tile(Coordinate(0, 0), Mark.X)
    board.set_tile(Coordinate(1, 1), Mark.O)
    return board


def test_to_grid(renderer, board):
    grid = renderer.to_grid(board)
    assert grid.shape == (3, 3)
    assert grid.tolist() == [
        ["X", "-", "-"],
        ["-", "O", "-"],
        ["-", "-", "-"],
    ]


def test_to_grid_empty_board(renderer):
    assert np.all(renderer.to_grid(Board()) == DisplayConfig.EMPTY_SYMBOL)


def test_render_text(renderer, board):
    lines = renderer.render_text(board).split("\n")

    # 3 lines per row plus 2 dividers
    assert len(lines) == 11
    assert [cell.strip() for cell in lines[1].split("|")] == ["X", "-", "-"]
    assert [cell.strip() for cell in lines[5].split("|")] == ["-", "O", "-"]
    assert [cell.strip() for cell in lines[9].split("|")] == ["-", "-", "-"]
    assert lines[3] == "-----------|-----------|-----------"


def test_render_image_size(renderer, board):
    image = renderer.render_image(board)
    assert isinstance(image, Image.Image)
    assert image.size == (renderer.board_size_px, renderer.board_size_px)
    assert image.mode == "RGB"


def test_board_size_follows_cell_size(board):
    class SmallCells(DisplayConfig):
        CELL_SIZE_PX = 50
        MARK_PADDING_PX = 10

    renderer = BoardRenderer(SmallCells())
    assert renderer.board_size_px == 150
    assert renderer.render_image(board).size == (150, 150)
    assert renderer.cell_at(149, 149) == Coordinate(2, 2)
    assert renderer.cell_at(150, 0) is None


def test_render_image_marks(renderer, board):
    image = renderer.render_image(board)
    cfg = DisplayConfig

    # X strokes cross at the cell center; O is a ring with an empty middle
    assert image.getpixel(renderer.cell_center(Coordinate(0, 0))) == cfg.X_COLOR
    assert image.getpixel(renderer.cell_center(Coordinate(1, 1))) == cfg.BACKGROUND_COLOR
    assert image.getpixel(renderer.cell_center(Coordinate(2, 2))) == cfg.BACKGROUND_COLOR

    # Grid line between column 0 and 1
    assert image.getpixel((cfg.CELL_SIZE_PX, cfg.CELL_SIZE_PX // 2)) == cfg.GRID_COLOR


def test_render_image_winning_line(renderer):
    board = Board()
    for col in range(3):
        board.set_tile(Coordinate(0, col), Mark.X)

    line = WinChecker().get_winning_line(board)
    image = renderer.render_image(board, winning_line=line)
    assert image.getpixel(renderer.cell_center(Coordinate(0, 1))) == DisplayConfig.WIN_LINE_COLOR


def test_save_image(renderer, board, tmp_path, capsys):
    path = tmp_path / "board.png"
    renderer.save_image(board, str(path))

    assert path.exists()
    with Image.open(path) as saved:
        assert saved.size == (renderer.board_size_px, renderer.board_size_px)
    assert "Saved:" in capsys.readouterr().out


@pytest.mark.parametrize("x, y, expected", [
    (0, 0, (0, 0)),
    (119, 0, (0, 0)),
    (120, 0, (0, 1)),
    (60, 250, (2, 0)),
    (359, 359, (2, 2)),
])
def test_cell_at(renderer, x, y, expected):
    assert renderer.cell_at(x, y) == Coordinate(*expected)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (360, 0), (0, 360)])
def test_cell_at_outside_board(renderer, x, y):
    assert renderer.cell_at(x, y) is None


def test_cell_center_round_trips_to_cell(renderer):
    for coord in Coordinate.all():
        assert renderer.cell_at(*renderer.cell_center(coord)) == coord
