"""
Board renderer for the TicTacToe engine.
Turns a Board into a numpy grid, a text board, or a Pillow image.
"""

import numpy as np
from PIL import Image, ImageDraw
from typing import Optional, Sequence, Tuple

from logic.board import Board, Coordinate, Mark, BOARD_SIZE
from .config import DisplayConfig


class BoardRenderer:
    """
    Draws the board for the console and the window.

    Only reads the board; rendering never changes the game.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()

    @property
    def board_size_px(self) -> int:
        """Width and height of the board image."""
        return self.config.CELL_SIZE_PX * BOARD_SIZE

    def to_grid(self, board: Board) -> np.ndarray:
        """
        Convert the board to a 3x3 array of one-character symbols.

        Returns:
            numpy array of "X", "O", or the empty symbol.
        """
        grid = np.full((BOARD_SIZE, BOARD_SIZE), self.config.EMPTY_SYMBOL, dtype="<U1")
        for coord in Coordinate.all():
            mark = board.value_at(coord)
            if mark is not None:
                grid[coord.row, coord.col] = mark.value
        return grid

    def render_text(self, board: Board) -> str:
        """Render the board as text for the console."""
        width = self.config.TEXT_CELL_WIDTH
        spacer = "|".join([" " * width] * BOARD_SIZE)
        divider = "|".join(["-" * width] * BOARD_SIZE)

        lines = []
        for row_index, row in enumerate(self.to_grid(board)):
            lines.append(spacer)
            lines.append("|".join(symbol.center(width) for symbol in row))
            lines.append(spacer)
            if row_index < BOARD_SIZE - 1:
                lines.append(divider)
        return "\n".join(lines)

    def render_image(
        self,
        board: Board,
        winning_line: Optional[Sequence[Coordinate]] = None
    ) -> Image.Image:
        """
        Draw the board as an RGB image.

        Args:
            board: The board to draw.
            winning_line: Optional line to stroke over the marks.

        Returns:
            PIL image, board_size_px square.
        """
        cfg = self.config
        size = self.board_size_px

        image = Image.new("RGB", (size, size), cfg.BACKGROUND_COLOR)
        draw = ImageDraw.Draw(image)

        # Grid lines
        for i in range(1, BOARD_SIZE):
            offset = i * cfg.CELL_SIZE_PX
            draw.line([(offset, 0), (offset, size)], fill=cfg.GRID_COLOR, width=cfg.LINE_WIDTH_PX)
            draw.line([(0, offset), (size, offset)], fill=cfg.GRID_COLOR, width=cfg.LINE_WIDTH_PX)

        grid = self.to_grid(board)
        for coord in Coordinate.all():
            symbol = grid[coord.row, coord.col]
            if symbol == Mark.X.value:
                self._draw_x(draw, coord)
            elif symbol == Mark.O.value:
                self._draw_o(draw, coord)

        if winning_line:
            start = self.cell_center(winning_line[0])
            end = self.cell_center(winning_line[-1])
            draw.line([start, end], fill=cfg.WIN_LINE_COLOR, width=cfg.MARK_WIDTH_PX)

        return image

    def save_image(
        self,
        board: Board,
        path: str,
        winning_line: Optional[Sequence[Coordinate]] = None
    ):
        """Render the board and write it to disk."""
        image = self.render_image(board, winning_line)
        image.save(path, format=self.config.IMAGE_FORMAT)
        print(f"Saved: {path}")

    def cell_center(self, coord: Coordinate) -> Tuple[int, int]:
        """Pixel (x, y) of the center of a cell."""
        half = self.config.CELL_SIZE_PX // 2
        return (
            coord.col * self.config.CELL_SIZE_PX + half,
            coord.row * self.config.CELL_SIZE_PX + half,
        )

    def cell_at(self, x: int, y: int) -> Optional[Coordinate]:
        """
        Find the cell under a pixel of the board image.

        Returns:
            The Coordinate, or None if the pixel is outside the board.
        """
        size = self.board_size_px
        if not (0 <= x < size and 0 <= y < size):
            return None
        return Coordinate(int(y) // self.config.CELL_SIZE_PX, int(x) // self.config.CELL_SIZE_PX)

    def _cell_box(self, coord: Coordinate) -> Tuple[int, int, int, int]:
        """Inner box of a cell (left, top, right, bottom) after padding."""
        cfg = self.config
        left = coord.col * cfg.CELL_SIZE_PX + cfg.MARK_PADDING_PX
        top = coord.row * cfg.CELL_SIZE_PX + cfg.MARK_PADDING_PX
        right = (coord.col + 1) * cfg.CELL_SIZE_PX - cfg.MARK_PADDING_PX
        bottom = (coord.row + 1) * cfg.CELL_SIZE_PX - cfg.MARK_PADDING_PX
        return left, top, right, bottom

    def _draw_x(self, draw: ImageDraw.ImageDraw, coord: Coordinate):
        left, top, right, bottom = self._cell_box(coord)
        width = self.config.MARK_WIDTH_PX
        draw.line([(left, top), (right, bottom)], fill=self.config.X_COLOR, width=width)
        draw.line([(left, bottom), (right, top)], fill=self.config.X_COLOR, width=width)

    def _draw_o(self, draw: ImageDraw.ImageDraw, coord: Coordinate):
        draw.ellipse(
            self._cell_box(coord),
            outline=self.config.O_COLOR,
            width=self.config.MARK_WIDTH_PX
        )


# Quick test
if __name__ == "__main__":
    print("Testing BoardRenderer...")

    board = Board()
    board.set_tile(Coordinate(0, 0), Mark.X)
    board.set_tile(Coordinate(1, 1), Mark.O)

    renderer = BoardRenderer()
    print(renderer.render_text(board))
    print(f"Image size: {renderer.render_image(board).size}")

    print("\nBoardRenderer test done!")
