"""
Display configuration for the TicTacToe engine.
Settings for the text board and the board image.
"""


class DisplayConfig:
    """
    Configuration class for board rendering.
    Change these values to restyle the board!
    """

    # ==================== TEXT SETTINGS ====================
    # Shown for an empty tile
    EMPTY_SYMBOL = "-"

    # Width of one text cell (characters)
    TEXT_CELL_WIDTH = 11

    # ==================== IMAGE SETTINGS ====================
    # Size of each cell in the board image (pixels)
    CELL_SIZE_PX = 120

    LINE_WIDTH_PX = 4
    MARK_WIDTH_PX = 10
    MARK_PADDING_PX = 24  # Space between a mark and its cell edge

    # Colors (RGB)
    BACKGROUND_COLOR = (22, 33, 62)
    GRID_COLOR = (0, 212, 255)
    X_COLOR = (248, 113, 113)
    O_COLOR = (16, 185, 129)
    WIN_LINE_COLOR = (255, 215, 0)

    # Used by save_image()
    IMAGE_FORMAT = "PNG"
