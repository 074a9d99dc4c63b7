"""
Display configuration for TicTacToe.
All the settings for drawing the board and the window around it.
"""

from typing import Tuple


class DisplayConfig:
    """
    Configuration class for display settings.

    Change the class values for a new default look, or pass
    overrides to the constructor, e.g. DisplayConfig(CELL_SIZE_PX=80).
    """

    # ==================== BOARD GEOMETRY ====================
    # Size of one cell in pixels
    CELL_SIZE_PX = 110

    # Width of the grid lines between cells
    GRID_LINE_WIDTH = 4

    # Space between a cell edge and the mark drawn inside it
    MARK_PADDING_PX = 22
    MARK_LINE_WIDTH = 10

    # ==================== COLORS ====================
    PRIMARY_COLOR = "#1976d2"     # X marks
    SECONDARY_COLOR = "#424242"   # O marks, grid and text
    ACCENT_COLOR = "#fbc02d"      # Winning line, restart button

    BACKGROUND_COLOR = "#ffffff"
    CELL_COLOR = "#f5f5f5"
    WIN_CELL_COLOR = "#fff3c4"

    # ==================== WINDOW ====================
    WINDOW_TITLE = "Tic Tac Toe"
    TITLE_FONT = ("Segoe UI", 20, "bold")
    STATUS_FONT = ("Segoe UI", 14)
    BUTTON_FONT = ("Segoe UI", 11, "bold")

    # ==================== TEXT ====================
    NEW_GAME_TEXT = "Start New Game"
    RESTART_TEXT = "Restart Game"

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not name.isupper() or not hasattr(type(self), name):
                raise ValueError(f"Unknown display setting: {name}")
            setattr(self, name, value)

        if self.CELL_SIZE_PX <= 0:
            raise ValueError(f"CELL_SIZE_PX must be positive, got {self.CELL_SIZE_PX}")
        if 2 * self.MARK_PADDING_PX >= self.CELL_SIZE_PX:
            raise ValueError("MARK_PADDING_PX leaves no room for marks")

    @property
    def board_size_px(self) -> int:
        """Total width (and height) of the rendered board."""
        return 3 * self.CELL_SIZE_PX + 4 * self.GRID_LINE_WIDTH

    def cell_bounds(self, row: int, col: int) -> Tuple[int, int, int, int]:
        """
        Pixel box of a cell, inside the grid lines.

        Returns:
            (left, top, right, bottom), right/bottom exclusive.
        """
        step = self.CELL_SIZE_PX + self.GRID_LINE_WIDTH
        left = self.GRID_LINE_WIDTH + col * step
        top = self.GRID_LINE_WIDTH + row * step
        return left, top, left + self.CELL_SIZE_PX, top + self.CELL_SIZE_PX
