"""
Board renderer for TicTacToe.
Draws a game state into a Pillow image and maps clicks back to cells.
"""

from typing import Optional, Sequence
from PIL import Image, ImageDraw

from logic.game_state import GameState, Player, BOARD_SIZE, NUM_CELLS, cell_to_index, index_to_cell
from .config import DisplayConfig


class BoardRenderer:
    """
    Renders the 3x3 board.

    The image is laid out as cells separated by grid lines, with a grid
    line on every outer edge too. See DisplayConfig.cell_bounds().
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        self.config = config or DisplayConfig()

    @property
    def size(self) -> int:
        return self.config.board_size_px

    def render(
        self,
        state: GameState,
        winning_line: Optional[Sequence[int]] = None
    ) -> Image.Image:
        """
        Draw the board.

        Args:
            state: The state to draw.
            winning_line: Indices to highlight, if the game was won.

        Returns:
            An RGB image of size x size pixels.
        """
        cfg = self.config
        image = Image.new("RGB", (self.size, self.size), cfg.SECONDARY_COLOR)
        draw = ImageDraw.Draw(image)

        highlighted = set(winning_line or ())

        for index in range(NUM_CELLS):
            left, top, right, bottom = cfg.cell_bounds(*index_to_cell(index))
            fill = cfg.WIN_CELL_COLOR if index in highlighted else cfg.CELL_COLOR
            draw.rectangle((left, top, right - 1, bottom - 1), fill=fill)

            mark = state.board[index]
            if mark is not None:
                self._draw_mark(draw, mark, left, top, right, bottom)

        if winning_line:
            self._draw_strike(draw, winning_line)

        return image

    def _draw_mark(self, draw: ImageDraw.ImageDraw, mark: Player,
                   left: int, top: int, right: int, bottom: int):
        cfg = self.config
        pad = cfg.MARK_PADDING_PX
        box = (left + pad, top + pad, right - 1 - pad, bottom - 1 - pad)

        if mark == Player.FIRST:
            draw.line((box[0], box[1], box[2], box[3]),
                      fill=cfg.PRIMARY_COLOR, width=cfg.MARK_LINE_WIDTH)
            draw.line((box[0], box[3], box[2], box[1]),
                      fill=cfg.PRIMARY_COLOR, width=cfg.MARK_LINE_WIDTH)
        else:
            draw.ellipse(box, outline=cfg.SECONDARY_COLOR, width=cfg.MARK_LINE_WIDTH)

    def _draw_strike(self, draw: ImageDraw.ImageDraw, line: Sequence[int]):
        """Draw the accent line through the centers of the winning cells."""
        start = self.cell_center(line[0])
        end = self.cell_center(line[-1])
        draw.line(start + end, fill=self.config.ACCENT_COLOR,
                  width=self.config.MARK_LINE_WIDTH // 2)

    def cell_center(self, index: int) -> tuple:
        left, top, right, bottom = self.config.cell_bounds(*index_to_cell(index))
        return ((left + right) // 2, (top + bottom) // 2)

    def cell_at(self, x: int, y: int) -> Optional[int]:
        """
        Find the cell under a pixel.

        Returns:
            The board index, or None for grid lines and points off the board.
        """
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                left, top, right, bottom = self.config.cell_bounds(row, col)
                if left <= x < right and top <= y < bottom:
                    return cell_to_index(row, col)
        return None
