"""
Display module for TicTacToe.
Handles board drawing, status text and display settings.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
from .status import status_text, cell_label, format_board
