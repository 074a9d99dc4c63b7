"""
TicTacToe
=========
Two players take turns marking a 3x3 board on one screen.
The game rules live in `logic`, the drawing in `display`,
and `ui.py` opens the window.

First player is X, second player is O.
"""

__version__ = "1.0.0"
