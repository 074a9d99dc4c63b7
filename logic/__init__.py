"""
Logic module for TicTacToe.
Handles game state, rules, and outcome detection.
"""

from .game_state import GameState, Player, Outcome, Status
from .move_validator import MoveValidator, RejectionReason, ValidationResult
from .win_checker import WinChecker
from .game_engine import GameEngine
