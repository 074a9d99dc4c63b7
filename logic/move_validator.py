"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState, NUM_CELLS


class RejectionReason(Enum):
    """Why a move was refused. Rejections are routine, never fatal."""
    GAME_OVER = "game_over"
    INVALID_INDEX = "invalid_index"
    CELL_OCCUPIED = "cell_occupied"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[RejectionReason] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Game must not be over
    2. Index must be on the board (0-8)
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Board index to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                reason=RejectionReason.GAME_OVER,
                error_message="Game is already over!"
            )

        # bool is an int subclass but never a board index
        if (not isinstance(index, int) or isinstance(index, bool)
                or not 0 <= index < NUM_CELLS):
            return ValidationResult(
                is_valid=False,
                reason=RejectionReason.INVALID_INDEX,
                error_message=f"Invalid position {index!r}. Must be 0-{NUM_CELLS - 1}."
            )

        # Check if cell is empty
        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                reason=RejectionReason.CELL_OCCUPIED,
                error_message=f"Cell {index} is already occupied by {occupant.symbol}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of playable board indices, empty once the game is over.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
