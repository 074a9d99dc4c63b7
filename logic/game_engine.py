"""
Game engine for TicTacToe.
Owns one game's state and is the only thing allowed to change it.
"""

from typing import List, Optional, Union
from .game_state import GameState
from .move_validator import MoveValidator, RejectionReason
from .win_checker import Line, WinChecker


class GameEngine:
    """
    Runs a single game session.

    Game flow:
    1. A new engine starts with an empty board and X to move
    2. The caller submits board indices through apply_move()
    3. Each accepted move recomputes the outcome from the board
    4. Once someone wins or the board fills up, moves are refused
    5. reset() starts over from the initial state

    Callers only ever see copies of the state.
    """

    def __init__(self):
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self._state = GameState()

    def get_state(self) -> GameState:
        """Get a snapshot of the current state."""
        return self._state.copy()

    def apply_move(self, index: int) -> Union[GameState, RejectionReason]:
        """
        Place the current player's mark at the given index.

        Args:
            index: Board index (0-8), row-major.

        Returns:
            A snapshot of the updated state, or the RejectionReason
            if the move was refused. A refused move changes nothing.
        """
        result = self.validator.validate_move(self._state, index)
        if not result.is_valid:
            return result.reason

        state = self._state
        state.board[index] = state.turn
        state.outcome = self.win_checker.compute_outcome(state.board)

        # Turn stays with the last mover once the game is decided
        if not state.outcome.is_terminal:
            state.turn = state.turn.opposite()

        return self.get_state()

    def reset(self) -> GameState:
        """Start a new game, discarding the old one entirely."""
        self._state = GameState()
        return self.get_state()

    def is_playable(self, index: int) -> bool:
        """True if apply_move(index) would be accepted right now."""
        return self.validator.validate_move(self._state, index).is_valid

    def get_valid_moves(self) -> List[int]:
        return self.validator.get_valid_moves(self._state)

    @property
    def winning_line(self) -> Optional[Line]:
        return self.win_checker.get_winning_line(self._state.board)
