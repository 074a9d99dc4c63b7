"""
Win checker for TicTacToe.
Decides from the board alone whether a player has won or the game is a tie.
"""

from typing import Optional, Sequence, Tuple
from .game_state import Board, Outcome, Player


Line = Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally).

    Every method is a pure function of the board, so the checker
    holds no state and can be shared freely.
    """

    # All possible winning lines, checked in this order
    WINNING_LINES: Tuple[Line, ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def check_winner(self, board: Sequence[Optional[Player]]) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The 9 cells of the board.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Sequence[Optional[Player]]) -> Optional[Line]:
        """
        Get the first completed line, in WINNING_LINES order.

        Args:
            board: The 9 cells of the board.

        Returns:
            The winning line as a tuple of indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None

    def _check_line(
        self,
        board: Sequence[Optional[Player]],
        line: Line
    ) -> Optional[Player]:
        """
        Check if a single line has a winner.

        Returns:
            The Player holding all 3 cells, None otherwise.
        """
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def check_tie(self, board: Sequence[Optional[Player]]) -> bool:
        """
        Check if the game is a tie.

        A tie needs every cell filled AND no completed line.
        A full board with a line is a win, never a tie.
        """
        if self.check_winner(board) is not None:
            return False
        return all(cell is not None for cell in board)

    def compute_outcome(self, board: Board) -> Outcome:
        """
        Classify the board as a win, a tie, or still in progress.

        Args:
            board: The 9 cells of the board.

        Returns:
            The Outcome for this board.
        """
        winner = self.check_winner(board)

        if winner is not None:
            return Outcome.win(winner)
        if self.check_tie(board):
            return Outcome.tie()
        return Outcome.in_progress()
