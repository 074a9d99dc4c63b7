"""
Text shown to the players: the status line, cell labels and a console board.
"""

from typing import Optional
from logic.game_state import GameState, Player, Status, BOARD_SIZE, cell_to_index


def status_text(state: GameState) -> str:
    """Status line for the current state, e.g. "X to play"."""
    outcome = state.outcome
    if outcome.status == Status.WIN:
        return f"Winner: {outcome.winner.symbol}"
    if outcome.status == Status.TIE:
        return "It's a tie!"
    return f"{state.turn.symbol} to play"


def cell_label(cell: Optional[Player]) -> str:
    """Accessible description of one cell."""
    if cell is None:
        return "Empty cell"
    return f"Cell {cell.symbol}"


def format_board(state: GameState) -> str:
    """Draw the board as text for the console, X and O on a 3x3 grid."""
    rows = []
    for row in range(BOARD_SIZE):
        marks = []
        for col in range(BOARD_SIZE):
            cell = state.board[cell_to_index(row, col)]
            marks.append(cell.symbol if cell else " ")
        rows.append(" " + " | ".join(marks))
    return "\n---+---+---\n".join(rows)
