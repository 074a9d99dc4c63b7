"""
Game state for TicTacToe.
Tracks the board, whose turn it is, and the outcome.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


# TicTacToe is a 3x3 grid, stored row-major as 9 cells
BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE


class Player(Enum):
    """The two players in the game."""
    FIRST = "X"
    SECOND = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.SECOND if self == Player.FIRST else Player.FIRST

    @property
    def symbol(self) -> str:
        """The mark shown on the board for this player."""
        return self.value


class Status(Enum):
    """Classification of a board."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    TIE = "tie"


@dataclass(frozen=True)
class Outcome:
    """
    Result of a board: in progress, won by a player, or tied.

    `winner` is only set when status is WIN.
    """
    status: Status = Status.IN_PROGRESS
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(Status.IN_PROGRESS)

    @classmethod
    def win(cls, player: Player) -> "Outcome":
        return cls(Status.WIN, player)

    @classmethod
    def tie(cls) -> "Outcome":
        return cls(Status.TIE)

    @property
    def is_terminal(self) -> bool:
        """True once the game is decided (win or tie)."""
        return self.status != Status.IN_PROGRESS


# A cell is either empty (None) or holds the mark of a player
Cell = Optional[Player]
Board = List[Cell]


def index_to_cell(index: int) -> Tuple[int, int]:
    """Convert a board index (0-8) to (row, col)."""
    return divmod(index, BOARD_SIZE)


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a board index (0-8)."""
    return row * BOARD_SIZE + col


def empty_board() -> Board:
    return [None] * NUM_CELLS


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 9 cells of the board (row-major)
    - The player to move next
    - The outcome, which is always derived from the board
    """

    board: Board = field(default_factory=empty_board)

    # Player to move; frozen once the game is over
    turn: Player = Player.FIRST

    outcome: Outcome = field(default_factory=Outcome.in_progress)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def winner(self) -> Optional[Player]:
        return self.outcome.winner

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of board indices.
        """
        return [index for index, cell in enumerate(self.board) if cell is None]

    def count_marks(self) -> int:
        """Number of cells that hold a mark."""
        return NUM_CELLS - len(self.get_empty_cells())

    def copy(self) -> "GameState":
        """Create a copy of the game state that shares no mutable data."""
        return GameState(
            board=list(self.board),
            turn=self.turn,
            outcome=self.outcome,
        )
