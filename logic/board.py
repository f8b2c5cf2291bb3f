"""
Board values for TicTacToe.
Cell marks, game outcomes, and helpers for 3x3 grids.
"""

from enum import Enum
from typing import Optional, List, Sequence, Tuple

BOARD_SIZE = 3


class Mark(Enum):
    """The value a board cell can hold."""
    X = "X"
    O = "O"
    EMPTY = " "

    def opposite(self) -> "Mark":
        """Get the opposite player mark."""
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite")
        return Mark.O if self == Mark.X else Mark.X


class Outcome(Enum):
    """
    Result of a game.

    NONE means no result yet (game in progress), which is distinct
    from DRAW (board full, no completed line).
    """
    NONE = "none"
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"

    @classmethod
    def won_by(cls, mark: Mark) -> "Outcome":
        """Get the winning outcome for a player mark."""
        if mark == Mark.X:
            return cls.X_WINS
        if mark == Mark.O:
            return cls.O_WINS
        raise ValueError("EMPTY cannot win")

    @property
    def winner(self) -> Optional[Mark]:
        """The winning mark, or None for a draw or an unfinished game."""
        if self == Outcome.X_WINS:
            return Mark.X
        if self == Outcome.O_WINS:
            return Mark.O
        return None

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.NONE


# Read-only 3x3 snapshot handed to callers and to the AI
Grid = Tuple[Tuple[Mark, ...], ...]


def to_grid(cells: Sequence[Sequence[Mark]]) -> Grid:
    """
    Copy any 3x3 nested sequence of marks into an immutable Grid.

    Raises:
        ValueError: If the shape is not 3x3 or a cell is not a Mark.
    """
    if len(cells) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in cells):
        raise ValueError(f"Grid must be {BOARD_SIZE}x{BOARD_SIZE}")
    for row in cells:
        for cell in row:
            if not isinstance(cell, Mark):
                raise ValueError(f"Invalid cell value: {cell!r}")
    return tuple(tuple(row) for row in cells)


def empty_cells(grid: Sequence[Sequence[Mark]]) -> List[Tuple[int, int]]:
    """
    Get all empty cells on the board, in row-major order.

    Returns:
        List of (row, col) tuples.
    """
    empty = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if grid[row][col] == Mark.EMPTY:
                empty.append((row, col))
    return empty
