"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

import operator
from enum import Enum
from typing import Optional, Tuple, List, Sequence, TYPE_CHECKING
from dataclasses import dataclass

from .board import BOARD_SIZE, Mark, empty_cells

if TYPE_CHECKING:
    from .game_state import GameState


class InvalidMove(Enum):
    """Why a move was rejected."""
    GAME_OVER = "game_over"
    OUT_OF_RANGE = "out_of_range"
    OCCUPIED = "occupied"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[InvalidMove] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Row and column must be on the board (0-2)
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        game_state: "GameState",
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid, the InvalidMove reason and a message.
        """
        # Check if game is over
        if game_state.is_terminal:
            return ValidationResult(
                is_valid=False,
                error=InvalidMove.GAME_OVER,
                error_message="Game is already over!"
            )

        # Check if row/col are in valid range
        if not self._in_range(row, col):
            return ValidationResult(
                is_valid=False,
                error=InvalidMove.OUT_OF_RANGE,
                error_message=f"Invalid position ({row}, {col}). Must be 0-2."
            )

        # Check if cell is empty
        occupant = game_state.cell(row, col)
        if occupant != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error=InvalidMove.OCCUPIED,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def _in_range(self, row, col) -> bool:
        coords = []
        for value in (row, col):
            # bool is an int subclass but never a coordinate
            if isinstance(value, bool):
                return False
            try:
                coords.append(operator.index(value))
            except TypeError:
                return False
        return all(0 <= value < BOARD_SIZE for value in coords)

    def get_valid_moves(self, grid: Sequence[Sequence[Mark]]) -> List[Tuple[int, int]]:
        """
        Get all empty cells of a board in row-major order.

        Args:
            grid: The 3x3 board.

        Returns:
            List of (row, col) positions.
        """
        return empty_cells(grid)
