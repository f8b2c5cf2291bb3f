"""
Game state management for TicTacToe.
Tracks the board, current player, and game result.
"""

import logging
from typing import Optional, List, Sequence, Tuple

from .board import BOARD_SIZE, Grid, Mark, Outcome, empty_cells, to_grid
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class GameState:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 3x3 board
    - Current player (X always moves first)
    - Game result (in progress, won by a mark, or draw)

    The state only changes through apply_move() and reset().
    current_player keeps flipping after the move that ends the game,
    so it is only meaningful while is_terminal is False.
    """

    def __init__(self):
        self._validator = MoveValidator()
        self._win_checker = WinChecker()
        self._board: List[List[Mark]] = []
        self._current_player = Mark.X
        self._outcome = Outcome.NONE
        self._move_count = 0
        self.reset()

    @classmethod
    def from_grid(cls, cells: Sequence[Sequence[Mark]], current_player: Mark = Mark.X) -> "GameState":
        """
        Build a state from an arbitrary board, e.g. a position set up for a test.

        The result is evaluated with the normal scan order, so a malformed
        board with several lines reports the first line found.
        """
        if current_player == Mark.EMPTY:
            raise ValueError("current_player must be X or O")
        state = cls()
        state._board = [list(row) for row in to_grid(cells)]
        state._current_player = current_player
        state._move_count = sum(
            1 for row in state._board for cell in row if cell != Mark.EMPTY
        )
        state._outcome = state._win_checker.evaluate(state._board)
        return state

    @property
    def current_player(self) -> Mark:
        return self._current_player

    @property
    def is_terminal(self) -> bool:
        return self._outcome.is_terminal

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def winner(self) -> Optional[Mark]:
        """The winning mark; None while in progress or after a draw."""
        return self._outcome.winner

    @property
    def is_draw(self) -> bool:
        return self._outcome == Outcome.DRAW

    @property
    def move_count(self) -> int:
        """How many moves have been accepted since the last reset."""
        return self._move_count

    @property
    def grid(self) -> Grid:
        """Immutable snapshot of the board."""
        return to_grid(self._board)

    def cell(self, row: int, col: int) -> Mark:
        return self._board[row][col]

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        return empty_cells(self._board)

    def apply_move(self, row: int, col: int) -> bool:
        """
        Place the current player's mark at the given position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            True if the move was accepted, False otherwise (nothing changes).
        """
        result = self._validator.validate_move(self, row, col)
        if not result.is_valid:
            logger.debug("Rejected move (%s, %s): %s", row, col, result.error_message)
            return False
