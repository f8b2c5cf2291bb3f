"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Sequence, Tuple
from .board import Mark, Outcome


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical non-empty marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples).
    # Scan order matters: rows, then columns, then diagonals.
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def check_winner(self, grid: Sequence[Sequence[Mark]]) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            grid: The 3x3 board.

        Returns:
            The winning Mark of the first completed line, or None.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(grid, line)
            if winner is not None:
                return winner

        return None

    def _check_line(
        self,
        grid: Sequence[Sequence[Mark]],
        line: List[Tuple[int, int]]
    ) -> Optional[Mark]:
        """Return the mark filling the whole line, or None."""
        (r0, c0), (r1, c1), (r2, c2) = line
        first = grid[r0][c0]
        if first == Mark.EMPTY:
            return None

        if first == grid[r1][c1] == grid[r2][c2]:
            return first

        return None

    def is_full(self, grid: Sequence[Sequence[Mark]]) -> bool:
        """True when no cell is EMPTY."""
        return all(cell != Mark.EMPTY for row in grid for cell in row)

    def evaluate(self, grid: Sequence[Sequence[Mark]]) -> Outcome:
        """
        Classify a board.

        A completed line wins; otherwise a full board is a draw;
        otherwise the game is still in progress.
        """
        winner = self.check_winner(grid)

        if winner is not None:
            return Outcome.won_by(winner)
        if self.is_full(grid):
            return Outcome.DRAW

        return Outcome.NONE

    def get_winning_line(self, grid: Sequence[Sequence[Mark]]) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(grid, line) is not None:
                return list(line)
        return None
