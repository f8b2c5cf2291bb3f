"""
AI player for TicTacToe.
Picks moves at random or with the Minimax algorithm, depending on difficulty.
"""

import logging
import random
from enum import Enum
from functools import lru_cache
from typing import Dict, Optional, Tuple, List, Sequence

from .board import Grid, Mark, Outcome, empty_cells, to_grid
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

Move = Tuple[int, int]

_win_checker = WinChecker()


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Coin flip between random and minimax
    HARD = 3      # Full minimax

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """
        Parse a difficulty name, case-insensitively.
        Unknown names fall back to EASY.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            logger.debug("Unknown difficulty %r, using EASY", name)
            return cls.EASY


def _place(board: Grid, row: int, col: int, mark: Mark) -> Grid:
    """New board with one more mark; the original is left untouched."""
    cells = [list(r) for r in board]
    cells[row][col] = mark
    return tuple(tuple(r) for r in cells)


@lru_cache(maxsize=None)
def _minimax(
    board: Grid,
    player: Mark,
    depth: int,
    is_maximizing: bool,
    win_score: int
) -> int:
    """
    Exhaustive minimax over the remaining game tree.

    Args:
        board: Position to evaluate.
        player: The AI mark (the maximizing side).
        depth: Plies played since the move being scored.
        is_maximizing: True if it is the AI's turn at this node.
        win_score: Base score for a win.

    Returns:
        win_score - depth for an AI win, depth - win_score for a loss, 0 for a draw.
    """
    outcome = _win_checker.evaluate(board)
    if outcome == Outcome.DRAW:
        return 0
    if outcome != Outcome.NONE:
        if outcome.winner == player:
            return win_score - depth
        return depth - win_score

    mover = player if is_maximizing else player.opposite()
    scores = [
        _minimax(_place(board, row, col, mover), player, depth + 1, not is_maximizing, win_score)
        for row, col in empty_cells(board)
    ]
    return max(scores) if is_maximizing else min(scores)


class AIPlayer:
    """
    An AI that plays TicTacToe.

    EASY picks a uniformly random empty cell, HARD plays the Minimax
    optimum (never loses), MEDIUM flips a coin on every call between
    the two.
    """

    def __init__(
        self,
        player: Mark = Mark.O,
        rng: Optional[random.Random] = None,
        random_probability: float = 0.5,
        win_score: int = 10
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O).
            rng: Random source; the module-level generator if None.
            random_probability: Chance that MEDIUM plays a random move.
            win_score: Base score of a win in the search.
        """
        if player == Mark.EMPTY:
            raise ValueError("AI must play X or O")
        if not 0.0 <= random_probability <= 1.0:
            raise ValueError("random_probability must be between 0 and 1")

        self.player = player
        self.rng = rng if rng is not None else random
        self.random_probability = random_probability
        self.win_score = win_score

    def choose_move(self, grid: Sequence[Sequence[Mark]], difficulty: Difficulty) -> Move:
        """
        Choose a move for the AI's mark.

        Args:
            grid: Snapshot of the board; it is never modified.
            difficulty: Move selection policy.

        Returns:
            (row, col) of the chosen cell.

        Raises:
            ValueError: If the board has no empty cell or is malformed.
        """
        board = to_grid(grid)
        self._require_moves(board)

        if difficulty == Difficulty.EASY:
            move = self.get_random_move(board)
        elif difficulty == Difficulty.MEDIUM:
            if self.rng.random() < self.random_probability:
                move = self.get_random_move(board)
            else:
                move = self.get_best_move(board)
        elif difficulty == Difficulty.HARD:
            move = self.get_best_move(board)
        else:
            raise ValueError(f"Unknown difficulty: {difficulty!r}")

        logger.debug("AI (%s, %s) chose %s", self.player.value, difficulty.name, move)
        return move

    def get_random_move(self, grid: Sequence[Sequence[Mark]]) -> Move:
        """Get a uniformly random empty cell."""
        valid_moves = self._require_moves(to_grid(grid))
        return self.rng.choice(valid_moves)

    def get_best_move(self, grid: Sequence[Sequence[Mark]]) -> Move:
        """
        Get the Minimax-optimal move.

        Ties go to the first cell in row-major order.
        """
        scores = self.score_moves(grid)

        best_score = None
        best_move = None
        for move, score in scores.items():
            if best_score is None or score > best_score:
                best_score = score
                best_move = move

        logger.debug("Best move: %s (score: %s)", best_move, best_score)
        return best_move

    def score_moves(self, grid: Sequence[Sequence[Mark]]) -> Dict[Move, int]:
        """
        Score every empty cell for the AI's mark.

        Returns:
            Dict of (row, col) -> minimax value, in row-major order.
        """
        board = to_grid(grid)
        valid_moves = self._require_moves(board)

        scores = {}
        for row, col in valid_moves:
            # Try this move, then it is the opponent's turn at depth 0
            child = _place(board, row, col, self.player)
            scores[(row, col)] = _minimax(child, self.player, 0, False, self.win_score)
        return scores

    def get_move_suggestion(self, grid: Sequence[Sequence[Mark]]) -> str:
        """
        Get a human-readable move suggestion.

        Returns:
            A string describing the suggested move.
        """
        if not empty_cells(grid):
            return "No moves available!"

        row, col = self.get_best_move(grid)
        return f"Place {self.player.value} at position ({row}, {col})"

    def _require_moves(self, grid: Sequence[Sequence[Mark]]) -> List[Move]:
        valid_moves = empty_cells(grid)
        if not valid_moves:
            raise ValueError("No legal moves available")
        return valid_moves
