"""
Match simulation for TicTacToe.
Plays many games of an X policy against the AI and tallies the results.
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from .ai_player import AIPlayer, Difficulty
from .board import Mark, Outcome
from .game_state import GameState

logger = logging.getLogger(__name__)

X_POLICIES = ("random", "hard")

# Outcome codes stored in SimulationResult.outcomes
OUTCOME_CODES = {
    Outcome.X_WINS: 0,
    Outcome.O_WINS: 1,
    Outcome.DRAW: 2,
}


@dataclass
class SimulationResult:
    """Outcomes of a batch of simulated games (O is the AI)."""
    difficulty: Difficulty
    x_policy: str
    outcomes: np.ndarray

    def _counts(self) -> np.ndarray:
        return np.bincount(self.outcomes, minlength=len(OUTCOME_CODES))

    @property
    def games(self) -> int:
        return int(self.outcomes.size)

    @property
    def x_wins(self) -> int:
        return int(self._counts()[OUTCOME_CODES[Outcome.X_WINS]])

    @property
    def o_wins(self) -> int:
        return int(self._counts()[OUTCOME_CODES[Outcome.O_WINS]])

    @property
    def draws(self) -> int:
        return int(self._counts()[OUTCOME_CODES[Outcome.DRAW]])

    @property
    def o_loss_rate(self) -> float:
        """Share of games the AI lost."""
        return float(np.mean(self.outcomes == OUTCOME_CODES[Outcome.X_WINS]))

    def as_dict(self) -> Dict[str, object]:
        return {
            "difficulty": self.difficulty.name.lower(),
            "x_policy": self.x_policy,
            "games": self.games,
            "x_wins": self.x_wins,
            "o_wins": self.o_wins,
            "draws": self.draws,
            "o_loss_rate": self.o_loss_rate,
        }


def play_game(x_player: AIPlayer, x_difficulty: Difficulty,
              o_player: AIPlayer, o_difficulty: Difficulty) -> Outcome:
    """Play one full game from an empty board and return its outcome."""
    game = GameState()
    players = {Mark.X: (x_player, x_difficulty), Mark.O: (o_player, o_difficulty)}

    while not game.is_terminal:
        player, difficulty = players[game.current_player]
        row, col = player.choose_move(game.grid, difficulty)
        if not game.apply_move(row, col):
            raise RuntimeError(f"AI produced an illegal move: ({row}, {col})")

    return game.outcome


def simulate_games(
    n_games: int,
    difficulty: Difficulty = Difficulty.HARD,
    x_policy: str = "random",
    seed: Optional[int] = None
) -> SimulationResult:
    """
    Play n_games of X against the AI playing O.

    Args:
        n_games: Number of games (at least 1).
        difficulty: The AI's difficulty.
        x_policy: "random" (uniform random X) or "hard" (minimax X).
        seed: Makes the whole run reproducible.

    Returns:
        SimulationResult with one outcome code per game.
    """
    if n_games < 1:
        raise ValueError("n_games must be at least 1")
    if x_policy not in X_POLICIES:
        raise ValueError(f"x_policy must be one of {X_POLICIES}")

    rng = random.Random(seed)
    x_player = AIPlayer(player=Mark.X, rng=rng)
    o_player = AIPlayer(player=Mark.O, rng=rng)
    x_difficulty = Difficulty.EASY if x_policy == "random" else Difficulty.HARD

    outcomes = np.empty(n_games, dtype=np.int64)
    for i in range(n_games):
        outcome = play_game(x_player, x_difficulty, o_player, difficulty)
        outcomes[i] = OUTCOME_CODES[outcome]

    result = SimulationResult(difficulty=difficulty, x_policy=x_policy, outcomes=outcomes)
    logger.debug("Simulation finished: %s", result.as_dict())
    return result
