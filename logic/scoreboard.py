"""
Score tally across the games of a session.
"""

from .board import Outcome


class Scoreboard:
    """Counts X wins, O wins and draws."""

    def __init__(self):
        self.x_wins = 0
        self.o_wins = 0
        self.draws = 0

    def record(self, outcome: Outcome):
        """Count a finished game. Outcome.NONE is ignored."""
        if outcome == Outcome.X_WINS:
            self.x_wins += 1
        elif outcome == Outcome.O_WINS:
            self.o_wins += 1
        elif outcome == Outcome.DRAW:
            self.draws += 1

    @property
    def games_played(self) -> int:
        return self.x_wins + self.o_wins + self.draws

    def reset(self):
        self.x_wins = 0
        self.o_wins = 0
        self.draws = 0

    def summary(self) -> str:
        return f"X: {self.x_wins} | O: {self.o_wins} | Draws: {self.draws}"
