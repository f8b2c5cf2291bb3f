"""
Game configuration for TicTacToe.
All the settings for the AI opponent and the game controller.
"""

from .ai_player import Difficulty
from .board import Mark


class GameConfig:
    """
    Configuration class for game settings.
    Class attributes are the defaults; pass keyword overrides for one session.
    """

    # ==================== AI SETTINGS ====================
    DEFAULT_DIFFICULTY = Difficulty.MEDIUM

    # The AI always answers as O, the human plays X
    AI_MARK = Mark.O

    # Share of MEDIUM moves that are random instead of minimax
    MEDIUM_RANDOM_PROBABILITY = 0.5

    # Terminal score base: a win scores WIN_SCORE - depth
    WIN_SCORE = 10

    # ==================== CONTROLLER SETTINGS ====================
    # Answer every human move with an AI move
    AUTO_PLAY = True

    # Report the completed line when a game is won
    HIGHLIGHT_WINNING_CELLS = True

    # ==================== SIMULATION SETTINGS ====================
    SIMULATION_GAMES = 200
    SIMULATION_SEED = None

    def __init__(self, **overrides):
        for key, value in overrides.items():
            if not key.isupper() or not hasattr(type(self), key):
                raise ValueError(f"Unknown setting: {key}")
            setattr(self, key, value)

        if self.AI_MARK == Mark.EMPTY:
            raise ValueError("AI_MARK must be X or O")
        if not 0.0 <= self.MEDIUM_RANDOM_PROBABILITY <= 1.0:
            raise ValueError("MEDIUM_RANDOM_PROBABILITY must be between 0 and 1")

    @property
    def human_mark(self) -> Mark:
        return self.AI_MARK.opposite()
