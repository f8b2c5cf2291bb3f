"""
Logic module for TicTacToe.
Handles game state, rules, and the AI opponent.
"""

__version__ = "1.0.0"

from .board import Mark, Outcome, Grid
from .game_state import GameState
from .move_validator import MoveValidator, InvalidMove, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer, Difficulty
from .config import GameConfig
from .scoreboard import Scoreboard
from .controller import GameController
from .simulation import simulate_games, SimulationResult
