"""
Game controller for TicTacToe.
Connects a front end to the rules engine and the AI opponent.
"""

import logging
import random
from typing import Callable, List, Optional, Tuple

from .ai_player import AIPlayer, Difficulty
from .config import GameConfig
from .board import Mark, Outcome
from .game_state import GameState
from .scoreboard import Scoreboard
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

# Called with (current_player, is_terminal, outcome) after every accepted move
Listener = Callable[[Mark, bool, Outcome], None]


class GameController:
    """
    Drives one game for a front end.

    Game flow:
    1. Human (X) moves through handle_move()
    2. Listeners are told the new status
    3. With auto-play on, the AI (O) answers through the same path
    4. Repeat until someone wins or it's a draw, then reset()

    Only one move is processed at a time. A handle_move() call made
    while another move is in flight (e.g. from a listener) is rejected.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        scoreboard: Optional[Scoreboard] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the controller.

        Args:
            config: Game settings (defaults if None).
            scoreboard: Optional tally updated once per finished game.
            rng: Random source for the AI.
        """
        self.config = config if config is not None else GameConfig()
        self.scoreboard = scoreboard

        self.game = GameState()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(
            player=self.config.AI_MARK,
            rng=rng,
            random_probability=self.config.MEDIUM_RANDOM_PROBABILITY,
            win_score=self.config.WIN_SCORE
        )

        self.difficulty = self.config.DEFAULT_DIFFICULTY
        self.auto_play = self.config.AUTO_PLAY

        self.winning_cells: List[Tuple[int, int]] = []
        self.is_processing_move = False
        self._listeners: List[Listener] = []

    def add_listener(self, listener: Listener):
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener):
        self._listeners.remove(listener)

    def set_difficulty(self, difficulty: Difficulty):
        self.difficulty = difficulty

    def set_auto_play(self, enabled: bool):
        self.auto_play = enabled

    @property
    def ai_mark(self) -> Mark:
        return self.ai.player

    def handle_move(self, row: int, col: int) -> bool:
        """
        Apply a move for whoever's turn it is.

        Returns:
            True if the move was accepted.
        """
        if self.is_processing_move:
            logger.debug("Move (%s, %s) ignored: another move is in progress", row, col)
            return False
        return self._process_move(row, col)

    def make_ai_move(self) -> Optional[Tuple[int, int]]:
        """
        Let the AI play if it is its turn.

        Returns:
            The move played, or None if the AI could not move.
        """
        if self.is_processing_move:
            return None
        if self.game.is_terminal or self.game.current_player != self.ai_mark:
            return None

        move = self.ai.choose_move(self.game.grid, self.difficulty)
        self._process_move(*move)
        return move

    def reset(self):
        """Start a fresh game. Settings, listeners and scores are kept."""
        self.game.reset()
        self.winning_cells = []
        self.is_processing_move = False

    def _process_move(self, row: int, col: int) -> bool:
        if not self.game.apply_move(row, col):
            return False

        was_processing = self.is_processing_move
        self.is_processing_move = True
        try:
            if self.game.is_terminal:
                self._finish_game()

            self._notify()

            if (self.auto_play
                    and not self.game.is_terminal
                    and self.game.current_player == self.ai_mark):
                move = self.ai.choose_move(self.game.grid, self.difficulty)
                self._process_move(*move)
        finally:
            self.is_processing_move = was_processing

        return True

    def _finish_game(self):
        if self.game.winner is not None and self.config.HIGHLIGHT_WINNING_CELLS:
            self.winning_cells = self.win_checker.get_winning_line(self.game.grid) or []

        if self.scoreboard is not None:
            self.scoreboard.record(self.game.outcome)

        logger.debug("Game over: %s", self.game.outcome.value)

    def _notify(self):
        for listener in list(self._listeners):
            listener(self.game.current_player, self.game.is_terminal, self.game.outcome)
