"""
Console front end for TicTacToe.

This script ties together:
- Logic (game state, move validation, AI)
- Game controller (auto-play, listeners, scores)
- Match simulation

Run this script to play TicTacToe against the computer!
"""

import logging
import sys
from typing import Optional

from logic.ai_player import AIPlayer, Difficulty
from logic.config import GameConfig
from logic.controller import GameController
from logic.board import Mark, Outcome
from logic.move_validator import MoveValidator
from logic.scoreboard import Scoreboard
from logic.simulation import simulate_games


class TicTacToeConsole:
    """
    Console game loop.

    Game flow:
    1. Human (X) types a move as "row col"
    2. The controller applies it and, with auto-play, answers as O
    3. The board and status are printed after every move
    4. Repeat until someone wins or it's a draw
    """

    def __init__(self, config: GameConfig):
        self.config = config
        self.scoreboard = Scoreboard()
        self.controller = GameController(config, scoreboard=self.scoreboard)
        self.controller.add_listener(self._on_state_change)
        self.validator = MoveValidator()
        self.is_running = False

    def _on_state_change(self, current_player: Mark, is_over: bool, outcome: Outcome):
        print()
        print(self.controller.game.render())
        if is_over:
            print(f"\n{self.controller.game.status_text()}")
            if self.controller.winning_cells:
                print(f"Winning line: {self.controller.winning_cells}")
            print(self.scoreboard.summary())
        else:
            print(f"\nPlayer {current_player.value}'s turn")

    def start(self):
        """Start the game."""
        print("\n" + "=" * 60)
        print("   TicTacToe")
        print(f"   Difficulty: {self.controller.difficulty.name.lower()}")
        print(f"   Auto-play: {'on' if self.controller.auto_play else 'off'}")
        print("=" * 60)
        print("Enter moves as 'row col' (0-2). 'h' hint, 'r' reset, 'q' quit.\n")
        print(self.controller.game.render())

        self.is_running = True
        while self.is_running:
            try:
                line = input("> ").strip().lower()
            except EOFError:
                break
            self._handle_command(line)

        print(self.scoreboard.summary())

    def _handle_command(self, line: str):
        if line in ("q", "quit"):
            self.is_running = False
        elif line in ("r", "reset"):
            self.controller.reset()
            print("Game reset!")
            print(self.controller.game.render())
        elif line in ("h", "hint"):
            self._print_hint()
        else:
            move = self._parse_move(line)
            if move is None:
                print("Type a move as 'row col', e.g. '1 1'.")
            elif not self.controller.handle_move(*move):
                result = self.validator.validate_move(self.controller.game, *move)
                print(result.error_message or "Please wait for your turn.")

    def _print_hint(self):
        game = self.controller.game
        if game.is_terminal:
            print("Game is over. Type 'r' to play again.")
            return
        hint_ai = AIPlayer(player=game.current_player)
        print(hint_ai.get_move_suggestion(game.grid))

    @staticmethod
    def _parse_move(line: str) -> Optional[tuple]:
        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            return None
        try:
            return int(parts[0]), int(parts[1])
        except ValueError:
            return None


def run_simulation(games: int, difficulty: Difficulty, x_policy: str, seed: Optional[int]) -> int:
    """Play simulated games and print the tally."""
    result = simulate_games(games, difficulty=difficulty, x_policy=x_policy, seed=seed)

    print("\n" + "=" * 60)
    print(f"   Simulation: {x_policy} X vs {difficulty.name.lower()} O")
    print("=" * 60)
    print(f"  Games:  {result.games}")
    print(f"  X wins: {result.x_wins}")
    print(f"  O wins: {result.o_wins}")
    print(f"  Draws:  {result.draws}")
    print(f"  O loss rate: {result.o_loss_rate:.1%}")
    return 0


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--difficulty",
        choices=[d.name.lower() for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY.name.lower(),
        help="AI difficulty"
    )
    parser.add_argument(
        "--two-player",
        action="store_true",
        help="Turn auto-play off (two humans share the console)"
    )
    parser.add_argument(
        "--simulate",
        type=int,
        nargs="?",
        const=GameConfig.SIMULATION_GAMES,
        metavar="N",
        help=f"Play N simulated games instead of an interactive one "
             f"(default N: {GameConfig.SIMULATION_GAMES})"
    )
    parser.add_argument(
        "--x-policy",
        choices=["random", "hard"],
        default="random",
        help="How X plays in simulated games"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=GameConfig.SIMULATION_SEED,
        help="Random seed for simulated games"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    difficulty = Difficulty.from_name(args.difficulty)

    if args.simulate is not None:
        return run_simulation(args.simulate, difficulty, args.x_policy, args.seed)

    config = GameConfig(DEFAULT_DIFFICULTY=difficulty, AUTO_PLAY=not args.two_player)
    console = TicTacToeConsole(config)

    try:
        console.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
