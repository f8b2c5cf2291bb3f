"""
Tests for the TicTacToe AI opponent.
"""

import random
import sys

import pytest

from logic.ai_player import AIPlayer, Difficulty
from logic.board import Mark, Outcome
from logic.game_state import GameState

X, O, _ = Mark.X, Mark.O, Mark.EMPTY

CORNERS = [(0, 0), (0, 2), (2, 0), (2, 2)]


class StubRandom:
    """Random source with a fixed coin flip that always picks the last option."""

    def __init__(self, value):
        self.value = value
        self.choices = 0

    def random(self):
        return self.value

    def choice(self, seq):
        self.choices += 1
        return seq[-1]


def test_takes_win_instead_of_blocking():
    # O can win at (1, 2); blocking at (0, 2) comes first in scan order
    grid = [[X, X, _], [O, O, _], [_, _, _]]
    ai = AIPlayer()

    move = ai.choose_move(grid, Difficulty.HARD)
    assert move == (1, 2)

    game = GameState.from_grid(grid, current_player=O)
    game.apply_move(*move)
    assert game.winner == O
    # X never gets to play (0, 2)
    assert not game.apply_move(0, 2)


def test_blocks_immediate_threat():
    grid = [[X, X, _], [_, O, _], [_, _, _]]
    assert AIPlayer().choose_move(grid, Difficulty.HARD) == (0, 2)


def test_answers_center_with_corner():
    game = GameState()
    game.apply_move(1, 1)
    ai = AIPlayer()

    scores = ai.score_moves(game.grid)
    move = ai.choose_move(game.grid, Difficulty.HARD)

    assert move in CORNERS
    assert scores[move] == 0
    # An edge reply lets X force a win
    assert scores[(0, 1)] < 0


def test_answers_corner_with_center():
    game = GameState()
    game.apply_move(0, 0)
    assert AIPlayer().choose_move(game.grid, Difficulty.HARD) == (1, 1)


def test_faster_win_scores_higher():
    ai = AIPlayer()
    grid = [[O, O, _], [X, X, _], [X, _, _]]
    scores = ai.score_moves(grid)

    assert scores[(0, 2)] == 10
    assert scores[(0, 2)] > scores[(2, 2)]


def test_ties_go_to_first_cell():
    # O wins on (0, 2) or (2, 0)
    grid = [[O, O, _], [O, X, X], [_, X, X]]
    ai = AIPlayer()

    assert ai.score_moves(grid) == {(0, 2): 10, (2, 0): 10}
    assert ai.choose_move(grid, Difficulty.HARD) == (0, 2)


def test_search_does_not_touch_input():
    grid = [[X, _, _], [_, O, _], [_, _, X]]
    before = [list(row) for row in grid]

    AIPlayer().choose_move(grid, Difficulty.HARD)
    assert grid == before


def test_easy_picks_empty_cells():
    grid = [[X, O, X], [_, O, _], [_, X, _]]
    empty = {(1, 0), (1, 2), (2, 0), (2, 2)}
    ai = AIPlayer(rng=random.Random(7))

    picks = {ai.choose_move(grid, Difficulty.EASY) for _i in range(200)}
    assert picks == empty


def test_medium_random_branch():
    rng = StubRandom(0.1)
    grid = [[X, X, _], [_, O, _], [_, _, _]]

    move = AIPlayer(rng=rng).choose_move(grid, Difficulty.MEDIUM)
    assert move == (2, 2)
    assert rng.choices == 1


def test_medium_minimax_branch():
    rng = StubRandom(0.9)
    grid = [[X, X, _], [_, O, _], [_, _, _]]

    move = AIPlayer(rng=rng).choose_move(grid, Difficulty.MEDIUM)
    assert move == (0, 2)
    assert rng.choices == 0


def test_medium_redecides_each_call():
    ai = AIPlayer(rng=random.Random(3))
    grid = [[X, X, _], [_, O, _], [_, _, _]]

    moves = [ai.choose_move(grid, Difficulty.MEDIUM) for _i in range(60)]
    assert (0, 2) in moves
    assert any(move != (0, 2) for move in moves)


def test_full_board_fails_loudly():
    full = [[X, O, X], [X, O, O], [O, X, X]]
    ai = AIPlayer()

    for difficulty in Difficulty:
        with pytest.raises(ValueError):
            ai.choose_move(full, difficulty)


def test_malformed_grid_is_rejected():
    with pytest.raises(ValueError):
        AIPlayer().get_random_move([[_, _, _], [_, _, _]])
    with pytest.raises(ValueError):
        AIPlayer().choose_move([[_, _, _], [_, _, _]], Difficulty.HARD)
    with pytest.raises(ValueError):
        AIPlayer().choose_move([["", "", ""]] * 3, Difficulty.HARD)


def test_invalid_construction():
    with pytest.raises(ValueError):
        AIPlayer(player=_)
    with pytest.raises(ValueError):
        AIPlayer(random_probability=1.5)


def test_hard_never_loses_to_any_x_line():
    """Walk every X move sequence; O answers with HARD each time."""
    ai = AIPlayer()
    outcomes = set()

    def explore(game):
        if game.is_terminal:
            outcomes.add(game.outcome)
            return
        if game.current_player == X:
            for row, col in game.get_empty_cells():
                child = game.copy()
                child.apply_move(row, col)
                explore(child)
        else:
            game.apply_move(*ai.choose_move(game.grid, Difficulty.HARD))
            explore(game)

    explore(GameState())

    assert Outcome.X_WINS not in outcomes
    assert outcomes <= {Outcome.O_WINS, Outcome.DRAW}


def test_ai_can_play_x():
    ai = AIPlayer(player=X)
    grid = [[O, O, _], [X, X, _], [_, _, _]]
    assert ai.choose_move(grid, Difficulty.HARD) == (1, 2)


def test_move_suggestion():
    ai = AIPlayer()
    assert ai.get_move_suggestion([[X, X, _], [_, O, _], [_, _, _]]) == "Place O at position (0, 2)"
    assert ai.get_move_suggestion([[X, O, X], [X, O, O], [O, X, X]]) == "No moves available!"


@pytest.mark.parametrize("name, expected", [
    ("easy", Difficulty.EASY),
    ("Medium", Difficulty.MEDIUM),
    (" HARD ", Difficulty.HARD),
    ("impossible", Difficulty.EASY),
])
def test_difficulty_from_name(name, expected):
    assert Difficulty.from_name(name) == expected


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
