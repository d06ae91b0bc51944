from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamegenerator.generator import SCRAMBLE_MAX_MOVES, SCRAMBLE_MIN_MOVES
from backend.engine.gameplay import GamePlay
from backend.models import GOAL, Move, PuzzleState
from backend.models.board import is_solvable

ONE_AWAY = [1, 2, 3, 4, 5, 6, 7, 0, 8]


# -- generator ----------------------------------------------------------------


def test_scramble_is_reproducible_with_seeded_rng() -> None:
    first = GameGenerator.scramble(random.Random(42))
    second = GameGenerator.scramble(random.Random(42))
    assert first.layout == second.layout


def test_scramble_returns_fresh_solvable_root() -> None:
    state = GameGenerator.scramble(random.Random(3), moves=30)
    assert state.g == 0
    assert state.predecessor is None
    assert state.move is None
    assert is_solvable(state.layout)


def test_scramble_zero_moves_is_goal() -> None:
    assert GameGenerator.scramble(random.Random(0), moves=0).is_goal


def test_scramble_move_count_in_default_range() -> None:
    class _Recording(random.Random):
        drawn: tuple[int, int] | None = None

        def randint(self, a: int, b: int) -> int:
            self.drawn = (a, b)
            return super().randint(a, b)

    rng = _Recording(5)
    GameGenerator.scramble(rng)
    assert rng.drawn == (SCRAMBLE_MIN_MOVES, SCRAMBLE_MAX_MOVES)


def test_generate_never_returns_goal() -> None:
    rng = random.Random(9)
    for _ in range(20):
        assert not GameGenerator.generate(rng).is_goal


# -- gameplay -----------------------------------------------------------------


def test_new_game_is_scrambled() -> None:
    game = GamePlay(random.Random(1))
    assert not game.is_won
    assert game.state.moves == 0


def test_move_counts_legal_moves_only() -> None:
    game = GamePlay.from_layout(GOAL)
    assert not game.move(Move.BLANK_DOWN)
    assert game.state.moves == 0
    assert game.move(Move.BLANK_UP)
    assert game.state.moves == 1
    assert game.board.layout == (1, 2, 3, 4, 5, 0, 7, 8, 6)


def test_board_is_rerooted_after_each_move() -> None:
    game = GamePlay.from_layout(GOAL)
    game.move(Move.BLANK_LEFT)
    game.move(Move.BLANK_UP)
    assert game.board.predecessor is None
    assert game.board.g == 0


@pytest.mark.parametrize(
    "direction, expected",
    [
        ("down", (1, 2, 3, 4, 5, 0, 7, 8, 6)),
        ("right", (1, 2, 3, 4, 5, 6, 7, 0, 8)),
    ],
)
def test_slide_moves_tile_into_blank(direction: str, expected: tuple[int, ...]) -> None:
    game = GamePlay.from_layout(GOAL)
    assert game.slide(direction)
    assert game.board.layout == expected


def test_slide_into_wall_is_rejected() -> None:
    game = GamePlay.from_layout(GOAL)
    assert not game.slide("up")
    assert not game.slide("left")


def test_move_tile_next_to_blank() -> None:
    game = GamePlay.from_layout(ONE_AWAY)
    assert not game.move_tile(0)
    assert game.move_tile(8)
    assert game.is_won


def test_move_tile_does_not_wrap_rows() -> None:
    # Blank at cell 3 (row 1, col 0); cell 2 is adjacent in the flat list only.
    game = GamePlay.from_layout([1, 2, 3, 0, 4, 6, 7, 5, 8])
    assert not game.move_tile(2)


def test_hint_moves_towards_goal() -> None:
    game = GamePlay.from_layout(ONE_AWAY)
    assert game.hint() is Move.BLANK_RIGHT


def test_replay_solution_wins() -> None:
    game = GamePlay.from_layout([4, 1, 3, 7, 2, 6, 0, 5, 8])
    path = game.solution()
    boards = list(game.replay(path))
    assert len(boards) == len(path) - 1
    assert [b.layout for b in boards] == [s.layout for s in path[1:]]
    assert game.is_won
    assert game.state.moves == len(path) - 1


def test_replay_can_stop_early() -> None:
    game = GamePlay.from_layout([4, 1, 3, 7, 2, 6, 0, 5, 8])
    path = game.solution()
    steps = game.replay(path)
    next(steps)
    next(steps)
    assert game.board.layout == path[2].layout
    assert not game.is_won


def test_reset_returns_to_goal() -> None:
    game = GamePlay(random.Random(4))
    game.reset()
    assert game.board == PuzzleState.goal()
    assert game.state.moves == 0


def test_pause_freezes_clock() -> None:
    game = GamePlay.from_layout(ONE_AWAY)
    game.state.pause()
    frozen = game.state.elapsed_time
    assert game.state.elapsed_time == frozen
    game.state.resume()
    assert game.state.elapsed_time >= frozen
