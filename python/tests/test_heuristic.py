"""Heuristic properties the search relies on for optimality."""

from __future__ import annotations

import random

import pytest

from backend.models import GOAL, PuzzleState
from backend.models.heuristic import heuristic, manhattan, tile_reversals


def _random_walk(rng: random.Random, steps: int) -> list[PuzzleState]:
    state = PuzzleState.goal()
    walk = [state]
    for _ in range(steps):
        state = state.apply(rng.choice(state.legal_moves()))
        walk.append(state)
    return walk


def test_goal_scores_zero() -> None:
    assert heuristic(GOAL) == 0
    assert PuzzleState.goal().h == 0


def test_zero_only_at_goal(distances: dict) -> None:
    zeros = [layout for layout in distances if heuristic(layout) == 0]
    assert zeros == [GOAL]


@pytest.mark.parametrize(
    "tiles, expected",
    [
        ((1, 2, 3, 4, 5, 6, 7, 0, 8), 1),
        ((0, 1, 3, 4, 2, 5, 7, 8, 6), 4),
        ((0, 1, 2, 3, 4, 5, 6, 7, 8), 12),
    ],
)
def test_manhattan_ignores_blank(tiles: tuple[int, ...], expected: int) -> None:
    assert manhattan(tiles) == expected


def test_adjacent_reversal_adds_two() -> None:
    # 1 and 2 swapped in the top row.
    layout = (2, 1, 3, 4, 5, 6, 7, 0, 8)
    assert tile_reversals(layout) == 2
    assert heuristic(layout) == manhattan(layout) + 2


def test_reversal_counted_once_per_pair() -> None:
    # Two separate reversals: 1<->2 in the top row, 4<->7 in the first column.
    layout = (2, 1, 3, 7, 5, 6, 4, 8, 0)
    assert tile_reversals(layout) == 4


def test_distant_swap_is_not_a_reversal() -> None:
    # 1 and 3 are swapped but not adjacent.
    assert tile_reversals((3, 2, 1, 4, 5, 6, 7, 8, 0)) == 0


def test_blank_never_forms_a_reversal() -> None:
    assert tile_reversals((1, 2, 3, 4, 5, 6, 7, 0, 8)) == 0


def test_consistent_along_random_walks() -> None:
    rng = random.Random(7)
    for _ in range(20):
        for state in _random_walk(rng, 60):
            for child in state.successors():
                assert abs(state.h - child.h) <= 1, (state, child)


def test_admissible(distances: dict) -> None:
    rng = random.Random(11)
    for layout in rng.sample(sorted(distances), 3000):
        assert heuristic(layout) <= distances[layout], layout


def test_admissible_for_hardest_boards(distances: dict) -> None:
    hardest = [layout for layout, d in distances.items() if d == 31]
    assert hardest
    for layout in hardest:
        assert heuristic(layout) <= 31
