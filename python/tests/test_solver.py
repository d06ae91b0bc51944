"""Solver test suite — parametric benchmarks.

Boards are JSON fixtures under ``<project_root>/fixtures/``. Every returned
path is replayed move by move and its length is compared with the exact
breadth-first distance. Each test is hard-killed after the ``pytest-timeout``
limit configured in ``pyproject.toml``.
"""

from __future__ import annotations

import json
import random
from pathlib import Path

import pytest

from backend.engine.gamesolver import Solver
from backend.models import (
    GOAL,
    InvalidLayoutError,
    Move,
    PuzzleState,
    UnsolvableError,
)

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


_BOARDS_3x3 = _load("3x3.json")


# -- helpers ------------------------------------------------------------------


def _assert_valid_path(path: list[PuzzleState], start: tuple[int, ...]) -> None:
    assert path[0].layout == start
    assert path[0].predecessor is None
    assert path[0].move is None
    assert path[-1].layout == GOAL

    for i, (before, after) in enumerate(zip(path, path[1:]), 1):
        assert after.predecessor is before, f"step {i} is not linked to step {i - 1}"
        assert isinstance(after.move, Move)
        assert after.g == i
        assert before.apply(after.move).layout == after.layout, (
            f"step {i} ({after.move.value}) does not reproduce its layout"
        )


# -- benchmarks ---------------------------------------------------------------


@pytest.mark.parametrize("board_data", _BOARDS_3x3, ids=_ids)
def test_solve_3x3(board_data: dict, distances: dict) -> None:
    start = tuple(board_data["tiles"])

    path = Solver.solve(start)

    _assert_valid_path(path, start)
    assert len(path) - 1 == distances[start], f"not optimal ({board_data['id']})"
    if "optimal" in board_data:
        assert len(path) - 1 == board_data["optimal"]


def test_one_move_board() -> None:
    path = Solver.solve([1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert [s.move for s in path[1:]] == [Move.BLANK_RIGHT]


def test_goal_start_is_single_state() -> None:
    result = Solver.search(GOAL)
    assert result.path == [PuzzleState.goal()]
    assert result.length == 0
    assert result.expanded == 0
    assert result.moves == []


def test_random_reachable_boards_are_optimal(distances: dict) -> None:
    rng = random.Random(2024)
    for start in rng.sample(sorted(distances), 10):
        path = Solver.solve(start)
        _assert_valid_path(path, start)
        assert len(path) - 1 == distances[start]


# -- search result ------------------------------------------------------------


def test_search_reports_statistics() -> None:
    result = Solver.search([8, 1, 3, 4, 0, 2, 7, 6, 5])
    assert result.length == len(result.path) - 1
    assert result.moves == [s.move for s in result.path[1:]]
    assert result.expanded >= result.length
    assert result.generated >= result.expanded
    assert result.max_frontier >= 1
    assert result.elapsed >= 0.0


def test_solve_is_deterministic() -> None:
    start = [4, 6, 7, 5, 0, 8, 3, 2, 1]
    first = [s.layout for s in Solver.solve(start)]
    second = [s.layout for s in Solver.solve(start)]
    assert first == second


# -- hint / solvability -------------------------------------------------------


def test_hint_is_first_optimal_move(distances: dict) -> None:
    start = PuzzleState.root([4, 1, 3, 7, 2, 6, 0, 5, 8])
    hint = Solver.hint(start.layout)
    assert hint in start.legal_moves()
    assert distances[start.apply(hint).layout] == distances[start.layout] - 1


def test_hint_none_when_solved() -> None:
    assert Solver.hint(GOAL) is None


def test_hint_none_when_unsolvable() -> None:
    assert Solver.hint([2, 1, 3, 4, 5, 6, 7, 8, 0]) is None


@pytest.mark.parametrize(
    "tiles, expected",
    [
        ([1, 2, 3, 4, 5, 6, 7, 8, 0], True),
        ([0, 1, 2, 3, 4, 5, 6, 7, 8], True),
        ([2, 1, 3, 4, 5, 6, 7, 8, 0], False),
        ([1, 2, 3, 4, 5, 6, 8, 7, 0], False),
    ],
)
def test_is_solvable(tiles: list[int], expected: bool) -> None:
    assert Solver.is_solvable(tiles) is expected


# -- errors -------------------------------------------------------------------


def test_unsolvable_start_fails_fast() -> None:
    with pytest.raises(UnsolvableError) as info:
        Solver.solve([1, 2, 3, 4, 5, 6, 8, 7, 0])
    assert info.value.layout == (1, 2, 3, 4, 5, 6, 8, 7, 0)


@pytest.mark.parametrize(
    "tiles",
    [
        [1, 2, 3, 4, 5, 6, 7, 8],
        [1, 2, 3, 4, 5, 6, 7, 8, 0, 9],
        [1, 1, 3, 4, 5, 6, 7, 8, 0],
        [1, 2, 3, 4, 5, 6, 7, 9, 0],
        ["a", 2, 3, 4, 5, 6, 7, 8, 0],
    ],
    ids=["short", "long", "duplicate", "out-of-range", "not-a-number"],
)
def test_invalid_layout_rejected(tiles: list) -> None:
    with pytest.raises(InvalidLayoutError):
        Solver.solve(tiles)
