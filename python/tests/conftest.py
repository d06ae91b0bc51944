"""Shared fixture: an exact distance table for the 8-puzzle.

The distance table is a breadth-first search outward from the goal over the
whole reachable half of the state space (9!/2 = 181,440 layouts). It uses
its own neighbour function so it checks the solver rather than echoing it.
"""

from __future__ import annotations

from collections import deque

import pytest

GOAL = (1, 2, 3, 4, 5, 6, 7, 8, 0)
REACHABLE = 181_440

_ADJACENT = {
    0: (1, 3),
    1: (0, 2, 4),
    2: (1, 5),
    3: (0, 4, 6),
    4: (1, 3, 5, 7),
    5: (2, 4, 8),
    6: (3, 7),
    7: (4, 6, 8),
    8: (5, 7),
}


def _neighbours(layout: tuple[int, ...]) -> list[tuple[int, ...]]:
    blank = layout.index(0)
    out = []
    for cell in _ADJACENT[blank]:
        tiles = list(layout)
        tiles[blank], tiles[cell] = tiles[cell], tiles[blank]
        out.append(tuple(tiles))
    return out


@pytest.fixture(scope="session")
def distances() -> dict[tuple[int, ...], int]:
    """Exact number of moves from every reachable layout to the goal."""
    dist = {GOAL: 0}
    frontier = deque([GOAL])
    while frontier:
        layout = frontier.popleft()
        d = dist[layout] + 1
        for nxt in _neighbours(layout):
            if nxt not in dist:
                dist[nxt] = d
                frontier.append(nxt)
    assert len(dist) == REACHABLE
    return dist
