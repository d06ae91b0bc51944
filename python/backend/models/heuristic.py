"""Remaining-cost estimate for the A* search.

Manhattan distance of tiles 1..8 plus 2 for every direct tile reversal
(two adjacent tiles each sitting on the other's goal cell). The blank is not
counted, which keeps the estimate admissible and changes it by exactly one
per move.
"""

from __future__ import annotations

from backend.models.board import CELLS, GOAL, Layout, goal_index
from backend.models.move import SIZE

# _DISTANCE[tile][cell] -> Manhattan distance from cell to the tile's goal cell.
_DISTANCE: tuple[tuple[int, ...], ...] = tuple(
    tuple(
        abs(cell // SIZE - goal_index(tile) // SIZE)
        + abs(cell % SIZE - goal_index(tile) % SIZE)
        for cell in range(CELLS)
    )
    for tile in range(CELLS)
)


def manhattan(layout: Layout) -> int:
    return sum(_DISTANCE[tile][cell] for cell, tile in enumerate(layout) if tile)


def tile_reversals(layout: Layout) -> int:
    """Return 2 per adjacent pair of tiles swapped relative to the goal."""
    count = 0
    accounted: set[int] = set()
    for cell, tile in enumerate(layout):
        if tile == 0 or tile in accounted:
            continue
        accounted.add(tile)
        home = goal_index(tile)
        if home == cell or _DISTANCE[tile][cell] > 1:
            continue
        other = layout[home]
        # ``other`` must belong where ``tile`` now sits.
        if other != 0 and goal_index(other) == cell:
            count += 2
            accounted.add(other)
    return count


def heuristic(layout: Layout) -> int:
    if layout == GOAL:
        return 0
    return manhattan(layout) + tile_reversals(layout)
