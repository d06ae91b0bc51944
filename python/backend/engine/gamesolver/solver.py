"""Optimal 8-puzzle solver (A* search)."""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field

from backend.models.board import is_solvable, make_layout
from backend.models.errors import UnsolvableError
from backend.models.move import Move
from backend.models.state import PuzzleState

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Solution path plus counters collected while searching."""

    path: list[PuzzleState] = field(default_factory=list)
    expanded: int = 0
    generated: int = 0
    max_frontier: int = 0
    elapsed: float = 0.0

    @property
    def length(self) -> int:
        """Number of moves in the solution."""
        return max(len(self.path) - 1, 0)

    @property
    def moves(self) -> list[Move]:
        return self.path[-1].moves() if self.path else []


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(tiles: Iterable[int]) -> list[PuzzleState]:
        """Return the states of a shortest solution, root first, goal last.

        Raises ``InvalidLayoutError`` if *tiles* is not a permutation of
        0..8 and ``UnsolvableError`` if the goal cannot be reached from it.
        """
        return Solver.search(tiles).path

    @staticmethod
    def search(tiles: Iterable[int]) -> SearchResult:
        """Run A* from *tiles* and return the path with search statistics.

        The frontier is a binary heap keyed on ``(f, insertion order)``, so
        equal-cost states are expanded first in, first out. A state is
        pushed only when it improves the best known ``g`` for its layout,
        and a layout is expanded at most once.
        """
        layout = make_layout(tiles)
        if not is_solvable(layout):
            logger.debug("Rejecting odd-parity layout %s", list(layout))
            raise UnsolvableError(layout)

        started = time.perf_counter()
        result = SearchResult()
        counter = itertools.count()

        root = PuzzleState(layout)
        frontier: list[tuple[int, int, PuzzleState]] = [(root.f, next(counter), root)]
        best_g: dict[tuple[int, ...], int] = {layout: 0}
        closed: set[tuple[int, ...]] = set()

        while frontier:
            result.max_frontier = max(result.max_frontier, len(frontier))
            _, _, current = heapq.heappop(frontier)

            if current.layout in closed or current.g > best_g[current.layout]:
                continue

            if current.is_goal:
                result.path = current.path()
                break

            closed.add(current.layout)
            result.expanded += 1

            for child in current.successors():
                result.generated += 1
                if child.g < best_g.get(child.layout, child.g + 1):
                    best_g[child.layout] = child.g
                    heapq.heappush(frontier, (child.f, next(counter), child))

        result.elapsed = time.perf_counter() - started
        logger.info(
            "Solved %s in %d moves (%d expanded, %d generated, %.3fs)",
            list(layout),
            result.length,
            result.expanded,
            result.generated,
            result.elapsed,
        )
        return result

    @staticmethod
    def hint(tiles: Iterable[int]) -> Move | None:
        """Return the first move of an optimal solution, or ``None`` if
        the board is solved or unsolvable."""
        try:
            path = Solver.solve(tiles)
        except UnsolvableError:
            return None
        return path[1].move if len(path) > 1 else None

    @staticmethod
    def is_solvable(tiles: Iterable[int]) -> bool:
        """Return True if the goal can be reached from *tiles*."""
        return is_solvable(make_layout(tiles))
