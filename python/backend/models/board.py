"""Layout helpers for the 3×3 sliding puzzle.

A layout is a flat, row-major tuple of the nine digits 0..8 where 0 is the
blank. Cell ``i`` sits at row ``i // 3``, column ``i % 3``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from backend.models.errors import InvalidLayoutError
from backend.models.move import SIZE

Layout = tuple[int, ...]

CELLS = SIZE * SIZE
GOAL: Layout = (1, 2, 3, 4, 5, 6, 7, 8, 0)


# -- construction helpers -----------------------------------------------------


def make_layout(tiles: Iterable[int]) -> Layout:
    """Return *tiles* as a layout tuple, checking it is a permutation of 0..8.

    Example::

        make_layout([1, 2, 3, 4, 5, 6, 7, 0, 8])
    """
    try:
        layout = tuple(int(t) for t in tiles)
    except (TypeError, ValueError) as exc:
        raise InvalidLayoutError(f"Tiles must be integers: {exc}") from exc

    if len(layout) != CELLS:
        raise InvalidLayoutError(
            f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, got {len(layout)}."
        )
    if sorted(layout) != list(range(CELLS)):
        raise InvalidLayoutError(
            f"Layout {list(layout)} is not a permutation of 0..{CELLS - 1}."
        )
    return layout


def parse_layout(text: str) -> Layout:
    """Parse ``"8 6 7 2 5 4 3 0 1"``, ``"8,6,7,..."`` or ``"867254301"``."""
    text = text.strip()
    if re.fullmatch(r"\d{%d}" % CELLS, text):
        return make_layout(int(ch) for ch in text)
    parts = [p for p in re.split(r"[\s,;/]+", text) if p]
    return make_layout(parts)


def from_rows(rows: Iterable[Iterable[int]]) -> Layout:
    return make_layout(t for row in rows for t in row)


# -- queries ------------------------------------------------------------------


def to_rows(layout: Layout) -> list[list[int]]:
    return [list(layout[r * SIZE : (r + 1) * SIZE]) for r in range(SIZE)]


def goal_index(tile: int) -> int:
    """Cell the tile occupies in the solved layout."""
    return CELLS - 1 if tile == 0 else tile - 1


def is_tile_correct(layout: Layout, index: int) -> bool:
    """Check if the tile at *index* is in its goal position."""
    return goal_index(layout[index]) == index


def inversions(layout: Layout) -> int:
    tiles = [t for t in layout if t != 0]
    return sum(
        1
        for i in range(len(tiles))
        for j in range(i + 1, len(tiles))
        if tiles[i] > tiles[j]
    )


def is_solvable(layout: Layout) -> bool:
    """On an odd-width board the goal is reachable iff inversions are even."""
    return inversions(layout) % 2 == 0
