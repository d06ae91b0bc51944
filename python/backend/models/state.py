"""Search node for the 8-puzzle.

A ``PuzzleState`` pairs a layout with the bookkeeping the A* search needs:
the state it was generated from, the move that produced it, its cost so far
(``g``) and its estimated total cost (``f = g + h``). States never mutate;
every move builds a new one.

Two states are equal when their layouts are equal. The predecessor, the
generating move and the costs are ignored so that the same board reached by
different paths is recognised as the same node.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from backend.models.board import GOAL, Layout, make_layout, to_rows
from backend.models.heuristic import heuristic
from backend.models.move import Move, inverse, legal_moves_at

logger = logging.getLogger(__name__)


class PuzzleState:
    __slots__ = ("layout", "predecessor", "move", "g", "h", "f", "blank_index")

    def __init__(
        self,
        layout: Layout,
        *,
        predecessor: PuzzleState | None = None,
        move: Move | None = None,
        g: int = 0,
    ) -> None:
        self.layout = layout
        self.predecessor = predecessor
        self.move = move
        self.g = g
        self.h = heuristic(layout)
        self.f = g + self.h
        self.blank_index = layout.index(0)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def goal(cls) -> PuzzleState:
        return cls(GOAL)

    @classmethod
    def root(cls, tiles: Iterable[int]) -> PuzzleState:
        """Fresh search root from any sequence of the digits 0..8.

        Raises ``InvalidLayoutError`` if *tiles* is not a permutation.
        """
        return cls(make_layout(tiles))

    # -- transitions ----------------------------------------------------------

    def legal_moves(self) -> tuple[Move, ...]:
        return legal_moves_at(self.blank_index)

    def legal_moves_excluding_inverse(self) -> tuple[Move, ...]:
        """Legal moves minus the one that would undo ``self.move``."""
        moves = self.legal_moves()
        if self.move is None:
            return moves
        back = inverse(self.move)
        return tuple(m for m in moves if m is not back)

    def apply(self, move: Move | str) -> PuzzleState:
        """Slide the blank one cell in the direction of *move*.

        An illegal move for the current blank position leaves the board as
        it is and returns ``self``. Anything that is not a move raises
        ``InvalidMoveError``.
        """
        move = Move.parse(move)
        if move not in self.legal_moves():
            logger.debug("Ignoring %s with blank at cell %d", move, self.blank_index)
            return self

        blank = self.blank_index
        target = blank + move.offset
        tiles = list(self.layout)
        tiles[blank], tiles[target] = tiles[target], tiles[blank]
        return PuzzleState(
            tuple(tiles), predecessor=self, move=move, g=self.g + 1
        )

    def successors(self) -> list[PuzzleState]:
        return [self.apply(m) for m in self.legal_moves_excluding_inverse()]

    # -- queries --------------------------------------------------------------

    @property
    def heuristic(self) -> int:
        return self.h

    @property
    def estimated_total_cost(self) -> int:
        return self.f

    @property
    def is_goal(self) -> bool:
        return self.layout == GOAL

    def rows(self) -> list[list[int]]:
        return to_rows(self.layout)

    def lineage(self) -> Iterator[PuzzleState]:
        """Yield this state, then its predecessor, back to the root."""
        node: PuzzleState | None = self
        while node is not None:
            yield node
            node = node.predecessor

    def path(self) -> list[PuzzleState]:
        """States from the root of this chain to ``self``, root first."""
        chain = list(self.lineage())
        chain.reverse()
        return chain

    def moves(self) -> list[Move]:
        """Generating moves from the root to ``self``."""
        return [s.move for s in self.path() if s.move is not None]

    # -- dunder ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, PuzzleState):
            return NotImplemented
        return self.layout == other.layout

    def __hash__(self) -> int:
        return hash(self.layout)

    def __lt__(self, other: PuzzleState) -> bool:
        return self.f < other.f

    def __repr__(self) -> str:
        return (
            f"PuzzleState({list(self.layout)}, move={self.move}, "
            f"g={self.g}, f={self.f})"
        )

    def __str__(self) -> str:
        lines = []
        for row in self.rows():
            cells = " ".join(" " if v == 0 else str(v) for v in row)
            lines.append(f"[{cells}]")
        return "\n".join(lines)
