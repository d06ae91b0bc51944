"""Exceptions raised by the puzzle models and the solver."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by the puzzle backend."""


class InvalidMoveError(PuzzleError, ValueError):
    """A value that is not one of the four blank moves."""


class InvalidLayoutError(PuzzleError, ValueError):
    """A layout that is not a permutation of 0..8."""


class UnsolvableError(PuzzleError):
    """A layout with odd inversion parity; the goal cannot be reached."""

    def __init__(self, layout: tuple[int, ...]) -> None:
        self.layout = layout
        super().__init__(
            f"Layout {list(layout)} has odd inversion parity and cannot be solved."
        )
