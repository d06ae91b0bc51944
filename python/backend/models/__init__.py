from backend.models.board import GOAL, Layout, make_layout, parse_layout
from backend.models.errors import (
    InvalidLayoutError,
    InvalidMoveError,
    PuzzleError,
    UnsolvableError,
)
from backend.models.move import Move
from backend.models.state import PuzzleState

__all__ = [
    "GOAL",
    "InvalidLayoutError",
    "InvalidMoveError",
    "Layout",
    "Move",
    "PuzzleError",
    "PuzzleState",
    "UnsolvableError",
    "make_layout",
    "parse_layout",
]
