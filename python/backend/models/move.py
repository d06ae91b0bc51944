"""The four blank-tile moves."""

from __future__ import annotations

from enum import StrEnum

from backend.models.errors import InvalidMoveError

SIZE = 3


class Move(StrEnum):
    """Direction the *blank* travels (the slid tile goes the other way)."""

    BLANK_UP = "up"
    BLANK_DOWN = "down"
    BLANK_LEFT = "left"
    BLANK_RIGHT = "right"

    @classmethod
    def parse(cls, value: object) -> Move:
        """Coerce a ``Move`` or a move name such as ``"up"``.

        Raises ``InvalidMoveError`` for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise InvalidMoveError(f"{value!r} is not a valid move")

    @property
    def inverse(self) -> Move:
        return _INVERSE[self]

    @property
    def offset(self) -> int:
        """Index delta of the blank on the flat, row-major layout."""
        return _OFFSET[self]


_INVERSE: dict[Move, Move] = {
    Move.BLANK_UP: Move.BLANK_DOWN,
    Move.BLANK_DOWN: Move.BLANK_UP,
    Move.BLANK_LEFT: Move.BLANK_RIGHT,
    Move.BLANK_RIGHT: Move.BLANK_LEFT,
}

_OFFSET: dict[Move, int] = {
    Move.BLANK_UP: -SIZE,
    Move.BLANK_DOWN: SIZE,
    Move.BLANK_LEFT: -1,
    Move.BLANK_RIGHT: 1,
}


def _legal_for(index: int) -> tuple[Move, ...]:
    row, col = divmod(index, SIZE)
    moves: list[Move] = []
    if row > 0:
        moves.append(Move.BLANK_UP)
    if row < SIZE - 1:
        moves.append(Move.BLANK_DOWN)
    if col > 0:
        moves.append(Move.BLANK_LEFT)
    if col < SIZE - 1:
        moves.append(Move.BLANK_RIGHT)
    return tuple(moves)


# One entry per blank cell: corners get 2 moves, edges 3, the centre 4.
_LEGAL: tuple[tuple[Move, ...], ...] = tuple(
    _legal_for(i) for i in range(SIZE * SIZE)
)


def inverse(move: object) -> Move:
    """Return the move that undoes *move*."""
    if not isinstance(move, Move):
        raise InvalidMoveError(f"{move!r} is not a valid move")
    return _INVERSE[move]


def legal_moves(layout: tuple[int, ...]) -> tuple[Move, ...]:
    """Moves available to the blank, in up/down/left/right order."""
    return _LEGAL[layout.index(0)]


def legal_moves_at(blank_index: int) -> tuple[Move, ...]:
    return _LEGAL[blank_index]
