"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState
from backend.models.move import SIZE, Move
from backend.models.state import PuzzleState

# Arrow keys name the direction the *tile* slides, so the blank goes the
# opposite way: UP moves the tile below the blank upward.
_SLIDES: dict[str, Move] = {
    "up": Move.BLANK_DOWN,
    "down": Move.BLANK_UP,
    "left": Move.BLANK_RIGHT,
    "right": Move.BLANK_LEFT,
}


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.state = GameState(GameGenerator.generate(self.rng))

    @classmethod
    def from_layout(
        cls, tiles: Iterable[int], rng: random.Random | None = None
    ) -> GamePlay:
        """Create a game session from an existing layout (e.g. typed in)."""
        obj = object.__new__(cls)
        obj.rng = rng or random.Random()
        obj.state = GameState(PuzzleState.root(tiles))
        return obj

    @property
    def board(self) -> PuzzleState:
        return self.state.board

    # -- movement -------------------------------------------------------------

    def move(self, move: Move | str) -> bool:
        """Move the blank one cell. Returns True if the move was legal."""
        board = self.state.board
        after = board.apply(move)
        if after is board:
            return False
        self.state.advance(after)
        return True

    def slide(self, direction: str) -> bool:
        """Slide a tile in *direction* (``"up"``, ``"down"``, ...) into the blank."""
        return self.move(_SLIDES[direction])

    def move_tile(self, index: int) -> bool:
        """Move the tile at cell *index* into the adjacent blank.

        Returns True if the tile was next to the blank.
        """
        board = self.state.board
        for m in board.legal_moves():
            if board.blank_index + m.offset == index:
                return self.move(m)
        return False

    def scramble(self) -> None:
        self.state = GameState(GameGenerator.generate(self.rng))

    def reset(self, tiles: Iterable[int] | None = None) -> None:
        board = PuzzleState.root(tiles) if tiles is not None else GameGenerator.solved()
        self.state = GameState(board)

    # -- solver ---------------------------------------------------------------

    def solution(self) -> list[PuzzleState]:
        return Solver.solve(self.state.board.layout)

    def hint(self) -> Move | None:
        return Solver.hint(self.state.board.layout)

    def replay(self, path: list[PuzzleState]) -> Iterator[PuzzleState]:
        """Apply the generating move of each non-root state in *path*.

        Yields the board after every step so a front end can redraw between
        steps. Stopping the iteration early leaves the board where it got to.
        """
        for step in path[1:]:
            if step.move is None or not self.move(step.move):
                raise ValueError(f"Cannot replay {step!r} from {self.board!r}")
            yield self.state.board

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    @staticmethod
    def cell_at(row: int, col: int) -> int:
        return row * SIZE + col
