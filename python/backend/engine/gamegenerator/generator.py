"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.models.state import PuzzleState

logger = logging.getLogger(__name__)

SCRAMBLE_MIN_MOVES = 40
SCRAMBLE_MAX_MOVES = 75


class GameGenerator:
    """Creates solvable puzzles by walking away from the solved state."""

    @staticmethod
    def solved() -> PuzzleState:
        """Return the goal-state board (1..8 in order, blank bottom-right)."""
        return PuzzleState.goal()

    @staticmethod
    def scramble(rng: random.Random, moves: int | None = None) -> PuzzleState:
        """Apply *moves* random legal moves to the goal and return a fresh root.

        Immediate back-tracking is never chosen. When *moves* is ``None`` a
        count between ``SCRAMBLE_MIN_MOVES`` and ``SCRAMBLE_MAX_MOVES`` is
        drawn from *rng*.
        """
        if moves is None:
            moves = rng.randint(SCRAMBLE_MIN_MOVES, SCRAMBLE_MAX_MOVES)

        state = GameGenerator.solved()
        for _ in range(moves):
            state = state.apply(rng.choice(state.legal_moves_excluding_inverse()))

        logger.debug("Scrambled %d moves to %s", moves, list(state.layout))
        return PuzzleState(state.layout)

    @staticmethod
    def generate(rng: random.Random | None = None) -> PuzzleState:
        """Return a random *solvable*, unsolved board."""
        rng = rng or random.Random()
        while True:
            state = GameGenerator.scramble(rng)
            if not state.is_goal:
                return state
