"""Builds shuffled puzzles for a chosen difficulty."""

from __future__ import annotations

import math
import random

from slidecore.config import BASE_SHUFFLE_MOVES, DIFFICULTY_MULTIPLIERS, Difficulty
from slidecore.engine.gameplay.engine import PuzzleEngine
from slidecore.utils.logger import get_logger

logger = get_logger(__name__)


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def shuffle_moves(difficulty: Difficulty) -> int:
        """Number of random-walk steps used for *difficulty*."""
        return math.floor(BASE_SHUFFLE_MOVES * DIFFICULTY_MULTIPLIERS[difficulty])

    @staticmethod
    def generate(
        size: int,
        difficulty: Difficulty = Difficulty.MEDIUM,
        rng: random.Random | None = None,
    ) -> PuzzleEngine:
        """Return a freshly shuffled engine that is not already solved."""
        engine = PuzzleEngine(size, rng=rng)
        num_moves = GameGenerator.shuffle_moves(difficulty)

        engine.shuffle(num_moves)
        # A walk can wander back to the goal state; keep going until it doesn't.
        while engine.is_solved():
            logger.debug("Shuffle landed on the solved board, reshuffling")
            engine.shuffle(num_moves)

        return engine
