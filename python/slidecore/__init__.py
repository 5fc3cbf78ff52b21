"""Sliding-tile puzzle core: engine, hints, sessions and leaderboard."""

from slidecore.engine.gameplay import PuzzleEngine
from slidecore.engine.hints import HintHeuristic, suggest_move
from slidecore.exceptions import (
    InvalidBoardError,
    InvalidSizeError,
    PuzzleError,
    StorageError,
)

__all__ = [
    "HintHeuristic",
    "InvalidBoardError",
    "InvalidSizeError",
    "PuzzleEngine",
    "PuzzleError",
    "StorageError",
    "suggest_move",
]
