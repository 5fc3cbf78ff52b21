"""Adjusts the suggested difficulty from recent completions."""

from __future__ import annotations

from slidecore.config import Difficulty

MAX_RECENT_GAMES = 10
MIN_SKILL = 0.5
MAX_SKILL = 2.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class AdaptiveDifficulty:
    """Rolling skill estimate over the last few solved puzzles."""

    def __init__(self) -> None:
        self.skill: float = 1.0
        self.recent: list[float] = []

    # -- scoring --------------------------------------------------------------

    @staticmethod
    def estimate_optimal_moves(size: int) -> int:
        return size * size * 2

    @staticmethod
    def time_score(time_seconds: float, size: int) -> float:
        """1.0 for a fast solve, down to 0.1 for a slow one."""
        if time_seconds <= 0:
            return 1.0
        return _clamp(size * 10 / time_seconds, 0.1, 1.0)

    @staticmethod
    def move_efficiency(moves: int, optimal_moves: int) -> float:
        if moves <= 0 or optimal_moves <= 0:
            return 1.0
        return optimal_moves / moves

    # -- updates --------------------------------------------------------------

    def record_completion(
        self, size: int, time_seconds: float, moves: int
    ) -> Difficulty:
        """Fold one solve into the skill estimate and return the new level."""
        optimal = self.estimate_optimal_moves(size)
        score = (
            self.time_score(time_seconds, size) * 0.6
            + self.move_efficiency(moves, optimal) * 0.4
        )

        self.recent.append(score)
        if len(self.recent) > MAX_RECENT_GAMES:
            self.recent.pop(0)

        average = sum(self.recent) / len(self.recent)
        self.skill = _clamp(average * 1.5, MIN_SKILL, MAX_SKILL)
        return self.level

    @property
    def level(self) -> Difficulty:
        if self.skill < 0.75:
            return Difficulty.EASY
        if self.skill < 1.25:
            return Difficulty.MEDIUM
        if self.skill < 1.75:
            return Difficulty.HARD
        return Difficulty.EXPERT

    def reset(self) -> None:
        self.skill = 1.0
        self.recent = []
