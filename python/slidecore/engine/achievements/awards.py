"""One-time awards for finished games."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from slidecore.config import (
    ADAPTIVE_CHAMPION_SKILL,
    DEFAULT_SPEED_THRESHOLD,
    HOLIDAY_HERO_GAMES,
    LEVEL_MASTER_SIZES,
    PERFECT_SOLVER_RATIO,
    SPEED_THRESHOLDS,
)
from slidecore.engine.difficulty.adaptive import AdaptiveDifficulty
from slidecore.models.leaderboard import Leaderboard, SessionRecord


class Achievement(StrEnum):
    FIRST_COMPLETION = "first_completion"
    SPEED_RUNNER = "speed_runner"
    PERFECT_SOLVER = "perfect_solver"
    LEVEL_MASTER = "level_master"
    HOLIDAY_HERO = "holiday_hero"
    ADAPTIVE_CHAMPION = "adaptive_champion"

    @property
    def title(self) -> str:
        return self.value.replace("_", " ").title()


class AchievementChecker:
    """Decides which achievements a completed game earns."""

    @staticmethod
    def speed_threshold(size: int) -> int:
        return SPEED_THRESHOLDS.get(size, DEFAULT_SPEED_THRESHOLD)

    @staticmethod
    def evaluate(
        record: SessionRecord,
        leaderboard: Leaderboard | None = None,
        skill: float | None = None,
        unlocked: Iterable[str] = (),
    ) -> list[Achievement]:
        """Return achievements newly earned by *record*, in declaration order.

        The leaderboard is expected to already hold *record*. Rules that
        need history (all sizes solved, games played) are skipped when no
        leaderboard is given; the skill rule is skipped without a skill.
        Unfinished games earn nothing.
        """
        if not record.completed:
            return []

        size = record.puzzle_size
        optimal = AdaptiveDifficulty.estimate_optimal_moves(size)
        earned = {
            Achievement.FIRST_COMPLETION: True,
            Achievement.SPEED_RUNNER: (
                record.time_seconds <= AchievementChecker.speed_threshold(size)
            ),
            Achievement.PERFECT_SOLVER: (
                record.moves <= optimal * PERFECT_SOLVER_RATIO
            ),
            Achievement.LEVEL_MASTER: (
                leaderboard is not None
                and set(LEVEL_MASTER_SIZES).issubset(
                    leaderboard.completed_sizes(record.username)
                )
            ),
            Achievement.HOLIDAY_HERO: (
                leaderboard is not None
                and leaderboard.total_games(record.username) >= HOLIDAY_HERO_GAMES
            ),
            Achievement.ADAPTIVE_CHAMPION: (
                skill is not None and skill >= ADAPTIVE_CHAMPION_SKILL
            ),
        }
        already = set(unlocked)
        return [a for a, ok in earned.items() if ok and a.value not in already]
