"""AdaptiveDifficulty tests."""

from __future__ import annotations

import pytest

from slidecore.config import Difficulty
from slidecore.engine.difficulty import AdaptiveDifficulty


def test_starts_at_medium() -> None:
    assert AdaptiveDifficulty().level == Difficulty.MEDIUM


def test_par_solve_moves_up_to_hard() -> None:
    adaptive = AdaptiveDifficulty()
    # 4×4: par time 40 s, estimated optimum 32 moves -> score 1.0
    assert adaptive.record_completion(4, 40, 32) == Difficulty.HARD
    assert adaptive.skill == pytest.approx(1.5)


def test_slow_solve_drops_to_easy() -> None:
    adaptive = AdaptiveDifficulty()
    assert adaptive.record_completion(3, 300, 180) == Difficulty.EASY
    assert adaptive.skill == 0.5


def test_fast_solve_caps_at_expert() -> None:
    adaptive = AdaptiveDifficulty()
    assert adaptive.record_completion(4, 10, 8) == Difficulty.EXPERT
    assert adaptive.skill == 2.0


def test_zero_time_and_moves_do_not_divide_by_zero() -> None:
    assert AdaptiveDifficulty.time_score(0, 4) == 1.0
    assert AdaptiveDifficulty.move_efficiency(0, 32) == 1.0


def test_only_recent_games_count() -> None:
    adaptive = AdaptiveDifficulty()
    for _ in range(12):
        adaptive.record_completion(3, 300, 180)
    assert len(adaptive.recent) == 10


def test_reset() -> None:
    adaptive = AdaptiveDifficulty()
    adaptive.record_completion(4, 10, 8)
    adaptive.reset()
    assert adaptive.skill == 1.0
    assert adaptive.recent == []
    assert adaptive.level == Difficulty.MEDIUM
