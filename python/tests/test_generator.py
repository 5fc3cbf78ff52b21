"""GameGenerator tests — difficulty-scaled shuffles."""

from __future__ import annotations

import random

import pytest

from slidecore.config import Difficulty
from slidecore.engine.gamegenerator import GameGenerator


@pytest.mark.parametrize(
    "difficulty, expected",
    [
        (Difficulty.EASY, 25),
        (Difficulty.MEDIUM, 50),
        (Difficulty.HARD, 75),
        (Difficulty.EXPERT, 100),
    ],
)
def test_shuffle_moves(difficulty: Difficulty, expected: int) -> None:
    assert GameGenerator.shuffle_moves(difficulty) == expected


@pytest.mark.parametrize("size", [2, 3, 4, 7, 10])
@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_generate_returns_fresh_unsolved_solvable_puzzle(
    size: int, difficulty: Difficulty
) -> None:
    engine = GameGenerator.generate(size, difficulty, rng=random.Random(size))
    assert engine.size == size
    assert not engine.is_solved()
    assert engine.is_solvable()
    assert engine.get_move_count() == 0


def test_generate_is_reproducible() -> None:
    a = GameGenerator.generate(4, rng=random.Random(77))
    b = GameGenerator.generate(4, rng=random.Random(77))
    assert a.get_grid() == b.get_grid()
