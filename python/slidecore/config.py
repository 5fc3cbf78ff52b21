"""Constants and defaults for the puzzle core."""

from __future__ import annotations

import os
from enum import StrEnum
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DATA_DIR_ENV = "TILE_SLIDE_DATA_DIR"

# -- board sizes --------------------------------------------------------------

MIN_SIZE = 2
MIN_PLAY_SIZE = 3
MAX_PLAY_SIZE = 10
DEFAULT_SIZE = 4

# -- shuffling ----------------------------------------------------------------

DEFAULT_SHUFFLE_MOVES = 100
BASE_SHUFFLE_MOVES = 50


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


DIFFICULTY_MULTIPLIERS: dict[Difficulty, float] = {
    Difficulty.EASY: 0.5,
    Difficulty.MEDIUM: 1.0,
    Difficulty.HARD: 1.5,
    Difficulty.EXPERT: 2.0,
}

# -- hints --------------------------------------------------------------------

MAX_HINTS = 3
HINT_COOLDOWN_SECONDS = 5.0

# -- undo ---------------------------------------------------------------------

UNDO_HISTORY_LIMIT = 50

# -- achievements -------------------------------------------------------------

# Seconds to beat per size; other sizes use the default.
SPEED_THRESHOLDS: dict[int, int] = {3: 30, 4: 60, 6: 180, 8: 360, 10: 600}
DEFAULT_SPEED_THRESHOLD = 60
PERFECT_SOLVER_RATIO = 1.2
LEVEL_MASTER_SIZES = (3, 4, 6, 8, 10)
HOLIDAY_HERO_GAMES = 100
ADAPTIVE_CHAMPION_SKILL = 1.75

# -- persistence --------------------------------------------------------------

LEADERBOARD_LIMIT = 100
USER_SESSION_LIMIT = 10
LEADERBOARD_FILENAME = "leaderboard.json"


def data_dir() -> Path:
    """Directory holding the leaderboard file."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return PROJECT_ROOT / "data"
