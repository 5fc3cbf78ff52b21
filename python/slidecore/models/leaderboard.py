"""Session persistence and leaderboard queries."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from enum import StrEnum
from pathlib import Path

from slidecore.config import LEADERBOARD_LIMIT, USER_SESSION_LIMIT
from slidecore.exceptions import StorageError
from slidecore.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class SessionRecord:
    """One finished (or abandoned) game, as handed over by a session."""

    username: str
    puzzle_size: int
    moves: int
    time_seconds: int
    completed: bool
    difficulty_level: str
    date: str


class LeaderboardSort(StrEnum):
    TIME = "time"
    MOVES = "moves"
    RECENT = "recent"


class Leaderboard:
    """Loads, saves, and queries game sessions from a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._sessions: list[SessionRecord] = []
        self._achievements: dict[str, list[str]] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if not self.filepath.exists():
            return
        try:
            data = json.loads(self.filepath.read_text())
            self._sessions = [SessionRecord(**e) for e in data["sessions"]]
            self._achievements = {
                user: list(names)
                for user, names in data.get("achievements", {}).items()
            }
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
            raise StorageError(
                f"Leaderboard file {self.filepath} is unreadable: {exc}"
            ) from exc
        logger.debug(
            "Loaded %d sessions from %s", len(self._sessions), self.filepath
        )

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "sessions": [asdict(s) for s in self._sessions],
            "achievements": self._achievements,
        }
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")
        logger.debug("Saved %d sessions to %s", len(self._sessions), self.filepath)

    # -- updates --------------------------------------------------------------

    def add(self, record: SessionRecord) -> None:
        self._sessions.append(record)
        self.save()

    def unlock(self, username: str, names: list[str]) -> None:
        """Remember achievements *username* has earned."""
        unlocked = self._achievements.setdefault(username, [])
        unlocked.extend(n for n in names if n not in unlocked)
        self.save()

    # -- queries --------------------------------------------------------------

    def top(
        self,
        size: int | None = None,
        sort: LeaderboardSort = LeaderboardSort.TIME,
        limit: int = LEADERBOARD_LIMIT,
    ) -> list[SessionRecord]:
        """Completed sessions, optionally for one size, best first."""
        rows = [
            s for s in self._sessions
            if s.completed and (size is None or s.puzzle_size == size)
        ]
        if sort == LeaderboardSort.MOVES:
            rows.sort(key=lambda s: (s.moves, s.time_seconds))
        elif sort == LeaderboardSort.RECENT:
            rows.sort(key=lambda s: s.date, reverse=True)
        else:
            rows.sort(key=lambda s: (s.time_seconds, s.moves))
        return rows[:limit]

    def user_sessions(
        self, username: str, limit: int = USER_SESSION_LIMIT
    ) -> list[SessionRecord]:
        rows = [s for s in self._sessions if s.username == username]
        rows.sort(key=lambda s: s.date, reverse=True)
        return rows[:limit]

    def completed_sizes(self, username: str) -> list[int]:
        return sorted(
            {s.puzzle_size for s in self._sessions
             if s.username == username and s.completed}
        )

    def total_games(self, username: str) -> int:
        return sum(1 for s in self._sessions if s.username == username)

    def achievements(self, username: str) -> set[str]:
        return set(self._achievements.get(username, []))

    def get_all_sizes(self) -> list[int]:
        return sorted({s.puzzle_size for s in self._sessions if s.completed})
