"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time
from collections import deque
from datetime import datetime
from typing import Any, Callable

from slidecore.config import UNDO_HISTORY_LIMIT, Difficulty
from slidecore.engine.gameplay.engine import PuzzleEngine
from slidecore.models.board import Position
from slidecore.models.leaderboard import SessionRecord


class GameState:
    """Holds one puzzle engine plus the session clock, hint count and undo
    history.

    Player moves should go through ``move`` so they can be undone. An undo
    slides the tile back with an ordinary engine move, so it counts as a
    move of its own.
    """

    def __init__(
        self,
        engine: PuzzleEngine,
        difficulty: Difficulty = Difficulty.MEDIUM,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.engine = engine
        self.difficulty = difficulty
        self.hints_used: int = 0
        self._clock = clock
        self._start_time: float = clock()
        self._elapsed_banked: float = 0.0
        self._running: bool = True
        self._history: deque[Position] = deque(maxlen=UNDO_HISTORY_LIMIT)

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (self._clock() - self._start_time)
        return self._elapsed_banked

    @property
    def is_running(self) -> bool:
        return self._running

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += self._clock() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = self._clock()
            self._running = True

    # -- moves ----------------------------------------------------------------

    def move(self, row: int, col: int) -> bool:
        """Apply a player move, remembering where the blank was."""
        blank = self.engine.get_empty_position()
        if not self.engine.move(row, col):
            return False
        self._history.append(blank)
        return True

    def undo(self) -> bool:
        """Reverse the most recent player move. False if nothing to undo."""
        if not self._history:
            return False
        return self.engine.move(*self._history.pop())

    @property
    def undo_depth(self) -> int:
        return len(self._history)

    # -- queries --------------------------------------------------------------

    @property
    def moves(self) -> int:
        return self.engine.get_move_count()

    @property
    def is_won(self) -> bool:
        return self.engine.is_solved()

    def snapshot(self) -> dict[str, Any]:
        """Opaque save-game payload for persistence collaborators."""
        return {
            "size": self.engine.size,
            "moves": self.moves,
            "time_seconds": int(self.elapsed_time),
            "grid": self.engine.get_grid(),
        }

    def to_record(self, username: str) -> SessionRecord:
        return SessionRecord(
            username=username,
            puzzle_size=self.engine.size,
            moves=self.moves,
            time_seconds=int(self.elapsed_time),
            completed=self.is_won,
            difficulty_level=self.difficulty.value,
            date=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        )
