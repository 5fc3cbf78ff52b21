"""Per-game hint budget with a cooldown between hints."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable

from slidecore.config import HINT_COOLDOWN_SECONDS, MAX_HINTS
from slidecore.engine.gameplay.engine import PuzzleEngine
from slidecore.engine.hints.heuristic import HintHeuristic
from slidecore.models.board import Position


class HintStatus(StrEnum):
    OK = "ok"
    EXHAUSTED = "exhausted"
    COOLDOWN = "cooldown"
    UNAVAILABLE = "unavailable"


@dataclass
class HintResult:
    status: HintStatus
    position: Position | None = None
    wait_seconds: float = 0.0


class HintAllowance:
    """Hands out at most ``max_hints`` hints, spaced by ``cooldown`` seconds."""

    def __init__(
        self,
        max_hints: int = MAX_HINTS,
        cooldown: float = HINT_COOLDOWN_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_hints = max_hints
        self.cooldown = cooldown
        self._clock = clock
        self.used: int = 0
        self._last_hint_at: float | None = None

    @property
    def remaining(self) -> int:
        return self.max_hints - self.used

    def reset(self) -> None:
        self.used = 0
        self._last_hint_at = None

    def request(self, engine: PuzzleEngine) -> HintResult:
        """Spend one hint on *engine* if the budget and cooldown allow it.

        A solved board or a board without movable tiles yields
        ``UNAVAILABLE`` and does not consume a hint.
        """
        if self.remaining <= 0:
            return HintResult(HintStatus.EXHAUSTED)

        now = self._clock()
        if self._last_hint_at is not None:
            wait = self.cooldown - (now - self._last_hint_at)
            if wait > 0:
                return HintResult(HintStatus.COOLDOWN, wait_seconds=wait)

        if engine.is_solved():
            return HintResult(HintStatus.UNAVAILABLE)
        position = HintHeuristic.suggest_move(engine)
        if position is None:
            return HintResult(HintStatus.UNAVAILABLE)

        self.used += 1
        self._last_hint_at = now
        return HintResult(HintStatus.OK, position=position)
