"""GameState tests — session clock and persistence snapshots."""

from __future__ import annotations

from slidecore.config import Difficulty
from slidecore.engine.gameplay import PuzzleEngine
from slidecore.engine.gamestate import GameState


class _FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_elapsed_time_with_pause_and_resume() -> None:
    clock = _FakeClock(100.0)
    state = GameState(PuzzleEngine(3), clock=clock)

    clock.now = 130.0
    assert state.elapsed_time == 30.0

    state.pause()
    assert not state.is_running
    clock.now = 200.0
    assert state.elapsed_time == 30.0

    state.resume()
    clock.now = 210.5
    assert state.elapsed_time == 40.5


def test_moves_and_win_follow_the_engine() -> None:
    engine = PuzzleEngine(3)
    state = GameState(engine, clock=_FakeClock())
    assert state.is_won

    engine.move(2, 1)
    assert state.moves == 1
    assert not state.is_won


def test_to_record() -> None:
    clock = _FakeClock(0.0)
    engine = PuzzleEngine(3)
    state = GameState(engine, Difficulty.HARD, clock=clock)
    engine.move(2, 1)
    engine.move(2, 2)
    clock.now = 42.9

    record = state.to_record("alice")
    assert record.username == "alice"
    assert record.puzzle_size == 3
    assert record.moves == 2
    assert record.time_seconds == 42
    assert record.completed is True
    assert record.difficulty_level == "hard"
    assert record.date


def test_snapshot_is_detached_from_the_engine() -> None:
    clock = _FakeClock(0.0)
    engine = PuzzleEngine(3)
    state = GameState(engine, clock=clock)
    engine.move(2, 1)
    clock.now = 7.0

    snap = state.snapshot()
    assert snap == {
        "size": 3,
        "moves": 1,
        "time_seconds": 7,
        "grid": [[1, 2, 3], [4, 5, 6], [7, 0, 8]],
    }
    snap["grid"][0][0] = 9
    assert engine.get_grid()[0][0] == 1


# -- undo ---------------------------------------------------------------------


def test_undo_restores_the_grid_and_counts_as_a_move() -> None:
    engine = PuzzleEngine(3)
    state = GameState(engine, clock=_FakeClock())
    assert state.move(2, 1)
    assert state.move(1, 1)
    before_last = [[1, 2, 3], [4, 5, 6], [7, 0, 8]]

    assert state.undo() is True
    assert engine.get_grid() == before_last
    assert engine.get_empty_position() == (2, 1)
    assert state.moves == 3

    assert state.undo() is True
    assert state.is_won
    assert state.moves == 4


def test_undo_with_empty_history() -> None:
    state = GameState(PuzzleEngine(3), clock=_FakeClock())
    assert state.undo() is False
    assert state.moves == 0


def test_rejected_moves_are_not_recorded() -> None:
    state = GameState(PuzzleEngine(3), clock=_FakeClock())
    assert state.move(0, 0) is False
    assert state.undo_depth == 0
    assert state.undo() is False


def test_undo_history_keeps_the_last_fifty_moves() -> None:
    engine = PuzzleEngine(3)
    state = GameState(engine, clock=_FakeClock())
    for i in range(60):
        assert state.move(2, 1) if i % 2 == 0 else state.move(2, 2)
    assert state.undo_depth == 50

    for _ in range(50):
        assert state.undo() is True
    assert state.undo() is False
    assert state.is_won
    assert state.moves == 110
