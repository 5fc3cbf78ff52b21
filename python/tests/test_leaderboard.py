"""Leaderboard persistence and query tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from slidecore.exceptions import StorageError
from slidecore.models.leaderboard import Leaderboard, LeaderboardSort, SessionRecord


def _record(
    username: str = "alice",
    size: int = 4,
    moves: int = 100,
    seconds: int = 60,
    completed: bool = True,
    date: str = "2026-01-01 12:00:00",
) -> SessionRecord:
    return SessionRecord(
        username=username,
        puzzle_size=size,
        moves=moves,
        time_seconds=seconds,
        completed=completed,
        difficulty_level="medium",
        date=date,
    )


@pytest.fixture
def board(tmp_path: Path) -> Leaderboard:
    lb = Leaderboard(tmp_path / "leaderboard.json")
    lb.add(_record("alice", moves=120, seconds=50, date="2026-01-01 10:00:00"))
    lb.add(_record("bob", moves=90, seconds=70, date="2026-01-02 10:00:00"))
    lb.add(_record("carol", moves=90, seconds=65, date="2026-01-03 10:00:00"))
    lb.add(_record("alice", size=3, moves=30, seconds=20, date="2026-01-04 10:00:00"))
    lb.add(_record("dave", moves=5, seconds=5, completed=False, date="2026-01-05 10:00:00"))
    return lb


def test_missing_file_means_empty_board(tmp_path: Path) -> None:
    lb = Leaderboard(tmp_path / "nope" / "leaderboard.json")
    assert lb.top() == []
    assert lb.get_all_sizes() == []


def test_top_by_time(board: Leaderboard) -> None:
    assert [s.username for s in board.top(size=4)] == ["alice", "carol", "bob"]


def test_top_by_moves_breaks_ties_on_time(board: Leaderboard) -> None:
    names = [s.username for s in board.top(size=4, sort=LeaderboardSort.MOVES)]
    assert names == ["carol", "bob", "alice"]


def test_top_recent(board: Leaderboard) -> None:
    names = [s.username for s in board.top(sort=LeaderboardSort.RECENT)]
    assert names == ["alice", "carol", "bob", "alice"]


def test_top_skips_unfinished_games_and_honours_limit(board: Leaderboard) -> None:
    assert all(s.completed for s in board.top())
    assert len(board.top(limit=2)) == 2


def test_user_queries(board: Leaderboard) -> None:
    sessions = board.user_sessions("alice")
    assert [s.puzzle_size for s in sessions] == [3, 4]
    assert board.user_sessions("alice", limit=1)[0].puzzle_size == 3
    assert board.completed_sizes("alice") == [3, 4]
    assert board.completed_sizes("dave") == []
    assert board.total_games("dave") == 1
    assert board.total_games("nobody") == 0
    assert board.get_all_sizes() == [3, 4]


def test_sessions_survive_reload(board: Leaderboard) -> None:
    reloaded = Leaderboard(board.filepath)
    assert reloaded.top() == board.top()
    assert reloaded.total_games("alice") == 2


@pytest.mark.parametrize(
    "content", ["{not json", '{"other": []}', '{"sessions": [{"x": 1}]}']
)
def test_corrupt_file_raises_storage_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "leaderboard.json"
    path.write_text(content)
    with pytest.raises(StorageError):
        Leaderboard(path)


def test_undecodable_file_raises_storage_error(tmp_path: Path) -> None:
    path = tmp_path / "leaderboard.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    with pytest.raises(StorageError):
        Leaderboard(path)


def test_directory_in_place_of_file_raises_storage_error(tmp_path: Path) -> None:
    path = tmp_path / "leaderboard.json"
    path.mkdir()
    with pytest.raises(StorageError):
        Leaderboard(path)


def test_malformed_achievements_raise_storage_error(tmp_path: Path) -> None:
    path = tmp_path / "leaderboard.json"
    path.write_text('{"sessions": [], "achievements": ["speed_runner"]}')
    with pytest.raises(StorageError):
        Leaderboard(path)


# -- achievements -------------------------------------------------------------


def test_file_without_achievements_loads(tmp_path: Path) -> None:
    path = tmp_path / "leaderboard.json"
    path.write_text('{"sessions": []}')
    assert Leaderboard(path).achievements("alice") == set()


def test_unlocked_achievements_survive_reload(board: Leaderboard) -> None:
    board.unlock("alice", ["first_completion", "speed_runner"])
    board.unlock("alice", ["speed_runner"])
    reloaded = Leaderboard(board.filepath)
    assert reloaded.achievements("alice") == {"first_completion", "speed_runner"}
    assert reloaded.achievements("bob") == set()
    assert reloaded.total_games("alice") == 2
