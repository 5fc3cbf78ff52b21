from slidecore.models.board import Board, Direction, MovableTile, Position
from slidecore.models.leaderboard import Leaderboard, LeaderboardSort, SessionRecord

__all__ = [
    "Board",
    "Direction",
    "Leaderboard",
    "LeaderboardSort",
    "MovableTile",
    "Position",
    "SessionRecord",
]
