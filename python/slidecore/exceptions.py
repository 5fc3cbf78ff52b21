"""Exception hierarchy for the puzzle core."""


class PuzzleError(Exception):
    """Base exception for puzzle failures."""


class InvalidSizeError(PuzzleError, ValueError):
    """Raised when a board is built or resized with an unusable size."""


class InvalidBoardError(PuzzleError, ValueError):
    """Raised when a supplied grid is not a permutation of ``0..N²-1``."""


class StorageError(PuzzleError):
    """Raised when the leaderboard file cannot be read."""
