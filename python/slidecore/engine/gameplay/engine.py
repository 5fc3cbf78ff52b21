"""Core puzzle engine — owns the grid, move rules, shuffle and parity check."""

from __future__ import annotations

import random

from slidecore.config import DEFAULT_SHUFFLE_MOVES, DEFAULT_SIZE, MIN_SIZE
from slidecore.exceptions import InvalidSizeError
from slidecore.models.board import Board, Direction, MovableTile, Position
from slidecore.utils.logger import get_logger

logger = get_logger(__name__)


def _check_size(size: object) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidSizeError(f"Board size must be an integer, got {size!r}.")
    if size < MIN_SIZE:
        raise InvalidSizeError(
            f"Board size must be at least {MIN_SIZE}, got {size}."
        )
    return size


class PuzzleEngine:
    """State and rules of one N×N sliding puzzle.

    ``move`` is the only primitive that changes the grid; ``shuffle`` is a
    sequence of ``move`` calls. Illegal moves are reported by a ``False``
    return value, never by an exception.

    Pass ``rng`` (or ``seed``) to make shuffles reproducible.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        *,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        self.size = _check_size(size)
        self.rng = rng if rng is not None else random.Random(seed)
        self.moves: int = 0
        self.board = Board.solved(self.size)

    @classmethod
    def from_board(
        cls, board: Board, *, rng: random.Random | None = None
    ) -> PuzzleEngine:
        """Create an engine around an existing board (e.g. a restored game).

        The board is taken as-is; use ``Board.from_rows`` to validate
        untrusted input first.
        """
        engine = cls(board.size, rng=rng)
        engine.board = board.copy()
        return engine

    # -- lifecycle ------------------------------------------------------------

    def initialize(self) -> None:
        """Lay the tiles out in solved order with the blank bottom-right."""
        self.board = Board.solved(self.size)

    def reset(self) -> None:
        self.initialize()
        self.moves = 0
        logger.debug("Reset %dx%d puzzle", self.size, self.size)

    def set_size(self, new_size: int) -> None:
        """Rebuild the puzzle at *new_size*. Any game in progress is lost."""
        self.size = _check_size(new_size)
        self.initialize()
        self.moves = 0
        logger.debug("Resized puzzle to %dx%d", self.size, self.size)

    # -- queries --------------------------------------------------------------

    def get_grid(self) -> list[list[int]]:
        return [row[:] for row in self.board.tiles]

    def get_empty_position(self) -> Position:
        return self.board.blank_pos

    def get_tile_position(self, value: int) -> Position | None:
        return self.board.find(value)

    def get_move_count(self) -> int:
        return self.moves

    def is_solved(self) -> bool:
        return self.board.is_solved()

    def can_move(self, row: int, col: int) -> bool:
        """True if the tile at (row, col) is in bounds and next to the blank."""
        if not self.board.in_bounds(row, col):
            return False
        br, bc = self.board.blank_pos
        return abs(row - br) + abs(col - bc) == 1

    def get_movable_tiles(self) -> list[MovableTile]:
        """Tiles adjacent to the blank, in up/down/left/right order."""
        br, bc = self.board.blank_pos
        tiles: list[MovableTile] = []
        for direction in Direction:
            dr, dc = direction.offset
            r, c = br + dr, bc + dc
            if self.board.in_bounds(r, c):
                tiles.append(MovableTile(r, c, self.board.tiles[r][c]))
        return tiles

    def tile_towards(self, direction: Direction) -> Position | None:
        """Position of the tile the blank would swap with going *direction*."""
        br, bc = self.board.blank_pos
        dr, dc = direction.offset
        r, c = br + dr, bc + dc
        if not self.board.in_bounds(r, c):
            return None
        return Position(r, c)

    def is_solvable(self) -> bool:
        """Check the permutation parity of the current grid.

        Odd sizes need an even inversion count. On even sizes every vertical
        blank move flips the inversion parity, so the count is combined with
        the blank's row (1-based, counted from the bottom); the solved board
        gives ``0 + 1``, hence an odd total marks a reachable grid.
        """
        inversions = self.board.inversions()
        if self.size % 2 == 1:
            return inversions % 2 == 0
        empty_row_from_bottom = self.size - self.board.blank_pos.row
        return (inversions + empty_row_from_bottom) % 2 == 1

    # -- movement -------------------------------------------------------------

    def move(self, row: int, col: int) -> bool:
        """Slide the tile at (row, col) into the blank.

        Returns True if the move was legal and applied.
        """
        if not self.can_move(row, col):
            return False

        board = self.board
        br, bc = board.blank_pos
        board.tiles[br][bc], board.tiles[row][col] = board.tiles[row][col], 0
        board.blank_pos = Position(row, col)
        self.moves += 1
        return True

    def shuffle(
        self,
        num_moves: int = DEFAULT_SHUFFLE_MOVES,
        rng: random.Random | None = None,
    ) -> None:
        """Scramble the board with *num_moves* random legal moves.

        Starts from the current grid. A step never undoes the step right
        before it; longer cycles are still possible. The move counter is
        cleared afterwards since shuffling is not play.
        """
        rng = rng if rng is not None else self.rng
        last: Direction | None = None

        for _ in range(num_moves):
            candidates: list[tuple[Direction, Position]] = []
            for d in Direction:
                target = self.tile_towards(d)
                if target is not None and (last is None or d != last.opposite):
                    candidates.append((d, target))
            if not candidates:
                continue
            direction, target = rng.choice(candidates)
            self.move(*target)
            last = direction

        self.moves = 0
        logger.debug(
            "Shuffled %dx%d puzzle with %d moves", self.size, self.size, num_moves
        )
