"""Board model for the sliding puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

from slidecore.exceptions import InvalidBoardError


class Direction(StrEnum):
    """Direction the *blank* travels (the tile slides the opposite way)."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Enumeration order matters: movable tiles and hint tie-breaks follow it.
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Position(NamedTuple):
    row: int
    col: int


class MovableTile(NamedTuple):
    row: int
    col: int
    value: int

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a 2D list of ints. 0 represents the blank space.
    """

    size: int
    tiles: list[list[int]]
    blank_pos: Position

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        tiles: list[list[int]] = []
        num = 1
        for r in range(size):
            row: list[int] = []
            for c in range(size):
                if r == size - 1 and c == size - 1:
                    row.append(0)
                else:
                    row.append(num)
                    num += 1
            tiles.append(row)
        return cls(size=size, tiles=tiles, blank_pos=Position(size - 1, size - 1))

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls.from_rows(
            [list(flat[r * size : (r + 1) * size]) for r in range(size)]
        )

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        """Create a board from nested rows, validating every label."""
        size = len(rows)
        if size == 0 or any(len(row) != size for row in rows):
            raise InvalidBoardError("Board rows must form a non-empty square.")

        seen = sorted(v for row in rows for v in row)
        if seen != list(range(size * size)):
            raise InvalidBoardError(
                f"A {size}×{size} board must hold each of 0..{size * size - 1} "
                "exactly once."
            )

        tiles = [list(row) for row in rows]
        board = cls(size=size, tiles=tiles, blank_pos=Position(0, 0))
        board.blank_pos = board.find(0)
        return board

    # -- queries --------------------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def find(self, value: int) -> Position | None:
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == value:
                    return Position(r, c)
        return None

    def goal_position(self, value: int) -> Position:
        """Where *value* sits on the solved board."""
        if value == 0:
            return Position(self.size - 1, self.size - 1)
        return Position((value - 1) // self.size, (value - 1) % self.size)

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == self.size - 1 and c == self.size - 1:
                    return self.tiles[r][c] == 0
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.goal_position(self.tiles[row][col]) == (row, col)

    def inversions(self) -> int:
        """Count pairs of tiles whose row-major order is reversed."""
        flat = [v for row in self.tiles for v in row if v != 0]
        count = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    count += 1
        return count

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
        )
