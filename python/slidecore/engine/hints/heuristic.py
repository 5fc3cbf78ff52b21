"""Greedy one-step hint for the sliding puzzle."""

from __future__ import annotations

from slidecore.engine.gameplay.engine import PuzzleEngine
from slidecore.models.board import Position


class HintHeuristic:
    """Stateless hint picker — all methods are static.

    This is a local, greedy suggestion and not a solver: following it does
    not guarantee progress and can loop on larger boards.
    """

    @staticmethod
    def target_value(engine: PuzzleEngine) -> int:
        """Label that belongs on the blank's cell in the solved grid.

        Returns 0 when the blank is already on its home cell.
        """
        row, col = engine.get_empty_position()
        expected = row * engine.size + col + 1
        return 0 if expected == engine.size * engine.size else expected

    @staticmethod
    def suggest_move(engine: PuzzleEngine) -> Position | None:
        """Pick one of the movable tiles, or ``None`` if there is none.

        A tile that belongs on the blank's cell wins outright. Otherwise the
        tile closest (Manhattan) to its own goal cell is chosen; ties go to
        the earliest tile in up/down/left/right order.
        """
        movable = engine.get_movable_tiles()
        if not movable:
            return None

        target = HintHeuristic.target_value(engine)
        if target:
            for tile in movable:
                if tile.value == target:
                    return tile.position

        best: Position | None = None
        best_distance = 0
        for tile in movable:
            goal = engine.board.goal_position(tile.value)
            distance = abs(tile.row - goal.row) + abs(tile.col - goal.col)
            if best is None or distance < best_distance:
                best = tile.position
                best_distance = distance
        return best


suggest_move = HintHeuristic.suggest_move
