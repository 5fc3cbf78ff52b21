from slidecore.engine.gameplay.engine import PuzzleEngine

__all__ = ["PuzzleEngine"]
