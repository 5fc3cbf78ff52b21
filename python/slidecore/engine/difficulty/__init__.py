from slidecore.engine.difficulty.adaptive import AdaptiveDifficulty

__all__ = ["AdaptiveDifficulty"]
