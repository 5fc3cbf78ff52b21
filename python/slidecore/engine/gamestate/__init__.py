from slidecore.engine.gamestate.state import GameState

__all__ = ["GameState"]
