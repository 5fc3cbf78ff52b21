from slidecore.engine.hints.allowance import HintAllowance, HintResult, HintStatus
from slidecore.engine.hints.heuristic import HintHeuristic, suggest_move

__all__ = [
    "HintAllowance",
    "HintHeuristic",
    "HintResult",
    "HintStatus",
    "suggest_move",
]
