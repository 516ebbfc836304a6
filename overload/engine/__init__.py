from .graph import ProgressionEngine, GraphState, apply_progression, progress_week, NOT_ENOUGH_WEEKS

__all__ = [
    "ProgressionEngine",
    "GraphState",
    "apply_progression",
    "progress_week",
    "NOT_ENOUGH_WEEKS",
]
