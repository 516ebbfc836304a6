from .engine import ProgressionEngine, apply_progression, progress_week

__all__ = ["ProgressionEngine", "apply_progression", "progress_week"]
