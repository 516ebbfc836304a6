from .state import ProgressionState
from .alignment import chronological_key, sort_chronologically, matching_exercise
from .volume import calculate_volume_by_muscle, primary_sets_by_muscle, secondary_credit
from .soreness import process_soreness
from .joint_pain import process_joint_pain, reported_joint_pain
from .fatigue import process_fatigue
from .volume_progression import apply_volume_progression, prioritized_muscles
from .weight_progression import apply_weight_progression, updated_weight, weight_delta
from .feedback_routing import attach_feedback, collect_feedback
from .export import week_to_csv, week_to_markdown, summarize_changes

__all__ = [
    "ProgressionState",
    "chronological_key",
    "sort_chronologically",
    "matching_exercise",
    "calculate_volume_by_muscle",
    "primary_sets_by_muscle",
    "secondary_credit",
    "process_soreness",
    "process_joint_pain",
    "reported_joint_pain",
    "process_fatigue",
    "apply_volume_progression",
    "prioritized_muscles",
    "apply_weight_progression",
    "updated_weight",
    "weight_delta",
    "attach_feedback",
    "collect_feedback",
    "week_to_csv",
    "week_to_markdown",
    "summarize_changes",
]
