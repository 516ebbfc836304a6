from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

from overload.models import Equipment, ExerciseIntensity, Workout
from .alignment import aligned_workout, matching_exercise
from .state import ProgressionState

logger = logging.getLogger(__name__)

WEIGHT_INCREMENTS: Dict[Tuple[ExerciseIntensity, Equipment], float] = {
    ("tooEasy", "dumbbell"): 5.0,
    ("tooEasy", "machine"): 5.0,
    ("tooEasy", "cable"): 5.0,
    ("tooEasy", "barbell"): 10.0,
    ("moderate", "dumbbell"): 2.5,
    ("moderate", "machine"): 2.5,
    ("moderate", "cable"): 2.5,
    ("moderate", "barbell"): 5.0,
    ("failed", "barbell"): -5.0,
    ("failed", "dumbbell"): -2.5,
    ("failed", "machine"): -2.5,
    ("failed", "cable"): -2.5,
}

REP_INCREMENT = 1


def weight_delta(intensity: ExerciseIntensity, equipment: Equipment) -> float:
    return WEIGHT_INCREMENTS.get((intensity, equipment), 0.0)


def updated_weight(current: float, intensity: ExerciseIntensity, equipment: Equipment, min_weight: float = 5.0) -> float:
    # near-zero loads are left alone
    if current < min_weight:
        return current
    return current + weight_delta(intensity, equipment)


def apply_weight_progression(
    current_week: Sequence[Workout],
    next_week: List[Workout],
    state: ProgressionState,
) -> None:
    """Adjust next week's target weights (or reps, for "challenging") from intensity feedback."""
    min_weight = state.settings.MIN_ADJUSTABLE_WEIGHT
    state.record(logger, "WEIGHT: Starting weight progression analysis")

    for i, workout in enumerate(current_week):
        target = aligned_workout(next_week, i)
        if target is None:
            continue
        for current_ex in workout.exercises:
            if current_ex.movement is None:
                state.record(logger, "WEIGHT: Skipping exercise without movement data in %s", workout.title)
                continue
            if current_ex.feedback is None:
                continue
            if current_ex.movement.equipment == "bodyweight":
                state.record(logger, "WEIGHT: Skipping weight progression for bodyweight exercise %s", current_ex.name)
                continue
            next_ex = matching_exercise(current_ex, target, workout)
            if next_ex is None or not current_ex.sets:
                continue

            intensity = current_ex.feedback.intensity
            equipment = current_ex.movement.equipment
            for idx, next_set in enumerate(next_ex.sets):
                reference = current_ex.sets[min(idx, len(current_ex.sets) - 1)]
                if intensity == "challenging":
                    next_set.target_reps = reference.target_reps + REP_INCREMENT
                    state.record(
                        logger,
                        "WEIGHT: %s set %d target reps %d -> %d based on challenging feedback",
                        current_ex.name,
                        idx + 1,
                        reference.target_reps,
                        next_set.target_reps,
                    )
                    continue

                new_weight = updated_weight(reference.weight, intensity, equipment, min_weight)
                if new_weight == reference.weight:
                    continue
                next_set.weight = new_weight
                direction = "increased" if new_weight > reference.weight else "decreased"
                change_pct = abs((new_weight / reference.weight) - 1) * 100
                state.record(
                    logger,
                    "WEIGHT: %s weight %s from %s to %s (%.1f%% change) based on %s feedback",
                    current_ex.name,
                    direction,
                    reference.weight,
                    new_weight,
                    change_pct,
                    intensity,
                )
