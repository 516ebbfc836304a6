from __future__ import annotations

import math
from collections import defaultdict
from typing import Dict, Sequence

from overload.models import MuscleGroup, Workout

SECONDARY_CREDIT = 0.5


def secondary_credit(set_count: int) -> int:
    # arithmetic rounding, ties up (2.5 -> 3)
    return int(math.floor(set_count * SECONDARY_CREDIT + 0.5))


def calculate_volume_by_muscle(workouts: Sequence[Workout]) -> Dict[MuscleGroup, int]:
    """Weekly set volume per muscle: full credit for primary, half for secondary."""
    volume: Dict[MuscleGroup, int] = defaultdict(int)
    for workout in workouts:
        for ex in workout.exercises:
            if ex.movement is None:
                continue
            n = ex.set_count
            for m in ex.movement.primary_muscles:
                volume[m] += n
            for m in ex.movement.secondary_muscles:
                volume[m] += secondary_credit(n)
    return dict(volume)


def primary_sets_by_muscle(workouts: Sequence[Workout]) -> Dict[MuscleGroup, int]:
    counts: Dict[MuscleGroup, int] = defaultdict(int)
    for workout in workouts:
        for ex in workout.exercises:
            if ex.movement is None:
                continue
            for m in ex.movement.primary_muscles:
                counts[m] += ex.set_count
    return dict(counts)
