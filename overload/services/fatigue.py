from __future__ import annotations

import logging
from typing import List, Sequence, Set

from overload.models import Workout
from .alignment import aligned_workout
from .state import ProgressionState

logger = logging.getLogger(__name__)


def process_fatigue(
    current_week: Sequence[Workout],
    next_week: List[Workout],
    state: ProgressionState,
) -> Set[str]:
    """Take sets off next week's copy of every workout reported as completely drained.
    Largest exercises give first (up to the per-exercise cap each), none drops below the set floor.
    Returns the ids of next-week workouts excluded from volume progression.
    """
    to_remove_total = state.settings.FATIGUE_SETS_REMOVED
    floor = state.settings.MIN_SETS_PER_EXERCISE
    per_exercise = state.settings.MAX_FATIGUE_SETS_PER_EXERCISE

    for i, workout in enumerate(current_week):
        post = workout.post_workout_feedback
        if post is None or post.session_fatigue != "completelyDrained":
            continue
        target = aligned_workout(next_week, i)
        if target is None:
            state.record(logger, "FATIGUE: No next-week workout aligned with %s", workout.title)
            continue

        state.record(
            logger, "FATIGUE: Workout %s reported completely drained, removing %d sets", workout.title, to_remove_total
        )
        remaining = to_remove_total
        for ex in sorted(target.exercises, key=lambda e: e.set_count, reverse=True):
            if remaining <= 0:
                break
            take = min(remaining, per_exercise, ex.set_count - floor)
            if take <= 0:
                continue
            del ex.sets[-take:]
            remaining -= take
            state.record(logger, "FATIGUE: Removed %d sets from %s", take, ex.name)

        if remaining > 0:
            state.record(
                logger,
                "FATIGUE: Could only remove %d of %d sets from %s without going below %d set per exercise",
                to_remove_total - remaining,
                to_remove_total,
                target.title,
                floor,
            )
        state.fatigue_reduced_workouts.add(target.id)

    return set(state.fatigue_reduced_workouts)
