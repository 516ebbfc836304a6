from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Sequence

from overload.models import MuscleGroup, Workout
from .alignment import aligned_workout, is_earlier, matching_exercise, position_of, sort_chronologically
from .state import ProgressionState

logger = logging.getLogger(__name__)


def _trains(workout: Workout, muscle: MuscleGroup) -> bool:
    return any(ex.movement is not None and muscle in ex.movement.primary_muscles for ex in workout.exercises)


def _workouts_by_muscle(workouts: Sequence[Workout]) -> Dict[MuscleGroup, List[Workout]]:
    out: Dict[MuscleGroup, List[Workout]] = defaultdict(list)
    for workout in workouts:
        for ex in workout.exercises:
            if ex.movement is None:
                continue
            for m in ex.movement.primary_muscles:
                if not any(w.id == workout.id for w in out[m]):
                    out[m].append(workout)
    return out


def process_soreness(
    current_week: Sequence[Workout],
    next_week: List[Workout],
    state: ProgressionState,
) -> None:
    """Remove one set from next week's copy of the workout that caused reported soreness.

    A muscle reported sore going into a workout that also trains it is blamed on the
    most recent earlier workout of the week training the same muscle. That workout's
    next-week counterpart loses the last set of the matching exercise, never going
    below the one-set floor. Each muscle is reduced at most once per run.
    """
    floor = state.settings.MIN_SETS_PER_EXERCISE
    ordered = sort_chronologically(current_week)
    trainers = _workouts_by_muscle(ordered)

    for workout in ordered:
        pre = workout.pre_workout_feedback
        if pre is None or not pre.sore_muscles:
            continue
        if workout.scheduled_date is None:
            state.record(logger, "SORENESS: %s has no scheduled date, soreness report ignored", workout.title)
            continue

        sore = list(dict.fromkeys(pre.sore_muscles))
        state.record(logger, "SORENESS: Workout %s reported soreness in: %s", workout.title, ", ".join(sore))

        for muscle in sore:
            if muscle in state.regressed_muscles:
                continue
            if not _trains(workout, muscle):
                state.record(logger, "SORENESS: %s is not trained in %s, no reduction", muscle, workout.title)
                continue

            earlier = [w for w in trainers.get(muscle, []) if w.id != workout.id and is_earlier(w, workout)]
            if not earlier:
                state.record(logger, "SORENESS: No previous workout found that trains %s", muscle)
                continue
            # ordered ascending, so the last one is the most recent prior trainer
            culprit = earlier[-1]

            idx = position_of(culprit, current_week)
            target = aligned_workout(next_week, idx) if idx is not None else None
            if target is None:
                state.record(logger, "SORENESS: No next-week workout aligned with %s", culprit.title)
                continue

            source_ex = next(
                ex for ex in culprit.exercises if ex.movement is not None and muscle in ex.movement.primary_muscles
            )
            next_ex = matching_exercise(source_ex, target, culprit)
            if next_ex is None:
                state.record(logger, "SORENESS: %s not found in next week's %s", source_ex.name, target.title)
                continue
            if next_ex.set_count <= floor:
                state.record(logger, "SORENESS: Cannot reduce sets in %s - only %d set available", next_ex.name, next_ex.set_count)
                continue

            next_ex.sets.pop()
            state.regressed_muscles.add(muscle)
            state.progression(muscle).sets_removed += 1
            state.record(
                logger,
                "SORENESS: Removed 1 set from %s in previous workout '%s' due to soreness in %s",
                next_ex.name,
                culprit.title,
                muscle,
            )
