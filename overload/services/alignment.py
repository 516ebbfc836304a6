from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from overload.models import ExerciseInstance, Workout


def chronological_key(workout: Workout) -> Tuple[int, datetime]:
    """Dated workouts first, ascending; undated workouts after all dated ones."""
    if workout.scheduled_date is None:
        return (1, datetime.min)
    return (0, workout.scheduled_date)


def sort_chronologically(workouts: Sequence[Workout]) -> List[Workout]:
    # sorted() is stable, so equal dates keep their week order
    return sorted(workouts, key=chronological_key)


def is_earlier(a: Workout, b: Workout) -> bool:
    if a.scheduled_date is None or b.scheduled_date is None:
        return False
    return a.scheduled_date < b.scheduled_date


def position_of(workout: Workout, week: Sequence[Workout]) -> Optional[int]:
    return next((i for i, w in enumerate(week) if w.id == workout.id), None)


def aligned_workout(week: Sequence[Workout], index: int) -> Optional[Workout]:
    if 0 <= index < len(week):
        return week[index]
    return None


def _same_name(workout: Workout, name: str) -> List[ExerciseInstance]:
    return [ex for ex in workout.exercises if ex.movement is not None and ex.movement.name == name]


def matching_exercise(
    exercise: ExerciseInstance,
    workout: Workout,
    source: Optional[Workout] = None,
) -> Optional[ExerciseInstance]:
    """The exercise in `workout` with the same movement name.

    When `source` (the workout holding `exercise`) is given, a movement that
    appears more than once is matched by occurrence: the k-th copy in `source`
    maps to the k-th copy in `workout`. Without it the first copy is returned.
    """
    if exercise.movement is None:
        return None
    candidates = _same_name(workout, exercise.movement.name)
    occurrence = 0
    if source is not None:
        peers = _same_name(source, exercise.movement.name)
        occurrence = next((k for k, ex in enumerate(peers) if ex.id == exercise.id), 0)
    if occurrence < len(candidates):
        return candidates[occurrence]
    return None
