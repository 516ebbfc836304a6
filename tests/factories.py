from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional, Sequence

from overload.models import (
    ExerciseFeedback,
    ExerciseInstance,
    ExerciseSet,
    Movement,
    Workout,
)

MONDAY = datetime(2024, 1, 1, 9, 0)


def make_exercise(
    name: str,
    primary: Sequence[str],
    secondary: Sequence[str] = (),
    sets: int = 3,
    weight: float = 0.0,
    reps: int = 10,
    equipment: str = "bodyweight",
) -> ExerciseInstance:
    movement = Movement(
        name=name,
        primary_muscles=list(primary),
        secondary_muscles=list(secondary),
        equipment=equipment,
    )
    return ExerciseInstance(
        movement=movement,
        sets=[ExerciseSet(weight=weight, target_reps=reps) for _ in range(sets)],
    )


def make_workout(
    title: str,
    muscles: Sequence[str] = (),
    sets: int = 3,
    day: Optional[int] = 0,
    exercises: Optional[List[ExerciseInstance]] = None,
) -> Workout:
    """One single-muscle exercise per entry in `muscles`, named after the muscle."""
    if exercises is None:
        exercises = [make_exercise(f"{title} {m}", [m], sets=sets) for m in muscles]
    date = MONDAY + timedelta(days=day) if day is not None else None
    return Workout(title=title, scheduled_date=date, exercises=exercises)


def next_week_of(week: Sequence[Workout]) -> List[Workout]:
    return [w.copy_for_next_week() for w in week]


def give_feedback(workout: Workout, exercise: ExerciseInstance, intensity: str = "moderate", set_volume: str = "moderate") -> None:
    exercise.feedback = ExerciseFeedback(
        workout_id=workout.id,
        exercise_id=exercise.id,
        intensity=intensity,
        set_volume=set_volume,
    )


def primary_sets(week: Sequence[Workout], muscle: str) -> int:
    return sum(
        ex.set_count
        for w in week
        for ex in w.exercises
        if ex.movement is not None and muscle in ex.movement.primary_muscles
    )


def set_counts(workout: Workout) -> List[int]:
    return [ex.set_count for ex in workout.exercises]
