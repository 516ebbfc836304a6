from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional, Sequence
from uuid import uuid4
from pydantic import BaseModel, Field

from .feedback import ExerciseFeedback, PostWorkoutFeedback, PreWorkoutFeedback
from .movement import Movement


def new_id() -> str:
    return str(uuid4())


class ExerciseSet(BaseModel):
    id: str = Field(default_factory=new_id)
    weight: float = Field(0.0, ge=0)
    target_reps: int = Field(0, ge=0)
    completed_reps: Optional[int] = None
    is_complete: bool = False

    def clone_incomplete(self) -> "ExerciseSet":
        return ExerciseSet(weight=self.weight, target_reps=self.target_reps)


class ExerciseInstance(BaseModel):
    id: str = Field(default_factory=new_id)
    movement: Optional[Movement] = None
    sets: List[ExerciseSet] = Field(default_factory=list)
    feedback: Optional[ExerciseFeedback] = None
    joint_warning: bool = False
    note: Optional[str] = None

    @property
    def set_count(self) -> int:
        return len(self.sets)

    @property
    def name(self) -> str:
        return self.movement.name if self.movement else "<unknown movement>"


class Workout(BaseModel):
    id: str = Field(default_factory=new_id)
    title: str
    scheduled_date: Optional[datetime] = None
    is_complete: bool = False
    exercises: List[ExerciseInstance] = Field(default_factory=list)
    pre_workout_feedback: Optional[PreWorkoutFeedback] = None
    post_workout_feedback: Optional[PostWorkoutFeedback] = None
    plan_id: Optional[str] = None

    @property
    def total_sets(self) -> int:
        return sum(ex.set_count for ex in self.exercises)

    def copy_for_next_week(self, scheduled_date: Optional[datetime] = None) -> "Workout":
        """Clone this workout as an unperformed session.
        Ids are regenerated, sets reset to incomplete, feedback and warnings dropped.
        """
        exercises = [
            ExerciseInstance(
                movement=ex.movement.model_copy(deep=True) if ex.movement else None,
                sets=[s.clone_incomplete() for s in ex.sets],
                note=ex.note,
            )
            for ex in self.exercises
        ]
        return Workout(
            title=self.title,
            scheduled_date=scheduled_date if scheduled_date is not None else self.scheduled_date,
            exercises=exercises,
            plan_id=self.plan_id,
        )


def clone_week(workouts: Sequence[Workout], shift_days: int = 0) -> List[Workout]:
    out: List[Workout] = []
    for w in workouts:
        date = w.scheduled_date + timedelta(days=shift_days) if w.scheduled_date else None
        out.append(w.copy_for_next_week(scheduled_date=date))
    return out
