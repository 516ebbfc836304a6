from __future__ import annotations

from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, Field, TypeAdapter

from .muscle import JointArea, MuscleGroup


ExerciseIntensity = Literal["tooEasy", "moderate", "challenging", "failed"]

SetVolumeRating = Literal["tooEasy", "moderate", "challenging", "tooMuch"]

FatigueLevel = Literal["fresh", "normal", "wiped", "completelyDrained"]


class PreWorkoutFeedback(BaseModel):
    kind: Literal["pre"] = "pre"
    workout_id: str
    sore_muscles: List[MuscleGroup] = Field(default_factory=list)
    joint_pain_areas: List[JointArea] = Field(default_factory=list)

    @property
    def has_muscle_or_joint_issues(self) -> bool:
        return bool(self.sore_muscles or self.joint_pain_areas)


class ExerciseFeedback(BaseModel):
    kind: Literal["exercise"] = "exercise"
    workout_id: str
    exercise_id: str
    intensity: ExerciseIntensity
    set_volume: SetVolumeRating


class PostWorkoutFeedback(BaseModel):
    kind: Literal["post"] = "post"
    workout_id: str
    session_fatigue: FatigueLevel


WorkoutFeedback = Annotated[
    Union[PreWorkoutFeedback, ExerciseFeedback, PostWorkoutFeedback],
    Field(discriminator="kind"),
]

_feedback_adapter: TypeAdapter = TypeAdapter(List[WorkoutFeedback])


def parse_feedback(raw: list) -> List[PreWorkoutFeedback | ExerciseFeedback | PostWorkoutFeedback]:
    """Validate raw payloads (dicts or JSON-decoded data) into feedback variants."""
    return _feedback_adapter.validate_python(raw)
