from __future__ import annotations

from typing import Dict, List
from pydantic import BaseModel, Field

from .muscle import JointArea, MuscleGroup
from .workout import Workout


class MuscleProgression(BaseModel):
    muscle: MuscleGroup
    sets_added: int = 0
    sets_removed: int = 0

    @property
    def is_progressing(self) -> bool:
        return self.sets_added > 0

    @property
    def is_regressing(self) -> bool:
        return self.sets_removed > 0

    @property
    def net_change(self) -> int:
        return self.sets_added - self.sets_removed


class JointWarning(BaseModel):
    pain_area: JointArea
    affected_muscles: List[MuscleGroup]
    severity: int = Field(2, ge=1, le=3)


class ProgressionResult(BaseModel):
    next_week: List[Workout]
    log: List[str] = Field(default_factory=list)
    progressions: Dict[MuscleGroup, MuscleProgression] = Field(default_factory=dict)
    joint_warnings: List[JointWarning] = Field(default_factory=list)
    fatigue_reduced_workouts: List[str] = Field(default_factory=list)

    def sets_added(self, muscle: MuscleGroup) -> int:
        p = self.progressions.get(muscle)
        return p.sets_added if p else 0
