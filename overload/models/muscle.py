from __future__ import annotations

from typing import Dict, List, Literal, Tuple, get_args
from pydantic import BaseModel, ConfigDict


MuscleGroup = Literal[
    "chest",
    "back",
    "quads",
    "hamstrings",
    "glutes",
    "calves",
    "biceps",
    "triceps",
    "shoulders",
    "abs",
    "forearms",
]

JointArea = Literal["knee", "shoulder", "elbow"]

MuscleGoal = Literal["grow", "maintain", "reduce"]

MUSCLE_GROUPS: Tuple[MuscleGroup, ...] = get_args(MuscleGroup)
JOINT_AREAS: Tuple[JointArea, ...] = get_args(JointArea)


class TrainingGuidelines(BaseModel):
    """Weekly set-count ranges for one muscle group.
    The hypertrophy upper bound is the ceiling for volume progression.
    """

    model_config = ConfigDict(frozen=True)

    maintenance_sets: Tuple[int, int]
    hypertrophy_sets: Tuple[int, int]

    @property
    def min_maintenance_sets(self) -> int:
        return self.maintenance_sets[0]

    @property
    def max_maintenance_sets(self) -> int:
        return self.maintenance_sets[1]

    @property
    def min_hypertrophy_sets(self) -> int:
        return self.hypertrophy_sets[0]

    @property
    def max_hypertrophy_sets(self) -> int:
        return self.hypertrophy_sets[1]


TRAINING_GUIDELINES: Dict[MuscleGroup, TrainingGuidelines] = {
    "chest": TrainingGuidelines(maintenance_sets=(6, 8), hypertrophy_sets=(12, 20)),
    "back": TrainingGuidelines(maintenance_sets=(8, 10), hypertrophy_sets=(14, 22)),
    "quads": TrainingGuidelines(maintenance_sets=(6, 8), hypertrophy_sets=(12, 18)),
    "hamstrings": TrainingGuidelines(maintenance_sets=(4, 6), hypertrophy_sets=(10, 16)),
    "glutes": TrainingGuidelines(maintenance_sets=(0, 4), hypertrophy_sets=(8, 16)),
    "calves": TrainingGuidelines(maintenance_sets=(6, 8), hypertrophy_sets=(8, 16)),
    "biceps": TrainingGuidelines(maintenance_sets=(6, 8), hypertrophy_sets=(14, 20)),
    "triceps": TrainingGuidelines(maintenance_sets=(4, 6), hypertrophy_sets=(10, 14)),
    "shoulders": TrainingGuidelines(maintenance_sets=(6, 8), hypertrophy_sets=(16, 22)),
    "abs": TrainingGuidelines(maintenance_sets=(0, 4), hypertrophy_sets=(16, 20)),
    "forearms": TrainingGuidelines(maintenance_sets=(2, 4), hypertrophy_sets=(8, 12)),
}

JOINT_AFFECTED_MUSCLES: Dict[JointArea, List[MuscleGroup]] = {
    "knee": ["quads", "hamstrings", "calves"],
    "shoulder": ["chest", "shoulders", "back", "triceps"],
    "elbow": ["biceps", "triceps", "forearms"],
}


def guidelines_for(muscle: MuscleGroup) -> TrainingGuidelines:
    return TRAINING_GUIDELINES[muscle]


def affected_muscles(area: JointArea) -> List[MuscleGroup]:
    return list(JOINT_AFFECTED_MUSCLES[area])


class MuscleTrainingPreference(BaseModel):
    muscle_group: MuscleGroup
    goal: MuscleGoal = "grow"

    @property
    def recommended_weekly_sets(self) -> int:
        g = guidelines_for(self.muscle_group)
        if self.goal == "grow":
            return g.min_hypertrophy_sets
        return g.min_maintenance_sets
