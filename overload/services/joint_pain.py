from __future__ import annotations

import logging
from typing import List, Sequence, Set

from overload.models import JOINT_AREAS, JointArea, JointWarning, Workout, affected_muscles
from .state import ProgressionState

logger = logging.getLogger(__name__)


def reported_joint_pain(workouts: Sequence[Workout]) -> List[JointArea]:
    areas: Set[JointArea] = set()
    for workout in workouts:
        if workout.pre_workout_feedback is not None:
            areas.update(workout.pre_workout_feedback.joint_pain_areas)
    return [a for a in JOINT_AREAS if a in areas]


def process_joint_pain(
    current_week: Sequence[Workout],
    next_week: List[Workout],
    state: ProgressionState,
) -> List[JointWarning]:
    """Flag next week's exercises near a painful joint and block their muscles from progression."""
    warnings: List[JointWarning] = []
    for area in reported_joint_pain(current_week):
        muscles = affected_muscles(area)
        warnings.append(JointWarning(pain_area=area, affected_muscles=muscles))
        state.blocked_muscles.update(muscles)

        for workout in next_week:
            for ex in workout.exercises:
                if ex.movement is None:
                    continue
                if set(ex.movement.muscle_groups).isdisjoint(muscles):
                    continue
                ex.joint_warning = True
                state.record(logger, "JOINT PAIN: Flagged %s with warning for %s pain", ex.name, area)

    state.joint_warnings.extend(warnings)
    return warnings
