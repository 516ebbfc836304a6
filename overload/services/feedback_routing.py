from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Union

from overload.models import ExerciseFeedback, PostWorkoutFeedback, PreWorkoutFeedback, Workout

logger = logging.getLogger(__name__)

AnyFeedback = Union[PreWorkoutFeedback, ExerciseFeedback, PostWorkoutFeedback]


def collect_feedback(workout: Workout) -> List[AnyFeedback]:
    """All feedback on a workout: pre, then each exercise in order, then post."""
    out: List[AnyFeedback] = []
    if workout.pre_workout_feedback is not None:
        out.append(workout.pre_workout_feedback)
    out.extend(ex.feedback for ex in workout.exercises if ex.feedback is not None)
    if workout.post_workout_feedback is not None:
        out.append(workout.post_workout_feedback)
    return out


def attach_feedback(week: Sequence[Workout], feedbacks: Iterable[AnyFeedback]) -> int:
    """Place each feedback item on its workout or exercise. Unknown ids are skipped."""
    by_id = {w.id: w for w in week}
    attached = 0
    for fb in feedbacks:
        workout = by_id.get(fb.workout_id)
        if workout is None:
            logger.warning("Feedback for unknown workout %s ignored", fb.workout_id)
            continue
        if isinstance(fb, PreWorkoutFeedback):
            workout.pre_workout_feedback = fb
        elif isinstance(fb, PostWorkoutFeedback):
            workout.post_workout_feedback = fb
        else:
            ex = next((e for e in workout.exercises if e.id == fb.exercise_id), None)
            if ex is None:
                logger.warning("Feedback for unknown exercise %s in %s ignored", fb.exercise_id, workout.title)
                continue
            ex.feedback = fb
        attached += 1
    return attached
