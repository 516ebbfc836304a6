from __future__ import annotations

from datetime import timedelta

import pytest
from pydantic import ValidationError

from overload.models import (
    ExerciseFeedback,
    PostWorkoutFeedback,
    PreWorkoutFeedback,
    clone_week,
    parse_feedback,
)
from overload.services.feedback_routing import attach_feedback, collect_feedback

from factories import MONDAY, give_feedback, make_exercise, make_workout


def test_parse_feedback_picks_variant_by_kind() -> None:
    raw = [
        {"kind": "pre", "workout_id": "w1", "sore_muscles": ["quads"], "joint_pain_areas": ["knee"]},
        {"kind": "exercise", "workout_id": "w1", "exercise_id": "e1", "intensity": "tooEasy", "set_volume": "tooMuch"},
        {"kind": "post", "workout_id": "w1", "session_fatigue": "completelyDrained"},
    ]

    parsed = parse_feedback(raw)

    assert [type(f) for f in parsed] == [PreWorkoutFeedback, ExerciseFeedback, PostWorkoutFeedback]
    assert parsed[0].has_muscle_or_joint_issues
    assert parsed[1].set_volume == "tooMuch"


def test_parse_feedback_rejects_unknown_values() -> None:
    with pytest.raises(ValidationError):
        parse_feedback([{"kind": "mood", "workout_id": "w1"}])
    with pytest.raises(ValidationError):
        parse_feedback([{"kind": "post", "workout_id": "w1", "session_fatigue": "sleepy"}])
    with pytest.raises(ValidationError):
        parse_feedback([{"kind": "pre", "workout_id": "w1", "sore_muscles": ["neck"]}])


def test_pre_feedback_without_issues() -> None:
    assert not PreWorkoutFeedback(workout_id="w1").has_muscle_or_joint_issues


def test_attach_feedback_routes_to_workouts_and_exercises() -> None:
    workout = make_workout("Push", ["chest", "triceps"])
    bench = workout.exercises[0]
    items = [
        PreWorkoutFeedback(workout_id=workout.id, sore_muscles=["chest"]),
        ExerciseFeedback(workout_id=workout.id, exercise_id=bench.id, intensity="moderate", set_volume="moderate"),
        PostWorkoutFeedback(workout_id=workout.id, session_fatigue="wiped"),
    ]

    attached = attach_feedback([workout], items)

    assert attached == 3
    assert workout.pre_workout_feedback is items[0]
    assert bench.feedback is items[1]
    assert workout.exercises[1].feedback is None
    assert workout.post_workout_feedback is items[2]


def test_attach_feedback_skips_unknown_ids() -> None:
    workout = make_workout("Pull", ["back"])
    items = [
        PostWorkoutFeedback(workout_id="missing", session_fatigue="fresh"),
        ExerciseFeedback(workout_id=workout.id, exercise_id="missing", intensity="failed", set_volume="moderate"),
    ]

    assert attach_feedback([workout], items) == 0
    assert workout.post_workout_feedback is None
    assert workout.exercises[0].feedback is None


def test_collect_feedback_order() -> None:
    workout = make_workout("Legs", ["quads", "hamstrings"])
    workout.post_workout_feedback = PostWorkoutFeedback(workout_id=workout.id, session_fatigue="normal")
    give_feedback(workout, workout.exercises[1])
    workout.pre_workout_feedback = PreWorkoutFeedback(workout_id=workout.id)

    kinds = [f.kind for f in collect_feedback(workout)]

    assert kinds == ["pre", "exercise", "post"]


def test_copy_for_next_week_resets_session_state() -> None:
    ex = make_exercise("Squat", ["quads"], sets=2, weight=100.0, equipment="barbell")
    ex.sets[0].is_complete = True
    ex.sets[0].completed_reps = 9
    ex.joint_warning = True
    workout = make_workout("Legs", exercises=[ex])
    workout.is_complete = True
    workout.plan_id = "plan-1"
    give_feedback(workout, ex)

    copy = workout.copy_for_next_week()

    assert copy.id != workout.id
    assert copy.plan_id == "plan-1"
    assert copy.is_complete is False
    assert copy.scheduled_date == workout.scheduled_date
    new_ex = copy.exercises[0]
    assert new_ex.id != ex.id
    assert new_ex.feedback is None and new_ex.joint_warning is False
    assert [(s.weight, s.is_complete, s.completed_reps) for s in new_ex.sets] == [(100.0, False, None)] * 2


def test_clone_week_shifts_dates() -> None:
    week = [make_workout("A", ["chest"], day=0), make_workout("B", ["back"], day=None)]

    cloned = clone_week(week, shift_days=7)

    assert cloned[0].scheduled_date == MONDAY + timedelta(days=7)
    assert cloned[1].scheduled_date is None
    assert [w.title for w in cloned] == ["A", "B"]
