from __future__ import annotations

from overload.engine import apply_progression, progress_week
from overload.models import PreWorkoutFeedback
from overload.services.joint_pain import process_joint_pain, reported_joint_pain
from overload.services.state import ProgressionState

from factories import give_feedback, make_exercise, make_workout, next_week_of


def _pain(workout, *areas: str) -> None:
    workout.pre_workout_feedback = PreWorkoutFeedback(workout_id=workout.id, joint_pain_areas=list(areas))


def test_knee_pain_flags_only_related_exercises() -> None:
    workout = make_workout("Workout 1", ["quads", "chest"])
    _pain(workout, "knee")
    weeks = [[workout], next_week_of([workout])]

    apply_progression(weeks)

    quads, chest = weeks[1][0].exercises
    assert quads.joint_warning is True, "Quad exercise should be flagged for knee pain"
    assert chest.joint_warning is False, "Chest exercise should not be flagged for knee pain"
    assert quads.set_count == 3, "Quad exercise should not get progression due to joint pain"
    assert chest.set_count > 3, "Chest exercise is unaffected by knee pain"


def test_secondary_muscles_are_flagged_too() -> None:
    hinge = make_exercise("Hip Thrust", ["glutes"], ["hamstrings"])
    workout = make_workout("Lower", exercises=[hinge])
    _pain(workout, "knee")
    nxt = next_week_of([workout])
    state = ProgressionState()

    warnings = process_joint_pain([workout], nxt, state)

    assert nxt[0].exercises[0].joint_warning
    assert [w.pain_area for w in warnings] == ["knee"]
    assert warnings[0].affected_muscles == ["quads", "hamstrings", "calves"]
    assert warnings[0].severity == 2
    assert {"quads", "hamstrings", "calves"} <= state.blocked_muscles


def test_no_pain_is_a_no_op() -> None:
    workout = make_workout("Push", ["chest", "triceps"])
    nxt = next_week_of([workout])
    state = ProgressionState()

    assert process_joint_pain([workout], nxt, state) == []
    assert not any(ex.joint_warning for ex in nxt[0].exercises)
    assert not state.blocked_muscles


def test_pain_areas_are_unioned_across_the_week() -> None:
    a = make_workout("A", ["chest"], day=0)
    b = make_workout("B", ["biceps"], day=1)
    _pain(a, "elbow")
    _pain(b, "elbow", "shoulder")

    assert reported_joint_pain([a, b]) == ["shoulder", "elbow"]


def test_blocked_muscle_gets_no_sets() -> None:
    a = make_workout("A", ["triceps", "chest"], day=0)
    b = make_workout("B", ["biceps"], day=2)
    _pain(a, "elbow")

    result = progress_week([a, b], next_week_of([a, b]))

    for muscle in ("triceps", "biceps"):
        assert result.sets_added(muscle) == 0, f"{muscle} progressed despite elbow pain"
    assert result.sets_added("chest") == 1


def test_joint_pain_and_too_much_do_not_stack() -> None:
    workout = make_workout("Legs", ["quads"])
    _pain(workout, "knee")
    give_feedback(workout, workout.exercises[0], set_volume="tooMuch")
    weeks = [[workout], next_week_of([workout])]

    apply_progression(weeks)

    quads = weeks[1][0].exercises[0]
    assert quads.joint_warning
    assert quads.set_count == 3
