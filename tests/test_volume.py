from __future__ import annotations

from overload.models import ExerciseInstance, Workout
from overload.services.volume import calculate_volume_by_muscle, secondary_credit

from factories import make_exercise


def test_primary_and_secondary_credit() -> None:
    bench = make_exercise("Bench Press", ["chest"], ["triceps"], sets=3)
    pushdown = make_exercise("Triceps Pushdown", ["triceps"], sets=2)
    workout = Workout(title="Push", exercises=[bench, pushdown])

    volume = calculate_volume_by_muscle([workout])

    assert volume["chest"] == 3
    # 2 primary + round(1.5) secondary
    assert volume["triceps"] == 4, f"Unexpected triceps volume: {volume}"


def test_secondary_credit_rounds_half_up() -> None:
    assert secondary_credit(0) == 0
    assert secondary_credit(1) == 1
    assert secondary_credit(3) == 2
    assert secondary_credit(4) == 2
    assert secondary_credit(5) == 3


def test_volume_sums_across_workouts_and_skips_missing_movements() -> None:
    w1 = Workout(title="A", exercises=[make_exercise("Squat", ["quads"], sets=3), ExerciseInstance()])
    w2 = Workout(title="B", exercises=[make_exercise("Leg Press", ["quads"], ["glutes"], sets=4)])

    volume = calculate_volume_by_muscle([w1, w2])

    assert volume == {"quads": 7, "glutes": 2}


def test_empty_week_has_no_volume() -> None:
    assert calculate_volume_by_muscle([]) == {}
