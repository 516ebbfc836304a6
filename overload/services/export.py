from __future__ import annotations

import csv
import io
from typing import Dict, List, Sequence

from overload.models import Workout
from .volume import primary_sets_by_muscle


def _fmt_date(workout: Workout) -> str:
    return workout.scheduled_date.date().isoformat() if workout.scheduled_date else ""


def _fmt_weight(w: float) -> str:
    return f"{w:g}"


def week_to_csv(week: Sequence[Workout]) -> bytes:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow([
        "workout_index",
        "workout_title",
        "scheduled_date",
        "exercise_name",
        "equipment",
        "set_count",
        "weights",
        "target_reps",
        "joint_warning",
    ])
    for i, workout in enumerate(week):
        for ex in workout.exercises:
            writer.writerow([
                i,
                workout.title,
                _fmt_date(workout),
                ex.name,
                ex.movement.equipment if ex.movement else "",
                ex.set_count,
                ";".join(_fmt_weight(s.weight) for s in ex.sets),
                ";".join(str(s.target_reps) for s in ex.sets),
                int(ex.joint_warning),
            ])
    return output.getvalue().encode("utf-8")


def week_to_markdown(week: Sequence[Workout], log: Sequence[str] | None = None) -> str:
    lines: List[str] = []
    lines.append(f"# Training Week ({len(week)} workouts)\n")
    for i, workout in enumerate(week):
        date = _fmt_date(workout)
        suffix = f" ({date})" if date else ""
        lines.append(f"\n## Day {i + 1}: {workout.title}{suffix}")
        for ex in workout.exercises:
            sets = ", ".join(f"{_fmt_weight(s.weight)}x{s.target_reps}" for s in ex.sets)
            warn = " - joint warning" if ex.joint_warning else ""
            lines.append(f"- {ex.name}: {ex.set_count} sets [{sets}]{warn}")
    if log:
        lines.append("\n### Progression log")
        for entry in log:
            lines.append(f"- {entry}")
    return "\n".join(lines) + "\n"


def summarize_changes(before: Sequence[Workout], after: Sequence[Workout]) -> Dict[str, int]:
    """Per-muscle change in primary-set totals between two versions of a week."""
    b = primary_sets_by_muscle(before)
    a = primary_sets_by_muscle(after)
    return {m: a.get(m, 0) - b.get(m, 0) for m in sorted(set(a) | set(b)) if a.get(m, 0) != b.get(m, 0)}
