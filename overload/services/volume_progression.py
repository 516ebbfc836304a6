from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Set, Tuple

from overload.models import (
    MUSCLE_GROUPS,
    ExerciseInstance,
    ExerciseSet,
    MuscleGroup,
    PreferenceLookup,
    Workout,
    guidelines_for,
)
from .alignment import aligned_workout, matching_exercise
from .state import ProgressionState

logger = logging.getLogger(__name__)

Candidate = Tuple[int, ExerciseInstance]


def prioritized_muscles(next_week: Sequence[Workout], preferences: Optional[PreferenceLookup]) -> Optional[Set[MuscleGroup]]:
    """Return the muscles eligible for volume progression, or None when every muscle is.

    Every muscle is eligible when no workout resolves to a plan with preferences, or
    when some owning plan lists no preferences at all. Otherwise only muscles marked
    "grow" in some plan qualify.
    """
    grow: Set[MuscleGroup] = set()
    resolved = False
    for workout in next_week:
        if not workout.plan_id or preferences is None or workout.plan_id not in preferences:
            continue
        prefs = preferences[workout.plan_id]
        if not prefs:
            return None
        resolved = True
        grow.update(p.muscle_group for p in prefs if p.goal == "grow")
    if not resolved:
        return None
    return grow


def _candidates(
    muscle: MuscleGroup,
    next_week: Sequence[Workout],
    state: ProgressionState,
) -> List[Candidate]:
    out: List[Candidate] = []
    for i, workout in enumerate(next_week):
        if workout.id in state.fatigue_reduced_workouts:
            trains = any(ex.movement is not None and muscle in ex.movement.primary_muscles for ex in workout.exercises)
            if trains:
                state.record(
                    logger, "PROGRESSION: Skipping workout %s for %s - already reduced due to fatigue", workout.title, muscle
                )
            continue
        for ex in workout.exercises:
            if ex.movement is None or ex.joint_warning:
                continue
            if muscle in ex.movement.primary_muscles:
                out.append((i, ex))
    # fewest sets first; stable for ties
    return sorted(out, key=lambda c: c[1].set_count)


def _too_much_feedback(
    index: int,
    exercise: ExerciseInstance,
    current_week: Sequence[Workout],
    next_week: Sequence[Workout],
) -> bool:
    source = aligned_workout(current_week, index)
    if source is None:
        return False
    current_ex = matching_exercise(exercise, source, next_week[index])
    return bool(current_ex and current_ex.feedback and current_ex.feedback.set_volume == "tooMuch")


def _new_set(exercise: ExerciseInstance) -> ExerciseSet:
    if exercise.sets:
        return exercise.sets[-1].clone_incomplete()
    return ExerciseSet()


def _weekly_limit(muscle: MuscleGroup, current_volume: Dict[MuscleGroup, int], cap: int) -> int:
    """Sets a muscle may gain this week: the weekly cap, trimmed to its upper target."""
    return min(cap, guidelines_for(muscle).max_hypertrophy_sets - current_volume.get(muscle, 0))


def _addition_blocker(
    exercise: ExerciseInstance,
    current_volume: Dict[MuscleGroup, int],
    state: ProgressionState,
) -> Optional[str]:
    # a set lands on every primary muscle of the exercise, so all of them must accept it
    if exercise.movement is None:
        return "no movement data"
    for m in exercise.movement.primary_muscles:
        if m in state.regressed_muscles:
            return f"{m} regressed this week due to soreness"
        if m in state.blocked_muscles:
            return f"{m} blocked by joint pain"
        if state.sets_added.get(m, 0) >= _weekly_limit(m, current_volume, state.settings.MAX_WEEKLY_SETS_ADDED):
            return f"{m} already received its weekly sets"
    return None


def _record_added_set(exercise: ExerciseInstance, state: ProgressionState) -> None:
    if exercise.movement is None:
        return
    for m in dict.fromkeys(exercise.movement.primary_muscles):
        state.sets_added[m] = state.sets_added.get(m, 0) + 1
        state.progression(m).sets_added += 1


def apply_volume_progression(
    current_week: Sequence[Workout],
    next_week: List[Workout],
    current_volume: Dict[MuscleGroup, int],
    state: ProgressionState,
    preferences: Optional[PreferenceLookup] = None,
) -> Dict[MuscleGroup, int]:
    """Add up to the weekly cap of sets per eligible muscle, fewest-set exercises first.

    Exercises whose current-week counterpart was rated "tooMuch" lose a set instead
    and get nothing added. A set added to an exercise counts against the weekly cap
    of every primary muscle it trains. Returns the sets added per muscle this run.
    """
    s = state.settings
    prioritized = prioritized_muscles(next_week, preferences)

    for muscle in MUSCLE_GROUPS:
        if muscle not in current_volume:
            continue
        volume = current_volume[muscle]
        upper = guidelines_for(muscle).max_hypertrophy_sets
        if volume >= upper:
            state.record(logger, "PROGRESSION: %s already at or above upper target (%d sets)", muscle, volume)
            continue
        if muscle in state.blocked_muscles:
            state.record(logger, "PROGRESSION: Skipping %s due to joint pain warning", muscle)
            continue
        if muscle in state.regressed_muscles:
            state.record(logger, "PROGRESSION: Skipping %s - regressed this week due to soreness", muscle)
            continue
        if prioritized is not None and muscle not in prioritized:
            state.record(logger, "PROGRESSION: Skipping %s - not prioritized in training plan", muscle)
            continue

        limit = _weekly_limit(muscle, current_volume, s.MAX_WEEKLY_SETS_ADDED)
        already = state.sets_added.get(muscle, 0)
        state.record(
            logger,
            "PROGRESSION: %s at %d sets, target %d-%d, can receive up to %d more sets",
            muscle,
            volume,
            guidelines_for(muscle).min_hypertrophy_sets,
            upper,
            max(limit - already, 0),
        )
        if already >= limit:
            # still scanned below so "too much" reductions apply
            state.record(logger, "PROGRESSION: %s already received maximum weekly progression (+%d sets)", muscle, already)

        candidates = _candidates(muscle, next_week, state)
        if not candidates:
            state.record(logger, "PROGRESSION: No eligible exercises found that target %s", muscle)
            continue

        added = 0
        for index, ex in candidates:
            if ex.id in state.too_much_reduced:
                continue
            if _too_much_feedback(index, ex, current_week, next_week):
                state.too_much_reduced.add(ex.id)
                if ex.set_count > s.MIN_SETS_PER_EXERCISE:
                    ex.sets.pop()
                    state.record(logger, "PROGRESSION: Removed 1 set from %s due to 'too much' feedback", ex.name)
                else:
                    state.record(logger, "PROGRESSION: Skipped reduction for %s - only 1 set", ex.name)
                continue
            if state.sets_added.get(muscle, 0) >= limit:
                continue
            if ex.set_count >= s.MAX_SETS_PER_EXERCISE:
                state.record(
                    logger, "PROGRESSION: Skipping %s - already at %d sets maximum", ex.name, s.MAX_SETS_PER_EXERCISE
                )
                continue
            reason = _addition_blocker(ex, current_volume, state)
            if reason is not None:
                state.record(logger, "PROGRESSION: Skipping %s for %s - %s", ex.name, muscle, reason)
                continue

            ex.sets.append(_new_set(ex))
            added += 1
            _record_added_set(ex, state)
            state.record(
                logger, "PROGRESSION: Added set to %s for %s (now %d sets)", ex.name, muscle, ex.set_count
            )

        state.record(
            logger,
            "PROGRESSION: %s received +%d sets (total added this week: %d)",
            muscle,
            added,
            state.sets_added.get(muscle, 0),
        )

    return dict(state.sets_added)
