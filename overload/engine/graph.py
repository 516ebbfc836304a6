from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set

from overload.config import Settings, get_settings
from overload.models import (
    JointWarning,
    MuscleGroup,
    ProgressionResult,
    TrainingPlan,
    Workout,
    guidelines_for,
    preference_lookup,
)
from overload.services.fatigue import process_fatigue
from overload.services.joint_pain import process_joint_pain
from overload.services.soreness import process_soreness
from overload.services.state import ProgressionState
from overload.services.volume import calculate_volume_by_muscle
from overload.services.volume_progression import apply_volume_progression
from overload.services.weight_progression import apply_weight_progression

logger = logging.getLogger(__name__)

NOT_ENOUGH_WEEKS = "Need at least 2 weeks of workouts to apply progression"


@dataclass
class GraphState:
    current_volume: Dict[MuscleGroup, int] = field(default_factory=dict)
    joint_warnings: List[JointWarning] = field(default_factory=list)
    fatigue_reduced: Set[str] = field(default_factory=set)
    sets_realised: Dict[MuscleGroup, int] = field(default_factory=dict)
    progression: Optional[ProgressionState] = None
    result: Optional[ProgressionResult] = None
    log: List[str] = field(default_factory=list)


class ProgressionEngine:
    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def run(
        self,
        current_week: List[Workout],
        next_week: List[Workout],
        plans: Iterable[TrainingPlan] | None = None,
        state: GraphState | None = None,
    ) -> ProgressionResult:
        state = state if state is not None else GraphState()
        progression = ProgressionState(settings=self.settings)
        state.progression = progression
        # the caller's next week is never touched; every step works on this copy
        working = [w.model_copy(deep=True) for w in next_week]

        progression.record(logger, "Starting progression analysis")
        progression.record(logger, "Current week has %d workouts", len(current_week))
        progression.record(logger, "Next week has %d workouts", len(working))

        # volume
        state.current_volume = calculate_volume_by_muscle(current_week)
        for muscle, volume in state.current_volume.items():
            g = guidelines_for(muscle)
            progression.progression(muscle)  # seed tracking entry
            progression.record(
                logger, "Muscle %s at %d sets, target range %d-%d", muscle, volume, g.min_hypertrophy_sets, g.max_hypertrophy_sets
            )
        # soreness -> joint pain -> fatigue -> volume -> weight
        process_soreness(current_week, working, progression)
        state.joint_warnings = process_joint_pain(current_week, working, progression)
        state.fatigue_reduced = process_fatigue(current_week, working, progression)
        if state.fatigue_reduced:
            progression.record(
                logger, "FATIGUE: %d workouts had sets reduced due to fatigue", len(state.fatigue_reduced)
            )
        state.sets_realised = apply_volume_progression(
            current_week,
            working,
            state.current_volume,
            progression,
            preferences=preference_lookup(plans) if plans is not None else None,
        )
        apply_weight_progression(current_week, working, progression)
        progression.record(logger, "Progression complete")

        result = ProgressionResult(
            next_week=working,
            log=list(progression.log),
            progressions=dict(progression.progressions),
            joint_warnings=list(progression.joint_warnings),
            fatigue_reduced_workouts=sorted(progression.fatigue_reduced_workouts),
        )
        state.result = result
        state.log = result.log
        return result

    def invoke(self, weeks: List[List[Workout]], plans: Iterable[TrainingPlan] | None = None) -> Dict[str, Any]:
        state = GraphState()
        if len(weeks) < 2:
            logger.info(NOT_ENOUGH_WEEKS)
            state.log = [NOT_ENOUGH_WEEKS]
            return state.__dict__
        result = self.run(weeks[0], weeks[1], plans, state=state)
        weeks[1] = result.next_week
        return state.__dict__


def progress_week(
    current_week: List[Workout],
    next_week: List[Workout],
    plans: Iterable[TrainingPlan] | None = None,
    settings: Settings | None = None,
) -> ProgressionResult:
    """Progress `next_week` from `current_week` feedback without mutating either input."""
    return ProgressionEngine(settings).run(current_week, next_week, plans)


def apply_progression(
    weeks: List[List[Workout]],
    plans: Iterable[TrainingPlan] | None = None,
    settings: Settings | None = None,
) -> List[str]:
    """Replace weeks[1] with its progressed version and return the decision log.
    weeks[0] is the completed week and is only read.
    """
    if len(weeks) < 2:
        logger.info(NOT_ENOUGH_WEEKS)
        return [NOT_ENOUGH_WEEKS]
    result = progress_week(weeks[0], weeks[1], plans, settings)
    weeks[1] = result.next_week
    return result.log
