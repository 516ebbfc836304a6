from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Set

from overload.config import Settings, get_settings
from overload.models import JointWarning, MuscleGroup, MuscleProgression


@dataclass
class ProgressionState:
    """Per-run accumulators threaded through every progression step."""

    settings: Settings = field(default_factory=get_settings)
    log: List[str] = field(default_factory=list)
    progressions: Dict[MuscleGroup, MuscleProgression] = field(default_factory=dict)
    regressed_muscles: Set[MuscleGroup] = field(default_factory=set)
    blocked_muscles: Set[MuscleGroup] = field(default_factory=set)
    joint_warnings: List[JointWarning] = field(default_factory=list)
    fatigue_reduced_workouts: Set[str] = field(default_factory=set)
    sets_added: Dict[MuscleGroup, int] = field(default_factory=dict)
    too_much_reduced: Set[str] = field(default_factory=set)

    def record(self, logger: logging.Logger, message: str, *args: object) -> None:
        text = message % args if args else message
        self.log.append(text)
        logger.debug(text)

    def progression(self, muscle: MuscleGroup) -> MuscleProgression:
        if muscle not in self.progressions:
            self.progressions[muscle] = MuscleProgression(muscle=muscle)
        return self.progressions[muscle]
