from __future__ import annotations

from typing import Dict, Iterable, List, Optional
from pydantic import BaseModel, Field

from .muscle import MuscleTrainingPreference
from .workout import new_id


class TrainingPlan(BaseModel):
    id: str = Field(default_factory=new_id)
    name: str
    days_per_week: int = Field(3, ge=1, le=7)
    muscle_preferences: List[MuscleTrainingPreference] = Field(default_factory=list)
    notes: Optional[str] = None


PreferenceLookup = Dict[str, List[MuscleTrainingPreference]]


def preference_lookup(plans: Iterable[TrainingPlan] | None) -> PreferenceLookup:
    """Map plan id -> muscle preferences, the only plan data the engine reads."""
    return {p.id: list(p.muscle_preferences) for p in (plans or [])}
