from __future__ import annotations

from typing import List, Literal
from pydantic import BaseModel, Field

from .muscle import MuscleGroup


Equipment = Literal[
    "bodyweight",
    "barbell",
    "dumbbell",
    "machine",
    "cable",
]

MovementType = Literal["compound", "isolation", "unknown"]


class Movement(BaseModel):
    name: str
    movement_type: MovementType = "unknown"
    primary_muscles: List[MuscleGroup] = Field(default_factory=list)
    secondary_muscles: List[MuscleGroup] = Field(default_factory=list)
    equipment: Equipment = "bodyweight"

    @property
    def muscle_groups(self) -> List[MuscleGroup]:
        return self.primary_muscles + self.secondary_muscles

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Barbell Bench Press",
                    "movement_type": "compound",
                    "primary_muscles": ["chest"],
                    "secondary_muscles": ["triceps", "shoulders"],
                    "equipment": "barbell",
                }
            ]
        }
    }
