from .muscle import (
    MuscleGroup,
    JointArea,
    MuscleGoal,
    MUSCLE_GROUPS,
    JOINT_AREAS,
    JOINT_AFFECTED_MUSCLES,
    TrainingGuidelines,
    MuscleTrainingPreference,
    guidelines_for,
    affected_muscles,
)
from .movement import Movement, Equipment, MovementType
from .feedback import (
    ExerciseIntensity,
    SetVolumeRating,
    FatigueLevel,
    PreWorkoutFeedback,
    ExerciseFeedback,
    PostWorkoutFeedback,
    WorkoutFeedback,
    parse_feedback,
)
from .workout import ExerciseSet, ExerciseInstance, Workout, clone_week
from .plan import TrainingPlan, PreferenceLookup, preference_lookup
from .progression import MuscleProgression, JointWarning, ProgressionResult

__all__ = [
    "MuscleGroup",
    "JointArea",
    "MuscleGoal",
    "MUSCLE_GROUPS",
    "JOINT_AREAS",
    "JOINT_AFFECTED_MUSCLES",
    "TrainingGuidelines",
    "MuscleTrainingPreference",
    "guidelines_for",
    "affected_muscles",
    "Movement",
    "Equipment",
    "MovementType",
    "ExerciseIntensity",
    "SetVolumeRating",
    "FatigueLevel",
    "PreWorkoutFeedback",
    "ExerciseFeedback",
    "PostWorkoutFeedback",
    "WorkoutFeedback",
    "parse_feedback",
    "ExerciseSet",
    "ExerciseInstance",
    "Workout",
    "clone_week",
    "TrainingPlan",
    "PreferenceLookup",
    "preference_lookup",
    "MuscleProgression",
    "JointWarning",
    "ProgressionResult",
]
