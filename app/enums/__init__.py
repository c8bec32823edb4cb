"""
Shared enums for the application.
"""

from .recovery_enums import (
    InjurySide,
    SurgeryStatus,
    RecoveryStage,
    ExternalRotationLimit,
    RomBucket,
    BehindBackReach,
    GoalType,
    CardioType,
    StrengthCategory,
    ExerciseCategory,
    TargetArea,
    FitnessWorkoutType,
    Intensity,
    WorkoutKind,
    MilestoneType
)

__all__ = [
    "InjurySide",
    "SurgeryStatus",
    "RecoveryStage",
    "ExternalRotationLimit",
    "RomBucket",
    "BehindBackReach",
    "GoalType",
    "CardioType",
    "StrengthCategory",
    "ExerciseCategory",
    "TargetArea",
    "FitnessWorkoutType",
    "Intensity",
    "WorkoutKind",
    "MilestoneType"
]
