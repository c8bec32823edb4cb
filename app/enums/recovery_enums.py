"""
Recovery and training enums for the application.
"""

from enum import Enum


class InjurySide(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"


class SurgeryStatus(str, Enum):
    NONE = "none"
    PLANNED = "planned"
    POST_OP = "post-op"


class RecoveryStage(str, Enum):
    """Ordered least to most recovered."""
    ACUTE = "acute"
    EARLY_REHAB = "early-rehab"
    STRENGTHENING = "strengthening"
    RETURN_TO_SPORT = "return-to-sport"


class ExternalRotationLimit(str, Enum):
    NONE = "none"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class RomBucket(str, Enum):
    """Self-reported range of motion band, shared by flexion and abduction."""
    UNDER_60 = "<60"
    FROM_60_TO_90 = "60-90"
    FROM_90_TO_120 = "90-120"
    FROM_120_TO_150 = "120-150"
    OVER_150 = "150+"


class BehindBackReach(str, Enum):
    CANT = "cant"
    WAISTBAND = "waistband"
    MID_BACK = "mid-back"
    SHOULDER_BLADE = "shoulder-blade"


class GoalType(str, Enum):
    HALF_MARATHON = "half-marathon"
    TEN_K = "10k"
    FIVE_K = "5k"
    GENERAL_CONDITIONING = "general-conditioning"
    STRENGTH = "strength"
    WEIGHT_LOSS = "weight-loss"
    MAINTAIN_FITNESS = "maintain-fitness"


class CardioType(str, Enum):
    RUN = "run"
    BIKE = "bike"
    ELLIPTICAL = "elliptical"
    WALK = "walk"
    SWIM = "swim"
    ROW = "row"


class StrengthCategory(str, Enum):
    LEGS = "legs"
    CORE = "core"
    UPPER_PULL = "upper-pull"
    UPPER_PUSH = "upper-push"
    FULL_BODY = "full-body"


class ExerciseCategory(str, Enum):
    REHAB = "rehab"
    MOBILITY = "mobility"
    CARDIO = "cardio"
    STRENGTH = "strength"


class TargetArea(str, Enum):
    SHOULDER = "shoulder"
    CORE = "core"
    LEGS = "legs"
    FULL_BODY = "full-body"


class FitnessWorkoutType(str, Enum):
    CARDIO = "cardio"
    LEGS = "legs"
    CORE = "core"
    MOBILITY = "mobility"
    MIXED = "mixed"


class Intensity(str, Enum):
    EASY = "easy"
    MODERATE = "moderate"
    HARD = "hard"


class WorkoutKind(str, Enum):
    REHAB = "rehab"
    FITNESS = "fitness"


class MilestoneType(str, Enum):
    FLEXION_90 = "flexion-90"
    FLEXION_120 = "flexion-120"
    FLEXION_150 = "flexion-150"
    ABDUCTION_90 = "abduction-90"
    ABDUCTION_120 = "abduction-120"
    ABDUCTION_150 = "abduction-150"
    EXTERNAL_ROTATION = "external-rotation"
    FIRST_DAY_NO_SLING = "first-day-no-sling"
    PAIN_FREE_SLEEP = "pain-free-sleep"
    FIRST_RUN = "first-run"
    FIRST_FULL_WORKOUT = "first-full-workout"
    CUSTOM = "custom"
