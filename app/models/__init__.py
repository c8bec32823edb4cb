"""
Models package for the application.
"""

from .user import User
from .recovery_profile import RecoveryProfileRecord
from .daily_log import DailyLog
from .milestone import Milestone
from .workout_completion import WorkoutCompletion

__all__ = [
    "User",
    "RecoveryProfileRecord",
    "DailyLog",
    "Milestone",
    "WorkoutCompletion",
]
