from typing import List, Optional
from datetime import datetime

from app.schemas.profile_schemas import RecoveryProfile
from app.schemas.log_schemas import DailyLogEntry
from app.schemas.planner_schemas import TodayWorkout
from app.services.recovery_stage_service import RecoveryStageService
from app.services.activity_permission_service import ActivityPermissionService
from app.services.rehab_plan_service import RehabPlanService
from app.services.fitness_plan_service import FitnessPlanService
from app.services.progress_advisor_service import ProgressAdvisorService
from app.utils.rom import day_of_week
from app.core.logger import get_logger

logger = get_logger("recovery_planner_service")


class RecoveryPlannerService:
    """Combines the planner services into the view for a single day."""

    @staticmethod
    def latest(logs: List[DailyLogEntry]) -> Optional[DailyLogEntry]:
        """Newest entry of an oldest-to-newest window."""
        return logs[-1] if logs else None

    @staticmethod
    def today_workout(
        profile: RecoveryProfile,
        logs: List[DailyLogEntry],
        now: Optional[datetime] = None
    ) -> TodayWorkout:
        now = now or datetime.utcnow()
        latest_log = RecoveryPlannerService.latest(logs)

        stage = RecoveryStageService.current_stage(profile, logs, now)
        rehab = RehabPlanService.rehab_plan(stage, profile, latest_log)
        weekly = FitnessPlanService.fitness_plan(profile, latest_log, logs, now)

        today = day_of_week(now)
        scheduled = next((w for w in weekly.workouts if w.day == today), None)
        if scheduled is None:
            logger.debug(f"No fitness session on day {today} for profile {profile.id}")

        return TodayWorkout(
            stage=stage,
            rehab=rehab,
            fitness=scheduled.fitness if scheduled else None,
            allowed=ActivityPermissionService.allowed_activities(profile, latest_log),
            next_milestone=ProgressAdvisorService.suggest_next_milestone(profile, latest_log),
            should_progress=ProgressAdvisorService.should_progress(logs)
        )
