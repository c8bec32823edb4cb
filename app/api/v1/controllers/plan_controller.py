"""
Plan Controller

Loads the profile and the recent log window for the authenticated user and
hands them to the planner services.
"""
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional, Tuple

from app.core.config import settings
from app.enums import RecoveryStage
from app.services.profile_service import ProfileService
from app.services.log_service import LogService
from app.services.recovery_stage_service import RecoveryStageService, STAGE_LOG_WINDOW
from app.services.activity_permission_service import ActivityPermissionService
from app.services.rehab_plan_service import RehabPlanService
from app.services.fitness_plan_service import FitnessPlanService
from app.services.progress_advisor_service import ProgressAdvisorService
from app.services.recovery_planner_service import RecoveryPlannerService
from app.schemas.profile_schemas import RecoveryProfile
from app.schemas.log_schemas import DailyLogEntry
from app.schemas.planner_schemas import (
    StageResponse,
    AllowedActivities,
    RehabWorkout,
    WeeklyPlan,
    TodayWorkout,
    MilestoneSuggestionResponse
)
from app.exceptions.errors import ApplicationException, ProfileNotFoundException
from app.core.logger import get_logger

logger = get_logger("plan_controller")


class PlanController:
    """Controller for recovery stage, permissions and generated plans."""

    @staticmethod
    async def _load_inputs(db: AsyncSession, user_id: str) -> Tuple[RecoveryProfile, List[DailyLogEntry]]:
        profile = await ProfileService.get_profile(db, user_id)
        if not profile:
            raise ProfileNotFoundException()
        logs = await LogService.get_recent_logs(db, user_id, settings.LOG_WINDOW_SIZE)
        return profile, logs

    @staticmethod
    async def _run(user_id: str, action: str, coro):
        try:
            return await coro
        except (HTTPException, ApplicationException):
            raise
        except Exception as e:
            logger.error(f"❌ Error generating {action} for user {user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Failed to generate {action}"
            )

    @staticmethod
    async def get_stage(db: AsyncSession, user_id: str) -> StageResponse:
        async def build():
            profile, logs = await PlanController._load_inputs(db, user_id)
            stage = RecoveryStageService.current_stage(profile, logs)
            return StageResponse(stage=stage, logs_considered=min(len(logs), STAGE_LOG_WINDOW))
        return await PlanController._run(user_id, "recovery stage", build())

    @staticmethod
    async def get_allowed(db: AsyncSession, user_id: str) -> AllowedActivities:
        async def build():
            profile, logs = await PlanController._load_inputs(db, user_id)
            return ActivityPermissionService.allowed_activities(profile, RecoveryPlannerService.latest(logs))
        return await PlanController._run(user_id, "allowed activities", build())

    @staticmethod
    async def get_rehab_plan(
        db: AsyncSession,
        user_id: str,
        stage: Optional[RecoveryStage] = None
    ) -> RehabWorkout:
        """Rehab session for the classified stage, or for an explicit stage override."""
        async def build():
            profile, logs = await PlanController._load_inputs(db, user_id)
            plan_stage = stage or RecoveryStageService.current_stage(profile, logs)
            return RehabPlanService.rehab_plan(plan_stage, profile, RecoveryPlannerService.latest(logs))
        return await PlanController._run(user_id, "rehab plan", build())

    @staticmethod
    async def get_fitness_plan(db: AsyncSession, user_id: str) -> WeeklyPlan:
        async def build():
            profile, logs = await PlanController._load_inputs(db, user_id)
            return FitnessPlanService.fitness_plan(profile, RecoveryPlannerService.latest(logs), logs)
        return await PlanController._run(user_id, "fitness plan", build())

    @staticmethod
    async def get_today(db: AsyncSession, user_id: str) -> TodayWorkout:
        async def build():
            profile, logs = await PlanController._load_inputs(db, user_id)
            return RecoveryPlannerService.today_workout(profile, logs)
        return await PlanController._run(user_id, "today's workout", build())

    @staticmethod
    async def get_next_milestone(db: AsyncSession, user_id: str) -> MilestoneSuggestionResponse:
        async def build():
            profile, logs = await PlanController._load_inputs(db, user_id)
            return MilestoneSuggestionResponse(
                next_milestone=ProgressAdvisorService.suggest_next_milestone(
                    profile, RecoveryPlannerService.latest(logs)
                ),
                should_progress=ProgressAdvisorService.should_progress(logs)
            )
        return await PlanController._run(user_id, "milestone suggestion", build())
