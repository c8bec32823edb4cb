"""
Plan Routes

Read-only planner endpoints. Every plan is generated fresh per request.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from app.database.connection import get_db
from app.middlewares.clerk_auth import get_authenticated_user
from app.models.user import User
from app.enums import RecoveryStage
from app.api.v1.controllers.plan_controller import PlanController
from app.schemas.planner_schemas import (
    StageResponse,
    AllowedActivities,
    RehabWorkout,
    WeeklyPlan,
    TodayWorkout,
    MilestoneSuggestionResponse
)

router = APIRouter(prefix="/plans", tags=["Plans"])


@router.get("/stage", response_model=StageResponse, summary="Get Recovery Stage")
async def get_stage(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    return await PlanController.get_stage(db, user.id)


@router.get(
    "/allowed",
    response_model=AllowedActivities,
    summary="Get Allowed Activities",
    description="Cardio and strength categories currently permitted, plus deload status."
)
async def get_allowed(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    return await PlanController.get_allowed(db, user.id)


@router.get(
    "/rehab",
    response_model=RehabWorkout,
    summary="Get Rehab Session",
    description="Rehab session for the current stage. Pass `stage` to preview another stage."
)
async def get_rehab_plan(
    stage: Optional[RecoveryStage] = Query(None),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    return await PlanController.get_rehab_plan(db, user.id, stage)


@router.get("/fitness", response_model=WeeklyPlan, summary="Get Weekly Fitness Plan")
async def get_fitness_plan(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    return await PlanController.get_fitness_plan(db, user.id)


@router.get(
    "/today",
    response_model=TodayWorkout,
    summary="Get Today's Workout",
    description="Stage, rehab session and today's fitness session (null on rest days)."
)
async def get_today(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    return await PlanController.get_today(db, user.id)


@router.get("/next-milestone", response_model=MilestoneSuggestionResponse, summary="Get Next Milestone")
async def get_next_milestone(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    return await PlanController.get_next_milestone(db, user.id)
