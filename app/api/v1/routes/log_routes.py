"""
Daily Log Routes
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.config import settings
from app.database.connection import get_db
from app.middlewares.clerk_auth import get_authenticated_user
from app.models.user import User
from app.api.v1.controllers.log_controller import LogController
from app.schemas.log_schemas import DailyLogCreate, DailyLogEntry, LogStreakResponse
from app.core.logger import get_logger

logger = get_logger("log_routes")

router = APIRouter(prefix="/logs", tags=["Daily Logs"])

STREAK_LOOKBACK_DAYS = 365


@router.get(
    "",
    response_model=List[DailyLogEntry],
    summary="Get Recent Logs",
    description="Most recent daily check-ins, newest first."
)
async def get_logs(
    limit: int = Query(settings.LOG_WINDOW_SIZE, ge=1, le=90),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    return await LogController.get_logs(db, user.id, limit)


@router.post(
    "",
    response_model=DailyLogEntry,
    summary="Save Daily Log",
    description="Create or update the check-in for a date (defaults to today). One log per day."
)
async def save_log(
    log_data: DailyLogCreate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    logger.info(f"POST /logs - User: {user.id}, Date: {log_data.date or 'today'}")
    return await LogController.save_log(db, user.id, log_data)


@router.get(
    "/streak",
    response_model=LogStreakResponse,
    summary="Get Logging Streak",
    description="Consecutive days with a check-in, ending today."
)
async def get_streak(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    return await LogController.get_streak(db, user.id, STREAK_LOOKBACK_DAYS)
