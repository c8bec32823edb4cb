"""
Daily Log Controller
"""
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from datetime import datetime
from typing import List

from app.services.log_service import LogService
from app.schemas.log_schemas import DailyLogCreate, DailyLogEntry, LogStreakResponse
from app.core.logger import get_logger

logger = get_logger("log_controller")


class LogController:
    """Controller for daily check-ins."""

    @staticmethod
    async def save_log(db: AsyncSession, user_id: str, log_data: DailyLogCreate) -> DailyLogEntry:
        try:
            return await LogService.upsert_log(db, user_id, log_data)

        except Exception as e:
            await db.rollback()
            logger.error(f"Error saving daily log for user {user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to save daily log"
            )

    @staticmethod
    async def get_logs(db: AsyncSession, user_id: str, limit: int) -> List[DailyLogEntry]:
        """Recent logs, newest first for display."""
        try:
            logs = await LogService.get_recent_logs(db, user_id, limit)
            return list(reversed(logs))

        except Exception as e:
            logger.error(f"Error fetching logs for user {user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to fetch logs"
            )

    @staticmethod
    async def get_streak(db: AsyncSession, user_id: str, window: int) -> LogStreakResponse:
        try:
            logs = await LogService.get_recent_logs(db, user_id, window)
            today = datetime.utcnow().date()
            streak = LogService.count_streak((log.date for log in logs), today)
            return LogStreakResponse(current_streak_days=streak, logged_today=streak > 0)

        except Exception as e:
            logger.error(f"Error computing log streak for user {user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to compute streak"
            )
