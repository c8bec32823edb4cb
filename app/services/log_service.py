from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc
from sqlalchemy.dialects.postgresql import insert
from typing import List, Iterable
from datetime import date, datetime, timedelta

from app.models.daily_log import DailyLog
from app.schemas.log_schemas import DailyLogCreate, DailyLogEntry
from app.core.logger import get_logger

logger = get_logger("log_service")


class LogService:
    """Log store: at most one check-in per user per calendar date."""

    @staticmethod
    async def upsert_log(db: AsyncSession, user_id: str, log_data: DailyLogCreate) -> DailyLogEntry:
        values = log_data.model_dump(mode="json", exclude={"date"})
        log_date = log_data.date or datetime.utcnow().date()

        stmt = insert(DailyLog).values(
            user_id=user_id,
            date=log_date,
            created_at=datetime.utcnow(),
            **values
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "date"],
            set_={k: stmt.excluded[k] for k in values.keys()}
        ).returning(DailyLog)

        result = await db.execute(stmt)
        await db.commit()

        log = result.scalar_one()
        logger.info(f"UPSERT daily log {log_date} for user {user_id}")
        return DailyLogEntry.model_validate(log)

    @staticmethod
    async def get_recent_logs(db: AsyncSession, user_id: str, limit: int) -> List[DailyLogEntry]:
        """Most recent `limit` logs, returned oldest to newest."""
        result = await db.execute(
            select(DailyLog)
            .where(DailyLog.user_id == user_id)
            .order_by(desc(DailyLog.date))
            .limit(limit)
        )
        newest_first = result.scalars().all()
        return [DailyLogEntry.model_validate(log) for log in reversed(newest_first)]

    @staticmethod
    def count_streak(log_dates: Iterable[date], today: date) -> int:
        """Consecutive logged days ending today."""
        logged = set(log_dates)
        streak = 0
        while today - timedelta(days=streak) in logged:
            streak += 1
        return streak
