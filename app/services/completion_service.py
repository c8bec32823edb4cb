from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc
from typing import List
from datetime import datetime

from app.models.workout_completion import WorkoutCompletion
from app.schemas.completion_schemas import WorkoutCompletionCreate
from app.core.logger import get_logger

logger = get_logger("completion_service")


class CompletionService:
    """Completion recorder. Write-only as far as the planner is concerned."""

    @staticmethod
    async def record_completion(
        db: AsyncSession,
        user_id: str,
        data: WorkoutCompletionCreate
    ) -> WorkoutCompletion:
        completion = WorkoutCompletion(
            user_id=user_id,
            date=data.date or datetime.utcnow().date(),
            kind=data.kind.value,
            workout_payload=data.workout_payload
        )
        db.add(completion)
        await db.commit()
        await db.refresh(completion)
        logger.info(f"Recorded {completion.kind} completion for user {user_id} on {completion.date}")
        return completion

    @staticmethod
    async def list_completions(db: AsyncSession, user_id: str, limit: int) -> List[WorkoutCompletion]:
        result = await db.execute(
            select(WorkoutCompletion)
            .where(WorkoutCompletion.user_id == user_id)
            .order_by(desc(WorkoutCompletion.date), desc(WorkoutCompletion.created_at))
            .limit(limit)
        )
        return result.scalars().all()
