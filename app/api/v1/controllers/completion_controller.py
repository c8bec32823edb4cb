"""
Workout Completion Controller
"""
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.services.completion_service import CompletionService
from app.schemas.completion_schemas import WorkoutCompletionCreate, WorkoutCompletionResponse
from app.core.logger import get_logger

logger = get_logger("completion_controller")


class CompletionController:

    @staticmethod
    async def record_completion(
        db: AsyncSession,
        user_id: str,
        data: WorkoutCompletionCreate
    ) -> WorkoutCompletionResponse:
        try:
            completion = await CompletionService.record_completion(db, user_id, data)
            return WorkoutCompletionResponse.model_validate(completion)

        except Exception as e:
            await db.rollback()
            logger.error(f"Error recording completion for user {user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to record workout completion"
            )

    @staticmethod
    async def list_completions(db: AsyncSession, user_id: str, limit: int) -> List[WorkoutCompletionResponse]:
        try:
            completions = await CompletionService.list_completions(db, user_id, limit)
            return [WorkoutCompletionResponse.model_validate(c) for c in completions]

        except Exception as e:
            logger.error(f"Error fetching completions for user {user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to fetch workout completions"
            )
