"""
Workout Completion Routes
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.core.config import settings
from app.database.connection import get_db
from app.middlewares.clerk_auth import get_authenticated_user
from app.models.user import User
from app.api.v1.controllers.completion_controller import CompletionController
from app.schemas.completion_schemas import WorkoutCompletionCreate, WorkoutCompletionResponse

router = APIRouter(prefix="/completions", tags=["Workout Completions"])


@router.post(
    "",
    response_model=WorkoutCompletionResponse,
    summary="Record Workout Completion",
    description="Store a copy of a generated rehab or fitness workout the user performed."
)
async def record_completion(
    data: WorkoutCompletionCreate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    return await CompletionController.record_completion(db, user.id, data)


@router.get("", response_model=List[WorkoutCompletionResponse], summary="List Workout Completions")
async def list_completions(
    limit: int = Query(settings.COMPLETION_HISTORY_LIMIT, ge=1, le=200),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    return await CompletionController.list_completions(db, user.id, limit)
