"""
Recovery Profile Routes
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.connection import get_db
from app.middlewares.clerk_auth import get_authenticated_user
from app.models.user import User
from app.api.v1.controllers.profile_controller import ProfileController
from app.schemas.profile_schemas import RecoveryProfileUpsert, RecoveryProfile
from app.core.logger import get_logger

logger = get_logger("profile_routes")

router = APIRouter(prefix="/profile", tags=["Recovery Profile"])


@router.get(
    "",
    response_model=RecoveryProfile,
    summary="Get Recovery Profile",
    description="Get the injury, restriction and goal profile for the current user."
)
async def get_profile(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    return await ProfileController.get_profile(db, user.id)


@router.put(
    "",
    response_model=RecoveryProfile,
    summary="Save Recovery Profile",
    description="Create or replace the recovery profile (upsert). The original creation time is kept."
)
async def save_profile(
    profile_data: RecoveryProfileUpsert,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    logger.info(f"PUT /profile - User: {user.id}")
    return await ProfileController.upsert_profile(db, user.id, profile_data)
