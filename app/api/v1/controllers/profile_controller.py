"""
Recovery Profile Controller
"""
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.profile_service import ProfileService
from app.schemas.profile_schemas import RecoveryProfileUpsert, RecoveryProfile
from app.exceptions.errors import ApplicationException, ProfileNotFoundException
from app.core.logger import get_logger

logger = get_logger("profile_controller")


class ProfileController:
    """Controller for the injury and goal profile."""

    @staticmethod
    async def get_profile(db: AsyncSession, user_id: str) -> RecoveryProfile:
        try:
            profile = await ProfileService.get_profile(db, user_id)
            if not profile:
                raise ProfileNotFoundException()
            return profile

        except (HTTPException, ApplicationException):
            raise
        except Exception as e:
            logger.error(f"Error fetching recovery profile for user {user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to fetch profile"
            )

    @staticmethod
    async def upsert_profile(
        db: AsyncSession,
        user_id: str,
        profile_data: RecoveryProfileUpsert
    ) -> RecoveryProfile:
        try:
            return await ProfileService.upsert_profile(db, user_id, profile_data)

        except Exception as e:
            await db.rollback()
            logger.error(f"Error UPSERT recovery profile for user {user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to save profile"
            )
