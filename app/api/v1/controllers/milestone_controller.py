"""
Milestone Controller
"""
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.services.milestone_service import MilestoneService
from app.schemas.milestone_schemas import MilestoneCreate, MilestoneResponse
from app.exceptions.errors import ApplicationException, NotFoundException
from app.core.logger import get_logger

logger = get_logger("milestone_controller")


class MilestoneController:

    @staticmethod
    async def create_milestone(db: AsyncSession, user_id: str, data: MilestoneCreate) -> MilestoneResponse:
        try:
            milestone = await MilestoneService.create_milestone(db, user_id, data)
            return MilestoneResponse.model_validate(milestone)

        except Exception as e:
            await db.rollback()
            logger.error(f"Error saving milestone for user {user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to save milestone"
            )

    @staticmethod
    async def list_milestones(db: AsyncSession, user_id: str) -> List[MilestoneResponse]:
        try:
            milestones = await MilestoneService.list_milestones(db, user_id)
            return [MilestoneResponse.model_validate(m) for m in milestones]

        except Exception as e:
            logger.error(f"Error fetching milestones for user {user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to fetch milestones"
            )

    @staticmethod
    async def delete_milestone(db: AsyncSession, user_id: str, milestone_id: str) -> dict:
        try:
            deleted = await MilestoneService.delete_milestone(db, user_id, milestone_id)
            if deleted is None:
                raise NotFoundException("Milestone not found")
            return {"success": True, "id": milestone_id}

        except (HTTPException, ApplicationException):
            raise
        except Exception as e:
            await db.rollback()
            logger.error(f"Error deleting milestone {milestone_id} for user {user_id}: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to delete milestone"
            )
