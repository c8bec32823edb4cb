from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc
from typing import List, Optional
from datetime import datetime

from app.models.milestone import Milestone
from app.schemas.milestone_schemas import MilestoneCreate
from app.core.logger import get_logger

logger = get_logger("milestone_service")


class MilestoneService:

    @staticmethod
    async def create_milestone(db: AsyncSession, user_id: str, data: MilestoneCreate) -> Milestone:
        milestone = Milestone(
            user_id=user_id,
            date=data.date or datetime.utcnow().date(),
            type=data.type.value,
            value=data.value,
            notes=data.notes
        )
        db.add(milestone)
        await db.commit()
        await db.refresh(milestone)
        logger.info(f"Recorded milestone {milestone.type} for user {user_id}")
        return milestone

    @staticmethod
    async def list_milestones(db: AsyncSession, user_id: str) -> List[Milestone]:
        result = await db.execute(
            select(Milestone)
            .where(Milestone.user_id == user_id)
            .order_by(desc(Milestone.date), desc(Milestone.created_at))
        )
        return result.scalars().all()

    @staticmethod
    async def delete_milestone(db: AsyncSession, user_id: str, milestone_id: str) -> Optional[Milestone]:
        result = await db.execute(
            select(Milestone)
            .where(Milestone.id == milestone_id)
            .where(Milestone.user_id == user_id)
        )
        milestone = result.scalar_one_or_none()
        if milestone is None:
            return None

        await db.delete(milestone)
        await db.commit()
        logger.info(f"Deleted milestone {milestone_id} for user {user_id}")
        return milestone
