from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from typing import Optional
from datetime import datetime

from app.models.recovery_profile import RecoveryProfileRecord
from app.schemas.profile_schemas import RecoveryProfileUpsert, RecoveryProfile
from app.core.logger import get_logger

logger = get_logger("profile_service")


class ProfileService:
    """Profile store: one recovery profile per user."""

    @staticmethod
    async def get_profile(db: AsyncSession, user_id: str) -> Optional[RecoveryProfile]:
        result = await db.execute(
            select(RecoveryProfileRecord).where(RecoveryProfileRecord.user_id == user_id)
        )
        record = result.scalar_one_or_none()
        return RecoveryProfile.model_validate(record) if record else None

    @staticmethod
    async def upsert_profile(
        db: AsyncSession,
        user_id: str,
        profile_data: RecoveryProfileUpsert
    ) -> RecoveryProfile:
        """Create or replace the user's profile, keeping the original created_at."""
        values = profile_data.model_dump(mode="json")
        values["injury_date"] = profile_data.injury_date
        values["surgery_date"] = profile_data.surgery_date

        now = datetime.utcnow()
        stmt = insert(RecoveryProfileRecord).values(
            user_id=user_id,
            created_at=now,
            updated_at=now,
            **values
        )

        # created_at anchors week numbering, so it is never overwritten
        update_fields = {k: stmt.excluded[k] for k in values.keys()}
        update_fields["updated_at"] = stmt.excluded.updated_at

        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id"],
            set_=update_fields
        ).returning(RecoveryProfileRecord)

        result = await db.execute(stmt)
        await db.commit()

        record = result.scalar_one()
        logger.info(f"UPSERT recovery profile for user {user_id}")
        return RecoveryProfile.model_validate(record)
