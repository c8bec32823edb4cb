from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.connection import get_db
from app.models.user import User
from app.middlewares.clerk_auth import get_authenticated_user
from app.services.profile_service import ProfileService

router = APIRouter(prefix="/user", tags=["User"])


@router.get("/me", summary="Get Current User")
async def get_current_user(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    """Account details plus whether onboarding (the recovery profile) is done."""
    profile = await ProfileService.get_profile(db, user.id)
    return {
        "id": user.id,
        "email": user.email,
        "clerk_id": user.clerk_id,
        "is_active": user.is_active,
        "has_recovery_profile": profile is not None,
        "created_at": user.created_at.isoformat() if user.created_at else None
    }
