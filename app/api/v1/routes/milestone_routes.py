"""
Milestone Routes
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.database.connection import get_db
from app.middlewares.clerk_auth import get_authenticated_user
from app.models.user import User
from app.api.v1.controllers.milestone_controller import MilestoneController
from app.schemas.milestone_schemas import MilestoneCreate, MilestoneResponse

router = APIRouter(prefix="/milestones", tags=["Milestones"])


@router.get("", response_model=List[MilestoneResponse], summary="List Milestones")
async def list_milestones(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    return await MilestoneController.list_milestones(db, user.id)


@router.post("", response_model=MilestoneResponse, summary="Record Milestone")
async def create_milestone(
    data: MilestoneCreate,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    return await MilestoneController.create_milestone(db, user.id, data)


@router.delete("/{milestone_id}", summary="Delete Milestone")
async def delete_milestone(
    milestone_id: str,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_authenticated_user)
):
    return await MilestoneController.delete_milestone(db, user.id, milestone_id)
