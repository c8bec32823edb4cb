from pydantic import BaseModel, Field
from typing import Optional, Dict, Any
import datetime

from app.enums import WorkoutKind


class WorkoutCompletionCreate(BaseModel):
    """Records that a generated rehab or fitness workout was actually performed."""
    date: Optional[datetime.date] = None
    kind: WorkoutKind
    workout_payload: Dict[str, Any] = Field(..., description="Rehab or fitness workout as returned by /plans")


class WorkoutCompletionResponse(BaseModel):
    id: str
    user_id: str
    date: datetime.date
    kind: str
    workout_payload: Dict[str, Any]
    created_at: datetime.datetime

    class Config:
        from_attributes = True
