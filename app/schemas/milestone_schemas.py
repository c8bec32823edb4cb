from pydantic import BaseModel, Field, validator
from typing import Optional
import datetime

from app.enums import MilestoneType


class MilestoneCreate(BaseModel):
    date: Optional[datetime.date] = None
    type: MilestoneType
    value: Optional[str] = Field(None, max_length=200, description="e.g. '2 miles' for a first run")
    notes: Optional[str] = Field(None, max_length=1000)

    @validator('value', always=True)
    def validate_custom_label(cls, v, values):
        if values.get('type') == MilestoneType.CUSTOM and not v:
            raise ValueError('Custom milestones need a value describing them')
        return v


class MilestoneResponse(BaseModel):
    id: str
    user_id: str
    date: datetime.date
    type: str
    value: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime.datetime

    class Config:
        from_attributes = True
