from pydantic import BaseModel, Field, validator
from typing import Optional
import datetime

from app.enums import RomBucket, BehindBackReach


class DailyLogCreate(BaseModel):
    """Daily check-in. Omitting `date` logs for today."""
    date: Optional[datetime.date] = None
    pain: int = Field(..., ge=0, le=10)
    instability: int = Field(..., ge=0, le=10, description="Feels like it could pop")
    sleep_impact: int = Field(..., ge=0, le=10)
    flexion_bucket: RomBucket
    abduction_bucket: RomBucket
    behind_back_reach: BehindBackReach
    sling_worn: bool = False
    did_rehab: bool = False
    did_cardio: bool = False
    did_strength: bool = False
    notes: Optional[str] = Field(None, max_length=1000)

    @validator('date')
    def validate_date(cls, v):
        if v is not None and v > datetime.date.today():
            raise ValueError('Cannot log a future date')
        return v


class DailyLogEntry(BaseModel):
    """Read-only log snapshot consumed by the planner."""
    id: str
    user_id: str
    date: datetime.date
    pain: int
    instability: int
    sleep_impact: int
    flexion_bucket: str
    abduction_bucket: str
    behind_back_reach: str
    sling_worn: bool = False
    did_rehab: bool = False
    did_cardio: bool = False
    did_strength: bool = False
    notes: Optional[str] = None
    created_at: Optional[datetime.datetime] = None

    class Config:
        from_attributes = True


class LogStreakResponse(BaseModel):
    current_streak_days: int
    logged_today: bool
