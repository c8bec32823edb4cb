from pydantic import BaseModel, Field, validator
from typing import Optional
from datetime import date, datetime

from app.enums import (
    InjurySide,
    SurgeryStatus,
    ExternalRotationLimit,
    GoalType
)


class CardioBaseline(BaseModel):
    can_bike_minutes: int = Field(0, ge=0, le=600)
    can_walk_minutes: int = Field(0, ge=0, le=600)
    can_run_minutes: int = Field(0, ge=0, le=600)


class Restrictions(BaseModel):
    """Shoulder restrictions captured at onboarding."""
    in_sling: bool = False
    no_running: bool = False
    no_overhead: bool = False
    max_abduction_angle: int = Field(0, ge=0, le=180)
    max_flexion_angle: int = Field(0, ge=0, le=180)
    external_rotation_limit: ExternalRotationLimit = ExternalRotationLimit.NONE
    painful_movements: Optional[str] = Field(None, max_length=500)


class FitnessGoal(BaseModel):
    type: GoalType
    target_date: Optional[date] = None
    days_per_week: int = Field(3, ge=2, le=6)
    minutes_per_day: int = Field(30, ge=15, le=90)
    cardio_baseline: CardioBaseline = Field(default_factory=CardioBaseline)


# Request schemas
class RecoveryProfileUpsert(BaseModel):
    injury_side: InjurySide
    injury_date: date
    surgery_status: SurgeryStatus = SurgeryStatus.NONE
    surgery_date: Optional[date] = None
    restrictions: Restrictions
    goal: FitnessGoal

    @validator('injury_date')
    def validate_injury_date(cls, v):
        if v > date.today():
            raise ValueError('Injury date cannot be in the future')
        return v

    @validator('surgery_date')
    def validate_surgery_date(cls, v, values):
        if v is None:
            return None
        injury_date = values.get('injury_date')
        if injury_date and v < injury_date:
            raise ValueError('Surgery date cannot be before the injury date')
        return v

    class Config:
        schema_extra = {
            "example": {
                "injury_side": "right",
                "injury_date": "2025-01-06",
                "surgery_status": "none",
                "restrictions": {
                    "in_sling": False,
                    "no_running": False,
                    "no_overhead": True,
                    "max_abduction_angle": 90,
                    "max_flexion_angle": 90,
                    "external_rotation_limit": "moderate"
                },
                "goal": {
                    "type": "10k",
                    "days_per_week": 4,
                    "minutes_per_day": 45,
                    "cardio_baseline": {
                        "can_bike_minutes": 30,
                        "can_walk_minutes": 45,
                        "can_run_minutes": 0
                    }
                }
            }
        }


# Response / snapshot schemas
class RecoveryProfile(BaseModel):
    """Read-only profile snapshot consumed by the planner."""
    id: str
    user_id: str
    injury_side: InjurySide
    injury_date: date
    surgery_status: SurgeryStatus
    surgery_date: Optional[date] = None
    restrictions: Restrictions
    goal: FitnessGoal
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
