"""
Planner API Schemas

Transient plan objects produced by the planner services. None of these have a
persistence identity; a copy is stored only when a workout completion is recorded.
"""
from pydantic import BaseModel, Field
from typing import Optional, List

from app.enums import (
    CardioType,
    StrengthCategory,
    ExerciseCategory,
    TargetArea,
    RecoveryStage,
    FitnessWorkoutType,
    Intensity
)


class Exercise(BaseModel):
    """Static catalog entry with the prerequisites needed to attempt it."""
    id: str
    name: str
    category: ExerciseCategory
    target_area: TargetArea
    difficulty: int = Field(..., ge=1, le=5)
    requires_overhead: bool = False
    requires_shoulder_loading: bool = False
    requires_external_rotation: bool = False
    min_abduction_angle: int = 0
    min_flexion_angle: int = 0
    instructions: str
    sets: Optional[str] = None
    reps: Optional[str] = None
    duration: Optional[str] = None
    cardio_type: Optional[CardioType] = None

    class Config:
        frozen = True


class WorkoutExercise(BaseModel):
    exercise: Exercise
    sets: int
    reps: Optional[int] = None
    duration: Optional[str] = None
    notes: Optional[str] = None


class AllowedActivities(BaseModel):
    cardio: List[CardioType] = []
    strength: List[StrengthCategory] = []
    can_do_overhead: bool = False
    can_do_heavy_carries: bool = False
    can_do_pull_ups: bool = False
    is_deload_week: bool = False
    notes: List[str] = []


class RehabWorkout(BaseModel):
    id: str
    name: str
    stage: RecoveryStage
    exercises: List[WorkoutExercise]
    total_duration: str
    notes: Optional[str] = None


class FitnessWorkout(BaseModel):
    id: str
    name: str
    type: FitnessWorkoutType
    exercises: List[WorkoutExercise]
    total_duration: str
    cardio_type: Optional[CardioType] = None
    intensity: Intensity
    notes: Optional[str] = None


class ScheduledWorkout(BaseModel):
    """One slot of the weekly plan. Day 0 is Sunday."""
    day: int = Field(..., ge=0, le=6)
    fitness: FitnessWorkout


class WeeklyPlan(BaseModel):
    week_number: int
    start_date: str
    workouts: List[ScheduledWorkout]
    total_cardio_minutes: int
    total_strength_sessions: int
    weeks_to_goal: Optional[int] = None


class StageResponse(BaseModel):
    stage: RecoveryStage
    logs_considered: int


class MilestoneSuggestionResponse(BaseModel):
    next_milestone: str
    should_progress: bool


class TodayWorkout(BaseModel):
    """Everything the dashboard needs for the current day."""
    stage: RecoveryStage
    rehab: RehabWorkout
    fitness: Optional[FitnessWorkout] = None
    allowed: AllowedActivities
    next_milestone: str
    should_progress: bool
