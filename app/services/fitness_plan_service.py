from typing import List, Optional
from datetime import datetime
import math

import cuid

from app.enums import (
    GoalType,
    CardioType,
    TargetArea,
    FitnessWorkoutType,
    Intensity
)
from app.schemas.profile_schemas import RecoveryProfile, FitnessGoal
from app.schemas.log_schemas import DailyLogEntry
from app.schemas.planner_schemas import (
    AllowedActivities,
    Exercise,
    WorkoutExercise,
    FitnessWorkout,
    ScheduledWorkout,
    WeeklyPlan
)
from app.services.activity_permission_service import ActivityPermissionService
from app.services.exercise_catalog import get_cardio_exercises, get_strength_exercises
from app.utils.rom import bucket_to_angle, weeks_since, days_until, NO_LOG_ANGLE
from app.utils.prescription import leading_int
from app.core.logger import get_logger

logger = get_logger("fitness_plan_service")

# Scheduling heuristics
REST_DAYS = (3, 6)
DAYS_IN_WEEK = 7
MAX_WORKOUTS_PER_WEEK = 6
CARDIO_SHARE = 0.6
DELOAD_VOLUME_FACTOR = 0.6
MAX_STRENGTH_MINUTES = 45
STRENGTH_LEG_EXERCISES = 3
STRENGTH_CORE_EXERCISES = 2
STRENGTH_DEFAULT_SETS = 3
STRENGTH_DEFAULT_REPS = 12

PRIMARY_CARDIO_PREFERENCE = (CardioType.RUN, CardioType.BIKE, CardioType.ELLIPTICAL)
FALLBACK_CARDIO = CardioType.WALK

# goal -> (base minutes, weekly increase, cap); flat goals have no increase
CARDIO_PROGRESSION = {
    GoalType.HALF_MARATHON: (60, 10, 180),
    GoalType.TEN_K: (45, 8, 120),
    GoalType.FIVE_K: (30, 6, 90),
    GoalType.GENERAL_CONDITIONING: (90, 0, 90),
    GoalType.MAINTAIN_FITNESS: (90, 0, 90),
    GoalType.STRENGTH: (60, 0, 60),
    GoalType.WEIGHT_LOSS: (150, 0, 150),
}


class FitnessPlanService:
    """Builds the weekly cardio and strength schedule around the current permissions."""

    @staticmethod
    def target_cardio_minutes(goal: FitnessGoal, week_number: int, is_deload_week: bool) -> int:
        base, per_week, cap = CARDIO_PROGRESSION[goal.type]
        minutes = min(cap, base + week_number * per_week)
        if is_deload_week:
            minutes = math.floor(minutes * DELOAD_VOLUME_FACTOR)
        return minutes

    @staticmethod
    def primary_cardio(allowed: AllowedActivities) -> CardioType:
        for cardio_type in PRIMARY_CARDIO_PREFERENCE:
            if cardio_type in allowed.cardio:
                return cardio_type
        return FALLBACK_CARDIO

    @staticmethod
    def eligible_cardio(allowed: AllowedActivities, flexion: int) -> List[Exercise]:
        return [
            ex for ex in get_cardio_exercises()
            if ex.cardio_type in allowed.cardio and ex.min_flexion_angle <= flexion
        ]

    @staticmethod
    def eligible_strength(
        profile: RecoveryProfile,
        allowed: AllowedActivities,
        flexion: int
    ) -> List[Exercise]:
        eligible = []
        for ex in get_strength_exercises():
            if ex.target_area == TargetArea.SHOULDER:
                continue
            if ex.requires_overhead and not allowed.can_do_overhead:
                continue
            if ex.requires_shoulder_loading and profile.restrictions.in_sling:
                continue
            if ex.min_flexion_angle > flexion:
                continue
            eligible.append(ex)
        return eligible

    @staticmethod
    def _cardio_session(
        day: int,
        minutes: int,
        primary: CardioType,
        exercises: List[Exercise],
        intensity: Intensity
    ) -> Optional[FitnessWorkout]:
        exercise = next((ex for ex in exercises if ex.cardio_type == primary), None)
        if exercise is None and exercises:
            exercise = exercises[0]
        if exercise is None:
            return None

        cardio_type = exercise.cardio_type
        return FitnessWorkout(
            id=f"fitness-cardio-{day}-{cuid.cuid()}",
            name=f"{cardio_type.value.capitalize()} Session",
            type=FitnessWorkoutType.CARDIO,
            exercises=[WorkoutExercise(exercise=exercise, sets=1, duration=f"{minutes} min")],
            total_duration=f"{minutes} min",
            cardio_type=cardio_type,
            intensity=intensity
        )

    @staticmethod
    def _strength_session(
        day: int,
        goal: FitnessGoal,
        exercises: List[Exercise],
        intensity: Intensity
    ) -> Optional[FitnessWorkout]:
        legs = [ex for ex in exercises if ex.target_area == TargetArea.LEGS][:STRENGTH_LEG_EXERCISES]
        core = [ex for ex in exercises if ex.target_area == TargetArea.CORE][:STRENGTH_CORE_EXERCISES]
        chosen = legs + core
        if not chosen:
            return None

        # type is a label only; every session is legs plus core
        return FitnessWorkout(
            id=f"fitness-strength-{day}-{cuid.cuid()}",
            name="Legs & Core",
            type=FitnessWorkoutType.LEGS if day == 1 else FitnessWorkoutType.CORE,
            exercises=[
                WorkoutExercise(
                    exercise=ex,
                    sets=leading_int(ex.sets, STRENGTH_DEFAULT_SETS),
                    reps=leading_int(ex.reps, STRENGTH_DEFAULT_REPS) if ex.reps else None,
                    duration=ex.duration
                )
                for ex in chosen
            ],
            total_duration=f"{min(goal.minutes_per_day, MAX_STRENGTH_MINUTES)} min",
            intensity=intensity
        )

    @staticmethod
    def fitness_plan(
        profile: RecoveryProfile,
        latest_log: Optional[DailyLogEntry],
        logs: List[DailyLogEntry],
        now: Optional[datetime] = None
    ) -> WeeklyPlan:
        """
        Lay out one week of cardio and strength sessions.

        Week numbers count from account creation, not from the injury. Day 0
        is Sunday; REST_DAYS are never scheduled. Even days lean to cardio
        until the strength quota is met.
        """
        now = now or datetime.utcnow()
        goal = profile.goal
        allowed = ActivityPermissionService.allowed_activities(profile, latest_log)

        week_number = weeks_since(profile.created_at, now) + 1
        target_minutes = FitnessPlanService.target_cardio_minutes(goal, week_number, allowed.is_deload_week)

        workouts_per_week = min(goal.days_per_week, MAX_WORKOUTS_PER_WEEK)
        target_cardio_sessions = math.ceil(workouts_per_week * CARDIO_SHARE)
        target_strength_sessions = workouts_per_week - target_cardio_sessions
        minutes_per_session = target_minutes // target_cardio_sessions if target_cardio_sessions else 0

        flexion = bucket_to_angle(latest_log.flexion_bucket) if latest_log else NO_LOG_ANGLE
        primary = FitnessPlanService.primary_cardio(allowed)
        cardio_exercises = FitnessPlanService.eligible_cardio(allowed, flexion)
        strength_exercises = FitnessPlanService.eligible_strength(profile, allowed, flexion)
        intensity = Intensity.EASY if allowed.is_deload_week else Intensity.MODERATE

        workouts = []
        cardio_planned = 0
        strength_planned = 0

        for day in range(DAYS_IN_WEEK):
            if cardio_planned >= target_cardio_sessions and strength_planned >= target_strength_sessions:
                break
            if day in REST_DAYS:
                continue

            is_cardio_day = day % 2 == 0 or strength_planned >= target_strength_sessions

            if is_cardio_day and cardio_planned < target_cardio_sessions:
                session = FitnessPlanService._cardio_session(
                    day, minutes_per_session, primary, cardio_exercises, intensity
                )
                if session:
                    workouts.append(ScheduledWorkout(day=day, fitness=session))
                    cardio_planned += 1
            elif strength_planned < target_strength_sessions:
                session = FitnessPlanService._strength_session(day, goal, strength_exercises, intensity)
                if session:
                    workouts.append(ScheduledWorkout(day=day, fitness=session))
                    strength_planned += 1

        weeks_to_goal = None
        if goal.target_date:
            weeks_to_goal = max(1, days_until(goal.target_date, now) // 7)

        logger.debug(
            f"Week {week_number} plan for profile {profile.id}: {cardio_planned} cardio, "
            f"{strength_planned} strength, {target_minutes} cardio minutes"
        )

        return WeeklyPlan(
            week_number=week_number,
            start_date=now.date().isoformat(),
            workouts=workouts,
            total_cardio_minutes=target_minutes,
            total_strength_sessions=strength_planned,
            weeks_to_goal=weeks_to_goal
        )
