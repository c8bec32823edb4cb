from typing import List, Optional

import cuid

from app.enums import RecoveryStage, ExternalRotationLimit
from app.schemas.profile_schemas import RecoveryProfile
from app.schemas.log_schemas import DailyLogEntry
from app.schemas.planner_schemas import Exercise, WorkoutExercise, RehabWorkout
from app.services.exercise_catalog import get_rehab_exercises
from app.utils.rom import bucket_to_angle, NO_LOG_ANGLE
from app.utils.prescription import leading_int
from app.core.logger import get_logger

logger = get_logger("rehab_plan_service")

NO_LOG_PAIN = 5
OVERHEAD_MIN_FLEXION = 120

# Difficulty caps; later stages are uncapped
STAGE_MAX_DIFFICULTY = {
    RecoveryStage.ACUTE: 2,
    RecoveryStage.EARLY_REHAB: 3,
}
HIGH_PAIN = 6
HIGH_PAIN_MAX_DIFFICULTY = 2

STAGE_EXERCISE_COUNT = {
    RecoveryStage.ACUTE: 3,
    RecoveryStage.EARLY_REHAB: 4,
    RecoveryStage.STRENGTHENING: 5,
    RecoveryStage.RETURN_TO_SPORT: 6,
}

STAGE_TARGET_DIFFICULTY = {
    RecoveryStage.ACUTE: 1,
    RecoveryStage.EARLY_REHAB: 2,
}
DEFAULT_TARGET_DIFFICULTY = 3

DEFAULT_SETS = 3
DEFAULT_REPS = 10
SECONDS_PER_REP = 3
UNPARSEABLE_DURATION_MINUTES = 2
TRANSITION_MINUTES = 5

ELEVATED_PAIN = 5
ELEVATED_PAIN_NOTE = "Go gentle today - pain is elevated"


class RehabPlanService:
    """Builds a single rehab session sized and capped for the recovery stage."""

    @staticmethod
    def is_eligible(
        exercise: Exercise,
        stage: RecoveryStage,
        profile: RecoveryProfile,
        flexion: int,
        abduction: int,
        pain: int
    ) -> bool:
        r = profile.restrictions

        if exercise.min_flexion_angle > flexion:
            return False
        if exercise.min_abduction_angle > abduction:
            return False

        if exercise.requires_overhead and (r.no_overhead or flexion < OVERHEAD_MIN_FLEXION):
            return False
        if exercise.requires_shoulder_loading and r.in_sling:
            return False
        if exercise.requires_external_rotation and r.external_rotation_limit == ExternalRotationLimit.SEVERE:
            return False

        max_difficulty = STAGE_MAX_DIFFICULTY.get(stage)
        if max_difficulty is not None and exercise.difficulty > max_difficulty:
            return False
        if pain >= HIGH_PAIN and exercise.difficulty > HIGH_PAIN_MAX_DIFFICULTY:
            return False

        return True

    @staticmethod
    def estimate_minutes(selection: WorkoutExercise) -> float:
        """Work time for one exercise. Durations are read as seconds per set."""
        if selection.duration:
            seconds = leading_int(selection.duration)
            if seconds is None:
                return UNPARSEABLE_DURATION_MINUTES
            return seconds / 60 * selection.sets
        return selection.sets * (selection.reps or DEFAULT_REPS) * SECONDS_PER_REP / 60

    @staticmethod
    def format_total_duration(selections: List[WorkoutExercise]) -> str:
        minutes = sum(RehabPlanService.estimate_minutes(s) for s in selections)
        # round half up
        return f"{int(minutes + TRANSITION_MINUTES + 0.5)} min"

    @staticmethod
    def session_name(stage: RecoveryStage) -> str:
        label = stage.value.replace("-", " ")
        return f"{label[0].upper()}{label[1:]} Rehab Session"

    @staticmethod
    def rehab_plan(
        stage: RecoveryStage,
        profile: RecoveryProfile,
        latest_log: Optional[DailyLogEntry]
    ) -> RehabWorkout:
        """
        Select and parameterize the rehab exercises for one session.

        Never fails: with nothing eligible the session simply has no exercises.
        """
        stage = RecoveryStage(stage)
        if latest_log is not None:
            flexion = bucket_to_angle(latest_log.flexion_bucket)
            abduction = bucket_to_angle(latest_log.abduction_bucket)
            pain = latest_log.pain
        else:
            flexion = abduction = NO_LOG_ANGLE
            pain = NO_LOG_PAIN

        eligible = [
            ex for ex in get_rehab_exercises()
            if RehabPlanService.is_eligible(ex, stage, profile, flexion, abduction, pain)
        ]

        # sorted() is stable, so ties keep catalog order
        target = STAGE_TARGET_DIFFICULTY.get(stage, DEFAULT_TARGET_DIFFICULTY)
        ranked = sorted(eligible, key=lambda ex: abs(ex.difficulty - target))
        chosen = ranked[:STAGE_EXERCISE_COUNT[stage]]

        selections = [
            WorkoutExercise(
                exercise=ex,
                sets=leading_int(ex.sets, DEFAULT_SETS),
                reps=leading_int(ex.reps) if ex.reps else None,
                duration=ex.duration
            )
            for ex in chosen
        ]

        logger.debug(
            f"Rehab plan for profile {profile.id}: stage={stage.value}, "
            f"eligible={len(eligible)}, selected={len(selections)}"
        )

        return RehabWorkout(
            id=f"rehab-{cuid.cuid()}",
            name=RehabPlanService.session_name(stage),
            stage=stage,
            exercises=selections,
            total_duration=RehabPlanService.format_total_duration(selections),
            notes=ELEVATED_PAIN_NOTE if pain >= ELEVATED_PAIN else None
        )
