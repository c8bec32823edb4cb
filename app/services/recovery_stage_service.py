from typing import List, Optional
from datetime import datetime

from app.enums import RecoveryStage, SurgeryStatus
from app.schemas.profile_schemas import RecoveryProfile
from app.schemas.log_schemas import DailyLogEntry
from app.utils.rom import bucket_to_angle, weeks_since, NO_LOG_ANGLE
from app.core.logger import get_logger

logger = get_logger("recovery_stage_service")

# Only the newest week of check-ins counts toward the stage
STAGE_LOG_WINDOW = 7

# Pain assumed when there are no check-ins at all
NO_LOG_PAIN = 5

ACUTE_MAX_WEEKS = 2
ACUTE_MIN_AVG_PAIN = 7

EARLY_REHAB_MAX_WEEKS = 6
EARLY_REHAB_MIN_ANGLE = 90
EARLY_REHAB_MIN_AVG_PAIN = 5

STRENGTHENING_MAX_WEEKS = 12
STRENGTHENING_MIN_ANGLE = 150


class RecoveryStageService:
    """Classifies the current recovery stage from the profile and recent check-ins."""

    @staticmethod
    def weeks_recovering(profile: RecoveryProfile, now: Optional[datetime] = None) -> int:
        """Weeks since surgery for post-op profiles with a surgery date, else since injury."""
        if profile.surgery_status == SurgeryStatus.POST_OP and profile.surgery_date:
            return weeks_since(profile.surgery_date, now)
        return weeks_since(profile.injury_date, now)

    @staticmethod
    def current_stage(
        profile: RecoveryProfile,
        logs: List[DailyLogEntry],
        now: Optional[datetime] = None
    ) -> RecoveryStage:
        """
        Derive the recovery stage.

        `logs` must be ordered oldest to newest. The last STAGE_LOG_WINDOW
        entries are averaged for pain and the final entry supplies ROM.
        Conditions are checked from most to least conservative and the first
        match wins, so any single red flag holds the stage back.
        """
        weeks = RecoveryStageService.weeks_recovering(profile, now)

        recent = logs[-STAGE_LOG_WINDOW:]
        if recent:
            avg_pain = sum(log.pain for log in recent) / len(recent)
            latest = recent[-1]
            flexion = bucket_to_angle(latest.flexion_bucket)
            abduction = bucket_to_angle(latest.abduction_bucket)
        else:
            avg_pain = NO_LOG_PAIN
            flexion = abduction = NO_LOG_ANGLE

        if weeks <= ACUTE_MAX_WEEKS or profile.restrictions.in_sling or avg_pain >= ACUTE_MIN_AVG_PAIN:
            stage = RecoveryStage.ACUTE
        elif (
            weeks <= EARLY_REHAB_MAX_WEEKS
            or flexion < EARLY_REHAB_MIN_ANGLE
            or abduction < EARLY_REHAB_MIN_ANGLE
            or avg_pain >= EARLY_REHAB_MIN_AVG_PAIN
        ):
            stage = RecoveryStage.EARLY_REHAB
        elif (
            weeks <= STRENGTHENING_MAX_WEEKS
            or flexion < STRENGTHENING_MIN_ANGLE
            or abduction < STRENGTHENING_MIN_ANGLE
        ):
            stage = RecoveryStage.STRENGTHENING
        else:
            stage = RecoveryStage.RETURN_TO_SPORT

        logger.debug(
            f"Stage {stage.value} for profile {profile.id}: weeks={weeks}, "
            f"avg_pain={avg_pain:.1f}, flexion={flexion}, abduction={abduction}"
        )
        return stage
