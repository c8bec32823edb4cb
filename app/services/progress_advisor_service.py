from typing import List, Optional

from app.schemas.profile_schemas import RecoveryProfile
from app.schemas.log_schemas import DailyLogEntry
from app.utils.rom import bucket_to_angle
from app.core.logger import get_logger

logger = get_logger("progress_advisor_service")

PROGRESS_WINDOW = 3
PROGRESS_MAX_AVG_PAIN = 3
SLEEP_IMPACT_TARGET = 3
FIRST_RUN_MAX_PAIN = 3

NO_LOG_MESSAGE = "Complete your first daily log to track progress"
FALLBACK_MESSAGE = "Continue strengthening toward full recovery"


class ProgressAdvisorService:
    """Small advisory rules layered on top of the daily check-ins."""

    @staticmethod
    def suggest_next_milestone(profile: RecoveryProfile, latest_log: Optional[DailyLogEntry]) -> str:
        if latest_log is None:
            return NO_LOG_MESSAGE

        flexion = bucket_to_angle(latest_log.flexion_bucket)
        abduction = bucket_to_angle(latest_log.abduction_bucket)

        if flexion < 90:
            return "Work toward forward flexion to 90 degrees"
        if abduction < 90:
            return "Work toward abduction to 90 degrees"
        if flexion < 120:
            return "Work toward forward flexion to 120 degrees"
        if abduction < 120:
            return "Work toward abduction to 120 degrees"
        if latest_log.sling_worn:
            return "First day without sling (when cleared by provider)"
        if latest_log.sleep_impact > SLEEP_IMPACT_TARGET:
            return "Work toward pain-free sleep"
        if not profile.restrictions.no_running and latest_log.pain <= FIRST_RUN_MAX_PAIN:
            return "First pain-free run"

        return FALLBACK_MESSAGE

    @staticmethod
    def should_progress(logs: List[DailyLogEntry]) -> bool:
        """
        Ready for a harder variation when the last three check-ins
        (oldest to newest) average low pain and flexion has not regressed.
        """
        if len(logs) < PROGRESS_WINDOW:
            return False

        recent = logs[-PROGRESS_WINDOW:]
        avg_pain = sum(log.pain for log in recent) / len(recent)
        if avg_pain > PROGRESS_MAX_AVG_PAIN:
            return False

        return bucket_to_angle(recent[-1].flexion_bucket) >= bucket_to_angle(recent[0].flexion_bucket)
