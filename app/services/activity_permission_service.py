from typing import Optional

from app.enums import CardioType, StrengthCategory, ExternalRotationLimit
from app.schemas.profile_schemas import RecoveryProfile
from app.schemas.log_schemas import DailyLogEntry
from app.schemas.planner_schemas import AllowedActivities
from app.core.logger import get_logger

logger = get_logger("activity_permission_service")

DELOAD_PAIN = 7
DELOAD_INSTABILITY = 7
DELOAD_SLEEP_IMPACT = 8

DELOAD_NOTE = "Deload week: reduce intensity, focus on recovery"
RUNNING_PAUSED_NOTE = "Running paused due to pain/instability levels"
ROWING_NOTE = "Light rowing only - stop if shoulder discomfort"
UPPER_PULL_NOTE = "Upper body pulling: keep light, avoid overhead"
UPPER_PUSH_NOTE = "Overhead pressing cleared - start light"


def _pain_at_most(latest_log: Optional[DailyLogEntry], limit: int) -> bool:
    """Pain gate that passes when there is no check-in to contradict it."""
    return latest_log is None or latest_log.pain <= limit


class ActivityPermissionService:
    """
    Resolves which cardio and strength work is currently permitted.

    Each rule is evaluated independently. A missing check-in loosens the
    pain gates ("no log or pain <= N") but never triggers a deload.
    """

    @staticmethod
    def is_deload_week(latest_log: Optional[DailyLogEntry]) -> bool:
        return latest_log is not None and (
            latest_log.pain >= DELOAD_PAIN
            or latest_log.instability >= DELOAD_INSTABILITY
            or latest_log.sleep_impact >= DELOAD_SLEEP_IMPACT
        )

    @staticmethod
    def allowed_activities(
        profile: RecoveryProfile,
        latest_log: Optional[DailyLogEntry]
    ) -> AllowedActivities:
        r = profile.restrictions
        cardio = []
        strength = []
        notes = []

        is_deload_week = ActivityPermissionService.is_deload_week(latest_log)
        if is_deload_week:
            notes.append(DELOAD_NOTE)

        # Walking and biking work in a sling
        cardio.append(CardioType.WALK)
        cardio.append(CardioType.BIKE)

        if not r.in_sling:
            cardio.append(CardioType.ELLIPTICAL)

        if not r.no_running and not r.in_sling:
            if latest_log is None or (latest_log.pain <= 5 and latest_log.instability <= 5):
                cardio.append(CardioType.RUN)
            else:
                notes.append(RUNNING_PAUSED_NOTE)

        # Kickboard swimming needs the arm out in front
        if r.max_flexion_angle >= 60:
            cardio.append(CardioType.SWIM)

        if (
            not r.in_sling
            and r.max_abduction_angle >= 60
            and r.max_flexion_angle >= 90
            and _pain_at_most(latest_log, 3)
        ):
            cardio.append(CardioType.ROW)
            notes.append(ROWING_NOTE)

        strength.append(StrengthCategory.LEGS)

        # Core needs enough flexion to get into position, or a free arm
        if r.max_flexion_angle >= 60 or not r.in_sling:
            strength.append(StrengthCategory.CORE)

        can_do_overhead = (
            not r.no_overhead
            and r.max_abduction_angle >= 120
            and r.max_flexion_angle >= 120
            and _pain_at_most(latest_log, 3)
        )

        can_do_heavy_carries = (
            not r.in_sling
            and r.max_flexion_angle >= 90
            and _pain_at_most(latest_log, 4)
        )

        can_do_pull_ups = (
            not r.in_sling
            and r.max_abduction_angle >= 150
            and r.max_flexion_angle >= 150
            and r.external_rotation_limit == ExternalRotationLimit.NONE
            and (latest_log is None or (latest_log.pain <= 2 and latest_log.instability <= 2))
        )

        if not r.in_sling and r.max_abduction_angle >= 90 and _pain_at_most(latest_log, 3):
            strength.append(StrengthCategory.UPPER_PULL)
            notes.append(UPPER_PULL_NOTE)

        if can_do_overhead:
            strength.append(StrengthCategory.UPPER_PUSH)
            notes.append(UPPER_PUSH_NOTE)

        if is_deload_week:
            logger.debug(f"Deload week flagged for profile {profile.id}")

        return AllowedActivities(
            cardio=cardio,
            strength=strength,
            can_do_overhead=can_do_overhead,
            can_do_heavy_carries=can_do_heavy_carries,
            can_do_pull_ups=can_do_pull_ups,
            is_deload_week=is_deload_week,
            notes=notes
        )
