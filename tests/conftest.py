from datetime import datetime, timedelta

import pytest

from app.schemas.profile_schemas import RecoveryProfile, Restrictions, FitnessGoal
from app.schemas.log_schemas import DailyLogEntry

# Sunday, so day_of_week(NOW) == 0
NOW = datetime(2025, 3, 2, 12, 0, 0)


def make_profile(
    injury_days_ago=60,
    surgery_status="none",
    surgery_days_ago=None,
    created_days_ago=0,
    goal=None,
    **restrictions
):
    restriction_values = {
        "in_sling": False,
        "no_running": False,
        "no_overhead": True,
        "max_abduction_angle": 90,
        "max_flexion_angle": 90,
        "external_rotation_limit": "none",
    }
    restriction_values.update(restrictions)

    goal_values = {"type": "10k", "days_per_week": 4, "minutes_per_day": 45}
    goal_values.update(goal or {})

    return RecoveryProfile(
        id="profile-1",
        user_id="user-1",
        injury_side="right",
        injury_date=(NOW - timedelta(days=injury_days_ago)).date(),
        surgery_status=surgery_status,
        surgery_date=(NOW - timedelta(days=surgery_days_ago)).date() if surgery_days_ago is not None else None,
        restrictions=Restrictions(**restriction_values),
        goal=FitnessGoal(**goal_values),
        created_at=NOW - timedelta(days=created_days_ago),
        updated_at=NOW,
    )


def make_log(days_ago=0, **overrides):
    values = {
        "id": f"log-{days_ago}",
        "user_id": "user-1",
        "date": (NOW - timedelta(days=days_ago)).date(),
        "pain": 4,
        "instability": 2,
        "sleep_impact": 2,
        "flexion_bucket": "90-120",
        "abduction_bucket": "60-90",
        "behind_back_reach": "waistband",
        "sling_worn": False,
    }
    values.update(overrides)
    return DailyLogEntry(**values)


def make_logs(count, **overrides):
    """`count` daily logs ending today, oldest first."""
    return [make_log(days_ago=i, **overrides) for i in reversed(range(count))]


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def profile():
    return make_profile()


@pytest.fixture
def latest_log():
    return make_log()
