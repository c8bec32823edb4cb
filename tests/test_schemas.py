from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from app.enums import RomBucket, GoalType, MilestoneType
from app.schemas.log_schemas import DailyLogCreate, DailyLogEntry
from app.schemas.profile_schemas import RecoveryProfileUpsert, FitnessGoal, Restrictions
from app.schemas.milestone_schemas import MilestoneCreate


def log_payload(**overrides):
    payload = {
        "pain": 3,
        "instability": 2,
        "sleep_impact": 1,
        "flexion_bucket": "90-120",
        "abduction_bucket": "60-90",
        "behind_back_reach": "waistband",
    }
    payload.update(overrides)
    return payload


def profile_payload(**overrides):
    payload = {
        "injury_side": "left",
        "injury_date": "2025-01-06",
        "restrictions": {"max_flexion_angle": 90, "max_abduction_angle": 60},
        "goal": {"type": "5k"},
    }
    payload.update(overrides)
    return payload


def test_daily_log_defaults():
    log = DailyLogCreate(**log_payload())
    assert log.date is None
    assert log.flexion_bucket == RomBucket.FROM_90_TO_120
    assert log.sling_worn is False
    assert log.did_rehab is False


@pytest.mark.parametrize("field, value", [
    ("pain", 11),
    ("pain", -1),
    ("instability", 12),
    ("sleep_impact", -2),
    ("flexion_bucket", "180"),
    ("behind_back_reach", "elbow"),
])
def test_daily_log_rejects_out_of_range(field, value):
    with pytest.raises(ValidationError):
        DailyLogCreate(**log_payload(**{field: value}))


def test_daily_log_rejects_future_date():
    with pytest.raises(ValidationError):
        DailyLogCreate(**log_payload(date=date.today() + timedelta(days=1)))


def test_log_snapshot_keeps_unknown_buckets():
    entry = DailyLogEntry(
        id="log-1", user_id="user-1", date=date(2025, 3, 1),
        pain=2, instability=1, sleep_impact=0,
        flexion_bucket="unknown", abduction_bucket="60-90", behind_back_reach="cant"
    )
    assert entry.flexion_bucket == "unknown"


def test_profile_defaults():
    profile = RecoveryProfileUpsert(**profile_payload())
    assert profile.surgery_status.value == "none"
    assert profile.restrictions.in_sling is False
    assert profile.restrictions.external_rotation_limit.value == "none"
    assert profile.goal.type == GoalType.FIVE_K
    assert profile.goal.days_per_week == 3
    assert profile.goal.cardio_baseline.can_run_minutes == 0


def test_profile_rejects_future_injury():
    with pytest.raises(ValidationError):
        RecoveryProfileUpsert(**profile_payload(injury_date=(date.today() + timedelta(days=3)).isoformat()))


def test_profile_rejects_surgery_before_injury():
    with pytest.raises(ValidationError):
        RecoveryProfileUpsert(**profile_payload(surgery_status="post-op", surgery_date="2024-12-01"))


def test_profile_accepts_surgery_after_injury():
    profile = RecoveryProfileUpsert(**profile_payload(surgery_status="post-op", surgery_date="2025-01-20"))
    assert profile.surgery_date == date(2025, 1, 20)


@pytest.mark.parametrize("goal", [
    {"type": "10k", "days_per_week": 1},
    {"type": "10k", "days_per_week": 7},
    {"type": "10k", "minutes_per_day": 10},
    {"type": "10k", "minutes_per_day": 120},
    {"type": "marathon"},
])
def test_goal_bounds(goal):
    with pytest.raises(ValidationError):
        FitnessGoal(**goal)


def test_restriction_angles_bounded():
    with pytest.raises(ValidationError):
        Restrictions(max_flexion_angle=190)


def test_custom_milestone_needs_value():
    with pytest.raises(ValidationError):
        MilestoneCreate(type="custom")
    milestone = MilestoneCreate(type="custom", value="Carried groceries")
    assert milestone.type == MilestoneType.CUSTOM


def test_standard_milestone_value_optional():
    milestone = MilestoneCreate(type="first-run")
    assert milestone.value is None
