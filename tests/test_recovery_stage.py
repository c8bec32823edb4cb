import pytest

from app.enums import RecoveryStage
from app.services.recovery_stage_service import RecoveryStageService
from conftest import NOW, make_profile, make_log, make_logs

stage = RecoveryStageService.current_stage


def test_recent_injury_without_logs_is_acute():
    profile = make_profile(injury_days_ago=7)
    assert stage(profile, [], NOW) == RecoveryStage.ACUTE


def test_full_range_after_100_days_is_return_to_sport():
    profile = make_profile(injury_days_ago=100)
    logs = [make_log(pain=1, flexion_bucket="150+", abduction_bucket="150+")]
    assert stage(profile, logs, NOW) == RecoveryStage.RETURN_TO_SPORT


@pytest.mark.parametrize("injury_days_ago", [3, 30, 100, 400])
def test_sling_always_acute(injury_days_ago):
    profile = make_profile(injury_days_ago=injury_days_ago, in_sling=True)
    logs = [make_log(pain=0, flexion_bucket="150+", abduction_bucket="150+")]
    assert stage(profile, logs, NOW) == RecoveryStage.ACUTE


def test_high_average_pain_is_acute():
    profile = make_profile(injury_days_ago=100)
    logs = make_logs(3, pain=8, flexion_bucket="150+", abduction_bucket="150+")
    assert stage(profile, logs, NOW) == RecoveryStage.ACUTE


def test_no_logs_long_after_injury_is_early_rehab():
    profile = make_profile(injury_days_ago=200)
    assert stage(profile, [], NOW) == RecoveryStage.EARLY_REHAB


def test_limited_abduction_holds_early_rehab():
    profile = make_profile(injury_days_ago=100)
    logs = [make_log(pain=1, flexion_bucket="150+", abduction_bucket="60-90")]
    assert stage(profile, logs, NOW) == RecoveryStage.EARLY_REHAB


def test_strengthening_until_full_range():
    profile = make_profile(injury_days_ago=100)
    logs = [make_log(pain=1, flexion_bucket="120-150", abduction_bucket="150+")]
    assert stage(profile, logs, NOW) == RecoveryStage.STRENGTHENING


def test_strengthening_within_twelve_weeks():
    profile = make_profile(injury_days_ago=70)
    logs = [make_log(pain=1, flexion_bucket="150+", abduction_bucket="150+")]
    assert stage(profile, logs, NOW) == RecoveryStage.STRENGTHENING


def test_post_op_counts_from_surgery_date():
    logs = [make_log(pain=1, flexion_bucket="150+", abduction_bucket="150+")]
    post_op = make_profile(injury_days_ago=200, surgery_status="post-op", surgery_days_ago=10)
    planned = make_profile(injury_days_ago=200, surgery_status="planned", surgery_days_ago=10)

    assert RecoveryStageService.weeks_recovering(post_op, NOW) == 1
    assert RecoveryStageService.weeks_recovering(planned, NOW) == 28
    assert stage(post_op, logs, NOW) == RecoveryStage.ACUTE
    assert stage(planned, logs, NOW) == RecoveryStage.RETURN_TO_SPORT


def test_post_op_without_surgery_date_uses_injury_date():
    profile = make_profile(injury_days_ago=200, surgery_status="post-op")
    assert RecoveryStageService.weeks_recovering(profile, NOW) == 28


def test_only_newest_seven_logs_count():
    profile = make_profile(injury_days_ago=100)
    old = [make_log(days_ago=20 - i, pain=10, flexion_bucket="150+", abduction_bucket="150+") for i in range(7)]
    recent = make_logs(7, pain=2, flexion_bucket="150+", abduction_bucket="150+")
    assert stage(profile, old + recent, NOW) == RecoveryStage.RETURN_TO_SPORT


def test_latest_log_supplies_range_of_motion():
    profile = make_profile(injury_days_ago=100)
    logs = [
        make_log(days_ago=1, pain=1, flexion_bucket="150+", abduction_bucket="150+"),
        make_log(days_ago=0, pain=1, flexion_bucket="60-90", abduction_bucket="150+"),
    ]
    assert stage(profile, logs, NOW) == RecoveryStage.EARLY_REHAB


def test_malformed_bucket_does_not_raise():
    profile = make_profile(injury_days_ago=100)
    logs = [make_log(pain=1, flexion_bucket="garbage", abduction_bucket="150+")]
    assert stage(profile, logs, NOW) == RecoveryStage.EARLY_REHAB
