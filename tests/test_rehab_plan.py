import pytest

from app.enums import RecoveryStage
from app.services.rehab_plan_service import RehabPlanService, ELEVATED_PAIN_NOTE
from app.schemas.planner_schemas import WorkoutExercise
from app.services.exercise_catalog import get_exercise
from conftest import make_profile, make_log

rehab_plan = RehabPlanService.rehab_plan

STAGES = [
    RecoveryStage.ACUTE,
    RecoveryStage.EARLY_REHAB,
    RecoveryStage.STRENGTHENING,
    RecoveryStage.RETURN_TO_SPORT,
]


def ids(workout):
    return [item.exercise.id for item in workout.exercises]


def test_acute_session_prefers_easiest_in_catalog_order(profile, latest_log):
    workout = rehab_plan(RecoveryStage.ACUTE, profile, latest_log)
    assert ids(workout) == ["pendulum-circles", "elbow-wrist-hand-rom", "scapular-squeezes"]
    assert workout.name == "Acute Rehab Session"
    assert workout.stage == RecoveryStage.ACUTE


def test_early_rehab_targets_difficulty_two(profile, latest_log):
    workout = rehab_plan(RecoveryStage.EARLY_REHAB, profile, latest_log)
    assert ids(workout) == [
        "isometric-external-rotation",
        "isometric-internal-rotation",
        "supine-cane-flexion",
        "cane-external-rotation",
    ]
    assert workout.name == "Early rehab Rehab Session"


def test_strengthening_respects_range_of_motion(profile, latest_log):
    workout = rehab_plan(RecoveryStage.STRENGTHENING, profile, latest_log)
    assert ids(workout) == [
        "band-rows",
        "band-external-rotation",
        "band-internal-rotation",
        "sidelying-external-rotation",
        "serratus-punch",
    ]
    # abduction 75 rules out Y-T-W, no_overhead rules out wall slides
    assert "prone-ytw" not in ids(workout)
    assert "wall-slides" not in ids(workout)


def test_return_to_sport_fills_with_nearest_difficulty(profile, latest_log):
    workout = rehab_plan(RecoveryStage.RETURN_TO_SPORT, profile, latest_log)
    assert len(workout.exercises) == 6
    assert ids(workout)[-1] == "isometric-external-rotation"
    assert workout.name == "Return to sport Rehab Session"


@pytest.mark.parametrize("log", [None, make_log(), make_log(pain=9, flexion_bucket="<60")])
def test_exercise_count_never_decreases_with_stage(profile, log):
    counts = [len(rehab_plan(stage, profile, log).exercises) for stage in STAGES]
    assert counts[0] <= 3
    assert counts == sorted(counts)


def test_high_pain_caps_difficulty(profile):
    workout = rehab_plan(RecoveryStage.STRENGTHENING, profile, make_log(pain=7))
    assert workout.exercises
    assert max(item.exercise.difficulty for item in workout.exercises) <= 2


def test_sling_excludes_loaded_exercises():
    profile = make_profile(in_sling=True)
    workout = rehab_plan(RecoveryStage.RETURN_TO_SPORT, profile, make_log(pain=1))
    assert not any(item.exercise.requires_shoulder_loading for item in workout.exercises)


def test_severe_rotation_limit_excludes_rotation_work(latest_log):
    profile = make_profile(external_rotation_limit="severe")
    workout = rehab_plan(RecoveryStage.EARLY_REHAB, profile, latest_log)
    assert workout.exercises
    assert not any(item.exercise.requires_external_rotation for item in workout.exercises)


def test_overhead_needs_flexion_even_when_permitted():
    profile = make_profile(no_overhead=False)
    low = rehab_plan(RecoveryStage.RETURN_TO_SPORT, profile, make_log(flexion_bucket="90-120", abduction_bucket="90-120"))
    assert "wall-slides" not in ids(low)

    high = rehab_plan(RecoveryStage.RETURN_TO_SPORT, profile, make_log(flexion_bucket="120-150", abduction_bucket="90-120"))
    assert "wall-slides" in ids(high)


def test_no_log_uses_conservative_defaults(profile):
    workout = rehab_plan(RecoveryStage.STRENGTHENING, profile, None)
    assert all(item.exercise.min_flexion_angle <= 30 for item in workout.exercises)
    assert all(item.exercise.min_abduction_angle <= 30 for item in workout.exercises)
    assert workout.notes == ELEVATED_PAIN_NOTE


def test_unknown_buckets_leave_only_unrestricted_exercises():
    profile = make_profile(in_sling=True, external_rotation_limit="severe")
    workout = rehab_plan(RecoveryStage.ACUTE, profile, make_log(flexion_bucket="garbage", abduction_bucket="garbage"))
    assert workout.exercises
    assert all(item.exercise.min_flexion_angle == 0 for item in workout.exercises)


def test_prescription_parsed_from_ranges(profile, latest_log):
    workout = rehab_plan(RecoveryStage.ACUTE, profile, latest_log)
    pendulum, elbow, squeezes = workout.exercises

    assert (pendulum.sets, pendulum.reps, pendulum.duration) == (2, None, "30 sec")
    assert (elbow.sets, elbow.reps, elbow.duration) == (2, 10, None)
    assert (squeezes.sets, squeezes.reps) == (3, 10)


def test_total_duration_rounds_half_up(profile, latest_log):
    # 1.0 + 1.0 + 1.5 minutes of work plus 5 minutes of transitions
    workout = rehab_plan(RecoveryStage.ACUTE, profile, latest_log)
    assert workout.total_duration == "9 min"


def test_estimate_minutes():
    duration_based = WorkoutExercise(exercise=get_exercise("sleeper-stretch"), sets=3, duration="30 sec")
    rep_based = WorkoutExercise(exercise=get_exercise("band-rows"), sets=3, reps=12)
    default_reps = WorkoutExercise(exercise=get_exercise("band-rows"), sets=2)
    unparseable = WorkoutExercise(exercise=get_exercise("walk"), sets=1, duration="as long as comfortable")

    assert RehabPlanService.estimate_minutes(duration_based) == 1.5
    assert RehabPlanService.estimate_minutes(rep_based) == 1.8
    assert RehabPlanService.estimate_minutes(default_reps) == 1.0
    assert RehabPlanService.estimate_minutes(unparseable) == 2


@pytest.mark.parametrize("pain, has_note", [(4, False), (5, True), (8, True)])
def test_elevated_pain_note(profile, pain, has_note):
    workout = rehab_plan(RecoveryStage.ACUTE, profile, make_log(pain=pain))
    assert (workout.notes == ELEVATED_PAIN_NOTE) is has_note


def test_accepts_stage_value_string(profile, latest_log):
    workout = rehab_plan("early-rehab", profile, latest_log)
    assert workout.stage == RecoveryStage.EARLY_REHAB


def test_identical_inputs_give_identical_plans(profile, latest_log):
    first = rehab_plan(RecoveryStage.STRENGTHENING, profile, latest_log)
    second = rehab_plan(RecoveryStage.STRENGTHENING, profile, latest_log)
    assert first.id != second.id
    assert first.model_dump(exclude={"id"}) == second.model_dump(exclude={"id"})
