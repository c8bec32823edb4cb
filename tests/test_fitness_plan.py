from datetime import timedelta

import pytest

from app.enums import CardioType, FitnessWorkoutType, Intensity, GoalType
from app.services.fitness_plan_service import FitnessPlanService
from app.services.activity_permission_service import ActivityPermissionService
from conftest import NOW, make_profile, make_log

REST_DAYS = {3, 6}


def plan(profile, log, logs=None):
    logs = logs if logs is not None else ([log] if log else [])
    return FitnessPlanService.fitness_plan(profile, log, logs, NOW)


def days(weekly):
    return [w.day for w in weekly.workouts]


def cardio_sessions(weekly):
    return [w.fitness for w in weekly.workouts if w.fitness.type == FitnessWorkoutType.CARDIO]


def strength_sessions(weekly):
    return [w.fitness for w in weekly.workouts if w.fitness.type != FitnessWorkoutType.CARDIO]


def test_four_days_schedules_three_cardio_and_one_strength(profile, latest_log):
    weekly = plan(profile, latest_log)

    assert days(weekly) == [0, 1, 2, 4]
    assert len(cardio_sessions(weekly)) == 3
    assert weekly.total_strength_sessions == 1
    assert weekly.workouts[1].fitness.type == FitnessWorkoutType.LEGS


def test_week_one_ten_k_minutes(profile, latest_log):
    weekly = plan(profile, latest_log)

    assert weekly.week_number == 1
    assert weekly.total_cardio_minutes == 53
    assert all(s.total_duration == "17 min" for s in cardio_sessions(weekly))
    assert weekly.start_date == "2025-03-02"


def test_week_number_counts_from_account_creation(latest_log):
    profile = make_profile(injury_days_ago=300, created_days_ago=21)
    weekly = plan(profile, latest_log)
    assert weekly.week_number == 4
    assert weekly.total_cardio_minutes == 45 + 4 * 8


@pytest.mark.parametrize("goal_type, week_number, expected", [
    (GoalType.HALF_MARATHON, 1, 70),
    (GoalType.HALF_MARATHON, 20, 180),
    (GoalType.TEN_K, 10, 120),
    (GoalType.FIVE_K, 2, 42),
    (GoalType.FIVE_K, 12, 90),
    (GoalType.GENERAL_CONDITIONING, 30, 90),
    (GoalType.MAINTAIN_FITNESS, 1, 90),
    (GoalType.STRENGTH, 5, 60),
    (GoalType.WEIGHT_LOSS, 5, 150),
])
def test_target_cardio_minutes(goal_type, week_number, expected):
    goal = make_profile(goal={"type": goal_type}).goal
    assert FitnessPlanService.target_cardio_minutes(goal, week_number, False) == expected


def test_deload_scales_and_floors_minutes():
    goal = make_profile(goal={"type": "general-conditioning"}).goal
    assert FitnessPlanService.target_cardio_minutes(goal, 1, True) == 54
    goal = make_profile(goal={"type": "10k"}).goal
    assert FitnessPlanService.target_cardio_minutes(goal, 1, True) == 31


def test_high_pain_reduces_cardio_minutes(profile):
    calm = plan(profile, make_log(pain=3))
    sore = plan(profile, make_log(pain=8))

    assert sore.total_cardio_minutes < calm.total_cardio_minutes
    assert all(s.intensity == Intensity.EASY for s in cardio_sessions(sore))
    assert all(s.intensity == Intensity.MODERATE for s in cardio_sessions(calm))


@pytest.mark.parametrize("log", [None, make_log(pain=0), make_log(pain=9)])
def test_no_running_half_marathon_never_runs(log):
    profile = make_profile(no_running=True, goal={"type": "half-marathon"})
    weekly = plan(profile, log)

    assert cardio_sessions(weekly)
    assert all(s.cardio_type != CardioType.RUN for s in cardio_sessions(weekly))


def test_primary_cardio_preference(profile):
    run_ok = ActivityPermissionService.allowed_activities(profile, make_log(pain=2))
    assert FitnessPlanService.primary_cardio(run_ok) == CardioType.RUN

    paused = ActivityPermissionService.allowed_activities(profile, make_log(pain=7))
    assert FitnessPlanService.primary_cardio(paused) == CardioType.BIKE


def test_cardio_session_uses_primary_exercise(profile, latest_log):
    session = cardio_sessions(plan(profile, latest_log))[0]
    assert session.cardio_type == CardioType.RUN
    assert session.name == "Run Session"
    assert session.exercises[0].exercise.id == "run-easy"
    assert session.exercises[0].sets == 1
    assert session.exercises[0].duration == "17 min"


@pytest.mark.parametrize("days_per_week", [2, 3, 4, 5, 6])
def test_rest_days_never_scheduled(days_per_week, latest_log):
    weekly = plan(make_profile(goal={"days_per_week": days_per_week}), latest_log)
    assert not REST_DAYS & set(days(weekly))
    assert len(weekly.workouts) <= days_per_week


def test_two_days_are_both_cardio(latest_log):
    weekly = plan(make_profile(goal={"days_per_week": 2}), latest_log)
    assert days(weekly) == [0, 1]
    assert weekly.total_strength_sessions == 0


def test_six_days_runs_out_of_training_days(latest_log):
    weekly = plan(make_profile(goal={"days_per_week": 6}), latest_log)
    assert days(weekly) == [0, 1, 2, 4, 5]
    assert weekly.total_strength_sessions == 2
    assert len(cardio_sessions(weekly)) == 3


def test_strength_session_is_legs_and_core(profile, latest_log):
    session = strength_sessions(plan(profile, latest_log))[0]

    assert [item.exercise.id for item in session.exercises] == [
        "bodyweight-squat", "glute-bridge", "goblet-squat", "heel-taps", "standing-marches"
    ]
    assert session.name == "Legs & Core"
    assert session.total_duration == "45 min"
    assert session.exercises[0].sets == 3
    assert session.exercises[0].reps == 12


def test_strength_duration_follows_minutes_per_day(latest_log):
    weekly = plan(make_profile(goal={"minutes_per_day": 30}), latest_log)
    assert strength_sessions(weekly)[0].total_duration == "30 min"


def test_strength_in_sling_skips_loaded_exercises():
    profile = make_profile(in_sling=True, max_flexion_angle=60)
    session = strength_sessions(plan(profile, make_log(pain=2)))[0]
    ids = [item.exercise.id for item in session.exercises]

    assert "goblet-squat" not in ids
    assert ids[:3] == ["bodyweight-squat", "glute-bridge", "split-squat"]


def test_strength_excludes_shoulder_work():
    profile = make_profile(no_overhead=False, max_flexion_angle=180, max_abduction_angle=180)
    weekly = plan(profile, make_log(pain=0, flexion_bucket="150+", abduction_bucket="150+"))
    for session in strength_sessions(weekly):
        assert all(item.exercise.target_area.value != "shoulder" for item in session.exercises)


def test_weeks_to_goal(latest_log):
    upcoming = make_profile(goal={"target_date": (NOW + timedelta(days=71)).date()})
    past = make_profile(goal={"target_date": (NOW - timedelta(days=10)).date()})

    assert plan(upcoming, latest_log).weeks_to_goal == 10
    assert plan(past, latest_log).weeks_to_goal == 1
    assert plan(make_profile(), latest_log).weeks_to_goal is None


def test_identical_inputs_give_identical_plans(profile, latest_log):
    first = plan(profile, latest_log)
    second = plan(profile, latest_log)

    def strip_ids(weekly):
        dumped = weekly.model_dump()
        for slot in dumped["workouts"]:
            slot["fitness"].pop("id")
        return dumped

    assert strip_ids(first) == strip_ids(second)
