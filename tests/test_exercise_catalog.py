import pytest
from pydantic import ValidationError

from app.enums import ExerciseCategory, CardioType
from app.services.exercise_catalog import (
    EXERCISES,
    get_exercises,
    get_exercise,
    get_rehab_exercises,
    get_cardio_exercises,
    get_strength_exercises
)


def test_ids_are_unique():
    ids = [ex.id for ex in EXERCISES]
    assert len(ids) == len(set(ids))


def test_category_filters_partition_catalog():
    rehab = get_rehab_exercises()
    cardio = get_cardio_exercises()
    strength = get_strength_exercises()

    assert len(rehab) + len(cardio) + len(strength) == len(get_exercises())
    assert all(ex.category in (ExerciseCategory.REHAB, ExerciseCategory.MOBILITY) for ex in rehab)
    assert all(ex.category == ExerciseCategory.CARDIO for ex in cardio)
    assert all(ex.category == ExerciseCategory.STRENGTH for ex in strength)


def test_filters_keep_catalog_order():
    rehab_ids = [ex.id for ex in get_rehab_exercises()]
    catalog_ids = [ex.id for ex in EXERCISES if ex.id in rehab_ids]
    assert rehab_ids == catalog_ids


def test_every_cardio_type_has_an_exercise():
    covered = {ex.cardio_type for ex in get_cardio_exercises()}
    assert covered == set(CardioType)


def test_difficulty_in_range():
    assert all(1 <= ex.difficulty <= 5 for ex in EXERCISES)


def test_get_exercise():
    assert get_exercise("pendulum-circles").name == "Pendulum Circles"
    assert get_exercise("does-not-exist") is None


def test_entries_are_immutable():
    exercise = get_exercise("walk")
    with pytest.raises(ValidationError):
        exercise.difficulty = 5


def test_get_exercises_returns_a_copy():
    exercises = get_exercises()
    exercises.clear()
    assert len(get_exercises()) == len(EXERCISES)
