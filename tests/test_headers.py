"""Tests for header normalization."""

from fitness_export.domain.kinds import RecordKind
from fitness_export.services.headers import normalize_headers
from tests.conftest import NUTRITION_HEADER, STEPS_HEADER, WORKOUT_HEADER


def test_nutrition_headers_map_to_canonical_names() -> None:
    headers = normalize_headers(NUTRITION_HEADER, RecordKind.NUTRITION)

    assert headers[:5] == ["date", "meal", "calories", "fat", "saturated_fat"]
    assert "carbohydrates" in headers
    assert "protein" in headers
    assert "vitamin_c" in headers
    assert len(headers) == len(NUTRITION_HEADER)


def test_unmapped_headers_are_lower_cased() -> None:
    headers = normalize_headers(["Date", "Weight", "Mystery Column"], RecordKind.WEIGHT)

    assert headers == ["date", "weight", "mystery column"]


def test_tables_are_kind_specific() -> None:
    assert normalize_headers(["Body Fat %"], RecordKind.WEIGHT) == ["body_fat"]
    assert normalize_headers(["Body Fat %"], RecordKind.NUTRITION) == ["body fat %"]


def test_workout_and_steps_headers() -> None:
    workout = normalize_headers(WORKOUT_HEADER, RecordKind.WORKOUT)
    steps = normalize_headers(STEPS_HEADER, RecordKind.STEPS)

    assert workout[1] == "workout_name"
    assert workout[3] == "exercise_name"
    assert workout[-1] == "rpe"
    assert steps[2] == "_type"
    assert steps[6] == "rps"


def test_normalization_is_idempotent() -> None:
    for header, kind in (
        (NUTRITION_HEADER, RecordKind.NUTRITION),
        (WORKOUT_HEADER, RecordKind.WORKOUT),
        (STEPS_HEADER, RecordKind.STEPS),
    ):
        once = normalize_headers(header, kind)
        assert normalize_headers(once, kind) == once
