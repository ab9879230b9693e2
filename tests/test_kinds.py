"""Tests for record kind selection."""

import pytest

from fitness_export.domain.kinds import RecordKind, resolve_kind


@pytest.mark.parametrize(
    ("selector", "expected"),
    [
        ("nutrition", RecordKind.NUTRITION),
        ("Macros", RecordKind.NUTRITION),
        ("WEIGHT", RecordKind.WEIGHT),
        ("workout", RecordKind.WORKOUT),
        ("steps", RecordKind.STEPS),
        ("Exercise-Export-2024.csv", RecordKind.WORKOUT),
        ("Nutrition-Summary-2024-01-01.csv", RecordKind.NUTRITION),
        ("Measurement-Summary.csv", RecordKind.WEIGHT),
    ],
)
def test_resolve_kind(selector: str, expected: RecordKind) -> None:
    assert resolve_kind(selector) is expected


def test_unknown_selector_resolves_to_none() -> None:
    assert resolve_kind("sleep") is None
    assert resolve_kind("") is None
    assert resolve_kind(None) is None
