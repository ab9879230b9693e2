"""Per-date macro aggregation for nutrition exports."""

import re
from collections.abc import Iterable

from fitness_export.domain.aggregates import ProcessedNutritionRecord
from fitness_export.domain.records import NutritionEntry

_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)", re.IGNORECASE
)


class NumericParseError(ValueError):
    """Raised when a macro value is not a number."""

    def __init__(self, field: str, date: str, value: str) -> None:
        super().__init__(f"Invalid {field} value {value!r} on {date}")
        self.field = field
        self.date = date
        self.value = value


def aggregate_nutrition(
    entries: Iterable[NutritionEntry],
) -> list[ProcessedNutritionRecord]:
    """Sum protein, carbohydrates and fat per date in first-seen order."""
    by_date: dict[str, ProcessedNutritionRecord] = {}
    for entry in entries:
        protein = _parse_macro(entry, "protein")
        carbohydrates = _parse_macro(entry, "carbohydrates")
        fat = _parse_macro(entry, "fat")
        existing = by_date.get(entry.date)
        if existing is None:
            by_date[entry.date] = ProcessedNutritionRecord(
                protein=protein, carbohydrates=carbohydrates, fat=fat
            )
        else:
            existing.add(protein, carbohydrates, fat)
    return list(by_date.values())


def _parse_macro(entry: NutritionEntry, field: str) -> float:
    raw = getattr(entry, field)
    if not _FLOAT_PATTERN.fullmatch(raw):
        raise NumericParseError(field, entry.date, raw)
    return float(raw)
