"""Text emission for spreadsheet pasting."""

import csv
import io
from collections.abc import Iterable

from fitness_export.domain.aggregates import (
    DateWorkoutGroup,
    ExerciseRow,
    ProcessedNutritionRecord,
)
from fitness_export.domain.records import WeightEntry

NUTRITION_COLUMNS = ("protein", "carbohydrates", "fat")
WEIGHT_COLUMNS = ("date", "body_fat", "weight")

# One emission path used to repeat the nutrition header; clipboard output
# never carries this line.
DUPLICATE_NUTRITION_HEADER = ",".join(NUTRITION_COLUMNS) + "\n"


def format_number(value: float) -> str:
    """Format a float without a trailing ``.0`` for whole numbers."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def render_nutrition(
    records: Iterable[ProcessedNutritionRecord], *, include_header: bool = True
) -> str:
    """Render per-date macro totals as CSV."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    if include_header:
        writer.writerow(NUTRITION_COLUMNS)
    for record in records:
        writer.writerow(
            [
                format_number(record.protein),
                format_number(record.carbohydrates),
                format_number(record.fat),
            ]
        )
    return buffer.getvalue()


def render_weight(entries: Iterable[WeightEntry]) -> str:
    """Render weight entries as CSV rows."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(WEIGHT_COLUMNS)
    for entry in entries:
        writer.writerow([entry.date, entry.body_fat or "", entry.weight])
    return buffer.getvalue()


def render_values(values: Iterable[str]) -> str:
    """Render bare values, one per line."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for value in values:
        writer.writerow([value])
    return buffer.getvalue()


def flatten_sets(row: ExerciseRow) -> list[str]:
    """Interleave (weight, reps) pairs into one sequence."""
    return [value for pair in row for value in pair]


def render_workouts(groups: DateWorkoutGroup) -> str:
    """Render one line per exercise, with a blank line after each date.

    Rows are ragged; a cell holding a comma is quoted so columns stay aligned.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for exercises in groups.values():
        for row in exercises.values():
            writer.writerow(flatten_sets(row))
        buffer.write("\n")
    return buffer.getvalue()


def finalize_for_clipboard(text: str) -> str:
    """Strip the repeated nutrition header and switch to CRLF line endings."""
    text = text.replace(DUPLICATE_NUTRITION_HEADER, "")
    return text.replace("\n", "\r\n")
