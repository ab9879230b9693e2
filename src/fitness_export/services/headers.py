"""Header normalization for tracker CSV exports."""

from collections.abc import Sequence

from fitness_export.domain.kinds import RecordKind

_HEADER_TABLES: dict[RecordKind, dict[str, str]] = {
    RecordKind.NUTRITION: {
        "Fat (g)": "fat",
        "Sodium (mg)": "sodium",
        "Carbohydrates (g)": "carbohydrates",
        "Protein (g)": "protein",
        "Saturated Fat": "saturated_fat",
        "Polyunsaturated Fat": "polyunsaturated_fat",
        "Monounsaturated Fat": "monounsaturated_fat",
        "Trans Fat": "trans_fat",
        "Vitamin A": "vitamin_a",
        "Vitamin C": "vitamin_c",
    },
    RecordKind.WEIGHT: {
        "Body Fat %": "body_fat",
    },
    RecordKind.WORKOUT: {
        "Workout Name": "workout_name",
        "Exercise Name": "exercise_name",
        "Set Order": "set_order",
        "Workout Notes": "workout_notes",
    },
    RecordKind.STEPS: {
        "Type": "_type",
        "Exercise Calories": "exercise_calories",
        "Exercise Minutes": "exercise_minutes",
        "Reps Per Set": "rps",
    },
}


def normalize_headers(labels: Sequence[str], kind: RecordKind) -> list[str]:
    """Map export labels to canonical lower-case field names."""
    table = _HEADER_TABLES[kind]
    return [table.get(label, label).lower() for label in labels]
