"""Record kinds found in the tracker's CSV exports."""

from enum import Enum


class RecordKind(Enum):
    """Kinds of export the converter understands."""

    NUTRITION = "nutrition"
    WEIGHT = "weight"
    WORKOUT = "workout"
    STEPS = "steps"


_KIND_ALIASES: dict[str, RecordKind] = {
    "nutrition": RecordKind.NUTRITION,
    "macros": RecordKind.NUTRITION,
    "weight": RecordKind.WEIGHT,
    "workout": RecordKind.WORKOUT,
    "steps": RecordKind.STEPS,
}

# Export file names carry these markers, e.g. "Nutrition-Summary-2024.csv".
_FILENAME_MARKERS: tuple[tuple[str, RecordKind], ...] = (
    ("Exercise", RecordKind.WORKOUT),
    ("Nutrition", RecordKind.NUTRITION),
    ("Measurement", RecordKind.WEIGHT),
)


def resolve_kind(selector: str | None) -> RecordKind | None:
    """Resolve a kind name or export filename to a record kind."""
    if not selector:
        return None
    cleaned = selector.strip()
    alias = _KIND_ALIASES.get(cleaned.lower())
    if alias is not None:
        return alias
    for marker, kind in _FILENAME_MARKERS:
        if marker in cleaned:
            return kind
    return None
