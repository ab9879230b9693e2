"""Bind normalized CSV rows to typed records."""

import csv
import io
import sys
from collections.abc import Iterable, Sequence

from pydantic import ValidationError

from fitness_export.domain.kinds import RecordKind
from fitness_export.domain.records import (
    NutritionEntry,
    RawRecord,
    StepsEntry,
    WeightEntry,
    WorkoutSet,
)
from fitness_export.services.headers import normalize_headers

RECORD_MODELS: dict[RecordKind, type[RawRecord]] = {
    RecordKind.NUTRITION: NutritionEntry,
    RecordKind.WEIGHT: WeightEntry,
    RecordKind.WORKOUT: WorkoutSet,
    RecordKind.STEPS: StepsEntry,
}

# Exports carry free-text notes with no length bound.
_FIELD_SIZE_LIMIT = min(sys.maxsize, 2**31 - 1)


def decode_document(data: bytes) -> str:
    """Decode export bytes, dropping a UTF-8 byte order mark if present."""
    return data.decode("utf-8-sig")


def read_table(text: str) -> tuple[list[str], list[list[str]]]:
    """Split a CSV document into its header row and data rows."""
    csv.field_size_limit(_FIELD_SIZE_LIMIT)
    rows = list(csv.reader(io.StringIO(text)))
    if not rows:
        return [], []
    header, *data = rows
    return header, data


def parse_records(
    header: Sequence[str], rows: Iterable[Sequence[str]], kind: RecordKind
) -> list[RawRecord]:
    """Bind each row to the kind's record, skipping rows that don't fit."""
    model = RECORD_MODELS[kind]
    fields = normalize_headers(header, kind)
    records: list[RawRecord] = []
    for row in rows:
        if len(row) != len(fields):
            continue
        try:
            records.append(model.model_validate(dict(zip(fields, row, strict=True))))
        except ValidationError:
            continue
    return records


def parse_document(text: str, kind: RecordKind) -> tuple[list[RawRecord], int]:
    """Parse a decoded document and return records with the dropped row count."""
    header, rows = read_table(text)
    if not header:
        return [], 0
    records = parse_records(header, rows, kind)
    return records, len(rows) - len(records)
