"""Conversion pipeline from raw export bytes to spreadsheet text."""

import logging
from dataclasses import dataclass
from typing import cast

from fitness_export.domain.kinds import RecordKind, resolve_kind
from fitness_export.domain.records import (
    NutritionEntry,
    StepsEntry,
    WeightEntry,
    WorkoutSet,
)
from fitness_export.services.emitter import (
    finalize_for_clipboard,
    render_nutrition,
    render_values,
    render_weight,
    render_workouts,
)
from fitness_export.services.measurements import (
    step_values,
    weight_rows,
    weight_values,
)
from fitness_export.services.nutrition import aggregate_nutrition
from fitness_export.services.parsing import decode_document, parse_document
from fitness_export.services.workouts import (
    DEFAULT_WINDOW_DAYS,
    group_workouts,
    window_recent,
)

_logger = logging.getLogger(__name__)


@dataclass
class ConversionService:
    """Service that turns tracker exports into pasteable text."""

    window_days: int = DEFAULT_WINDOW_DAYS
    debug: bool = False

    def resolve_kind(self, selector: str | None) -> RecordKind | None:
        """Resolve a kind name or export filename."""
        return resolve_kind(selector)

    def convert(self, data: bytes, kind: RecordKind | None) -> str:
        """Render an export the way the batch converter prints it."""
        if kind is None:
            return ""
        records = self._parse(data, kind)
        if kind is RecordKind.NUTRITION:
            entries = cast("list[NutritionEntry]", records)
            return render_nutrition(aggregate_nutrition(entries))
        if kind is RecordKind.WEIGHT:
            return render_weight(weight_rows(cast("list[WeightEntry]", records)))
        if kind is RecordKind.STEPS:
            return render_values(step_values(cast("list[StepsEntry]", records)))
        return self._render_workouts(cast("list[WorkoutSet]", records))

    def convert_for_clipboard(self, data: bytes, kind: RecordKind | None) -> str:
        """Render an export for pasting from the browser front-end."""
        if kind is None:
            return ""
        records = self._parse(data, kind)
        if kind is RecordKind.NUTRITION:
            entries = cast("list[NutritionEntry]", records)
            text = render_nutrition(aggregate_nutrition(entries))
        elif kind is RecordKind.WEIGHT:
            text = render_values(weight_values(cast("list[WeightEntry]", records)))
        elif kind is RecordKind.STEPS:
            text = render_values(step_values(cast("list[StepsEntry]", records)))
        else:
            text = self._render_workouts(cast("list[WorkoutSet]", records))
        return finalize_for_clipboard(text)

    def _parse(self, data: bytes, kind: RecordKind) -> list:
        records, dropped = parse_document(decode_document(data), kind)
        if self.debug:
            _logger.info(
                "Parsed %s export: records=%s dropped=%s",
                kind.value,
                len(records),
                dropped,
            )
        return records

    def _render_workouts(self, sets: list[WorkoutSet]) -> str:
        groups = window_recent(group_workouts(sets), self.window_days)
        return render_workouts(groups)
