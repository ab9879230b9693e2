"""Pass-through extraction for weight and step exports."""

from collections.abc import Iterable

from fitness_export.domain.records import StepsEntry, WeightEntry


def weight_rows(entries: Iterable[WeightEntry]) -> list[WeightEntry]:
    """Return weight entries unchanged, in input order."""
    return list(entries)


def weight_values(entries: Iterable[WeightEntry]) -> list[str]:
    """Return only the weight column."""
    return [entry.weight for entry in entries]


def step_values(entries: Iterable[StepsEntry]) -> list[str]:
    """Return the step counts, skipping diary lines without one."""
    return [entry.steps for entry in entries if entry.steps != ""]
