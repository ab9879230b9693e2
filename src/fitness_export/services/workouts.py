"""Workout grouping by date and exercise."""

import re
from collections.abc import Iterable

from fitness_export.domain.aggregates import DateWorkoutGroup
from fitness_export.domain.records import WorkoutSet

DEFAULT_WINDOW_DAYS = 4

_WHITESPACE = re.compile(r"\s")


def strip_time(value: str) -> str:
    """Drop a trailing time-of-day from a date cell."""
    return _WHITESPACE.split(value, maxsplit=1)[0]


def group_workouts(sets: Iterable[WorkoutSet]) -> DateWorkoutGroup:
    """Group (weight, reps) pairs by date, then exercise, in first-seen order."""
    groups: DateWorkoutGroup = {}
    for workout_set in sets:
        exercises = groups.setdefault(strip_time(workout_set.date), {})
        exercises.setdefault(workout_set.exercise_name, []).append(
            (workout_set.weight, workout_set.reps)
        )
    return groups


def window_recent(
    groups: DateWorkoutGroup, size: int = DEFAULT_WINDOW_DAYS
) -> DateWorkoutGroup:
    """Keep the most recently introduced dates, newest first.

    Recency is the position of a date's first appearance in the input, not the
    date value itself.
    """
    if size < 1:
        raise ValueError(f"Window size must be positive, got {size}")
    recent = list(reversed(groups.items()))[:size]
    return dict(recent)
