"""Aggregate shapes produced by the conversion pipeline."""

from dataclasses import dataclass

SetPair = tuple[str, str]
ExerciseRow = list[SetPair]
ExercisesMap = dict[str, ExerciseRow]
DateWorkoutGroup = dict[str, ExercisesMap]


@dataclass
class ProcessedNutritionRecord:
    """Running macro totals for a single date."""

    protein: float
    carbohydrates: float
    fat: float

    def add(self, protein: float, carbohydrates: float, fat: float) -> None:
        """Add one entry's macros to the totals."""
        self.protein += protein
        self.carbohydrates += carbohydrates
        self.fat += fat
