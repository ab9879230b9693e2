"""Raw record shapes bound from normalized CSV rows."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RawRecord(BaseModel):
    """Base for rows bound by normalized header name."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class NutritionEntry(RawRecord):
    """One meal line from the nutrition export."""

    date: str
    meal: str
    calories: str
    fat: str
    saturated_fat: str
    polyunsaturated_fat: str
    monounsaturated_fat: str
    trans_fat: str
    cholesterol: str
    sodium: str
    potassium: str
    carbohydrates: str
    fiber: str
    sugar: str
    protein: str
    vitamin_a: str
    vitamin_c: str
    calcium: str
    iron: str
    note: str | None = None

    @field_validator("note", mode="before")
    @classmethod
    def _empty_note(cls, value: object) -> object:
        return value or None


class WeightEntry(RawRecord):
    """One body measurement."""

    date: str
    body_fat: str | None = None
    weight: str

    @field_validator("body_fat", mode="before")
    @classmethod
    def _empty_body_fat(cls, value: object) -> object:
        return value or None


class WorkoutSet(RawRecord):
    """One strength-training set."""

    date: str
    workout_name: str
    duration: str
    exercise_name: str
    set_order: str
    weight: str
    reps: str
    distance: str
    seconds: str
    notes: str
    workout_notes: str
    rpe: str


class StepsEntry(RawRecord):
    """One line from the exercise diary export."""

    date: str
    exercise: str
    type: str = Field(alias="_type")
    exercise_calories: str
    exercise_minutes: str
    sets: str
    rps: str
    kilograms: str
    steps: str
    note: str

