"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from fitness_export.adapters.file_source import ByteSource
from fitness_export.adapters.output_sink import OutputSink
from fitness_export.config import Settings
from fitness_export.containers import AppContainer
from fitness_export.services.conversion import ConversionService

NUTRITION_HEADER = [
    "Date",
    "Meal",
    "Calories",
    "Fat (g)",
    "Saturated Fat",
    "Polyunsaturated Fat",
    "Monounsaturated Fat",
    "Trans Fat",
    "Cholesterol",
    "Sodium (mg)",
    "Potassium",
    "Carbohydrates (g)",
    "Fiber",
    "Sugar",
    "Protein (g)",
    "Vitamin A",
    "Vitamin C",
    "Calcium",
    "Iron",
    "Note",
]

WEIGHT_HEADER = ["Date", "Body Fat %", "Weight"]

WORKOUT_HEADER = [
    "Date",
    "Workout Name",
    "Duration",
    "Exercise Name",
    "Set Order",
    "Weight",
    "Reps",
    "Distance",
    "Seconds",
    "Notes",
    "Workout Notes",
    "RPE",
]

STEPS_HEADER = [
    "Date",
    "Exercise",
    "Type",
    "Exercise Calories",
    "Exercise Minutes",
    "Sets",
    "Reps Per Set",
    "Kilograms",
    "Steps",
    "Note",
]


def nutrition_row(
    date: str, protein: str, carbohydrates: str, fat: str, meal: str = "Lunch"
) -> list[str]:
    """Build a nutrition export row with the given macros."""
    return [
        date,
        meal,
        "400",
        fat,
        "1",
        "0.5",
        "0.5",
        "0",
        "10",
        "200",
        "150",
        carbohydrates,
        "3",
        "4",
        protein,
        "0",
        "0",
        "2",
        "1",
        "",
    ]


def workout_row(
    date: str, exercise: str, weight: str, reps: str, set_order: str = "1"
) -> list[str]:
    """Build a workout export row for one set."""
    return [
        date,
        "Push Day",
        "1h",
        exercise,
        set_order,
        weight,
        reps,
        "0",
        "0",
        "",
        "",
        "",
    ]


def steps_row(date: str, steps: str) -> list[str]:
    """Build an exercise diary row with a step count."""
    return [date, "Walking", "Cardio", "120", "30", "", "", "", steps, ""]


def to_csv(header: list[str], rows: list[list[str]]) -> bytes:
    """Serialize rows into export bytes."""
    lines = [",".join(header)] + [",".join(row) for row in rows]
    return ("\n".join(lines) + "\n").encode()


@dataclass
class InMemoryByteSource(ByteSource):
    """Byte source backed by a dict of paths."""

    files: dict[str, bytes]
    path: str

    def read_bytes(self) -> bytes:
        if self.path not in self.files:
            raise FileNotFoundError(self.path)
        return self.files[self.path]


@dataclass
class RecordingSink(OutputSink):
    """Sink that records written text."""

    writes: list[str] = field(default_factory=list)

    def write(self, text: str) -> None:
        self.writes.append(text)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def conversion_service(settings: Settings) -> ConversionService:
    return ConversionService(window_days=settings.workout_window_days)


@pytest.fixture
def files() -> dict[str, bytes]:
    return {}


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def container(
    settings: Settings,
    conversion_service: ConversionService,
    files: dict[str, bytes],
    sink: RecordingSink,
) -> AppContainer:
    def open_source(path: str) -> ByteSource:
        return InMemoryByteSource(files=files, path=path)

    return AppContainer(
        settings=settings,
        conversion_service=conversion_service,
        open_source=open_source,
        output_sink=sink,
    )
