"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass

from fitness_export.adapters.file_source import ByteSource, LocalFileSource
from fitness_export.adapters.output_sink import OutputSink, StreamSink
from fitness_export.config import Settings
from fitness_export.services.conversion import ConversionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    conversion_service: ConversionService
    open_source: Callable[[str], ByteSource]
    output_sink: OutputSink


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    conversion_service = ConversionService(
        window_days=resolved_settings.workout_window_days,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        conversion_service=conversion_service,
        open_source=LocalFileSource.create,
        output_sink=StreamSink(),
    )
