"""ASGI entrypoint for the export converter."""

from fitness_export.api.app import create_app
from fitness_export.containers import build_container

app = create_app(build_container())
