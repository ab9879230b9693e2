"""FastAPI application factory."""

from fastapi import FastAPI

from fitness_export.api.convert import router as convert_router
from fitness_export.api.ui import router as ui_router
from fitness_export.app_logging import configure_logging
from fitness_export.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()

    app = FastAPI(title="Fitness Export")
    app.state.container = container

    app.include_router(ui_router)
    app.include_router(convert_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
