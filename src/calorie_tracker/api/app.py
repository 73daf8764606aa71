"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from calorie_tracker.api.days import router as days_router
from calorie_tracker.api.ui import router as ui_router
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.container.tracker_service.restore()
        logger.info(
            "Tracker ready with %s logged days",
            len(app.state.container.tracker_service.days),
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Calorie Tracker", lifespan=lifespan)
    app.state.container = container

    app.include_router(days_router)
    app.include_router(ui_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
