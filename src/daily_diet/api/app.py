"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from daily_diet.api.meals import router as meals_router
from daily_diet.api.users import router as users_router
from daily_diet.app_logging import configure_logging
from daily_diet.containers import AppContainer
from daily_diet.errors import DailyDietError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Daily diet API starting: environment=%s",
            app.state.container.settings.environment,
        )
        yield
        logger.info("Daily diet API stopped")

    app = FastAPI(title="Daily Diet", lifespan=lifespan)
    app.state.container = container

    app.include_router(users_router)
    app.include_router(meals_router)

    @app.exception_handler(DailyDietError)
    async def daily_diet_error_handler(
        request: Request, exc: DailyDietError
    ) -> JSONResponse:
        logger.warning(
            "%s %s rejected: status=%s reason=%s",
            request.method,
            request.url.path,
            exc.http_status,
            exc.message,
        )
        return JSONResponse(
            status_code=exc.http_status, content={"detail": exc.message}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
