"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import build_api_router
from app.config import get_settings
from app.core.logging import setup_logging
from app.core.telemetry import setup_telemetry
from app.db.session import Database, get_database
from app.schemas import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI, database: Database):
    try:
        await database.create_all()
        yield
    finally:
        await database.dispose()


def create_app(database: Database | None = None) -> FastAPI:
    """Build the API around ``database``, defaulting to the shared instance."""

    settings = get_settings()
    database_instance = database or get_database()
    setup_logging(settings.log_level)
    logger.info("Planner configuration: %s", settings.dict_for_logging())

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lambda app: _lifespan(app, database_instance),
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_telemetry(app, settings, engine=database_instance.engine)
    app.include_router(build_api_router(database_instance))

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service=settings.app_name, timestamp=datetime.now())

    return app


app = create_app()

__all__ = ["app", "create_app"]
