from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from app.api import build_router
from datastore.error_log import ErrorLog
from logging_config import configure_logging
from services.telemetry import TelemetryService
from settings import Settings, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    logger.info(
        "Starting %s. PostTemp URL: %s, GetErrors URL: %s, Delete URL: %s",
        settings.app_name,
        settings.post_temp_url,
        settings.get_errors_url,
        settings.delete_errors_url,
    )
    try:
        yield
    finally:
        logger.info(
            "%s exiting",
            settings.app_name,
            extra={"error_count": len(app.state.telemetry_service.error_log)},
        )


def create_app(
    settings: Optional[Settings] = None,
    error_log: Optional[ErrorLog] = None,
) -> FastAPI:
    settings = settings if settings is not None else get_settings()
    configure_logging(settings.log_level)
    app = FastAPI(
        title=settings.app_name,
        description="Classifies raw temperature telemetry and archives malformed submissions.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.telemetry_service = TelemetryService(
        error_log=error_log if error_log is not None else ErrorLog()
    )
    app.include_router(build_router(settings))
    return app

app = create_app()
