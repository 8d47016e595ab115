"""FastAPI entrypoint for the work-time service."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from worktime.api.v1.api import api_router
from worktime.core.config import settings
from worktime.core.logging import configure_logging
from worktime.services.timezone import resolve_time_zone_offset

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, debug=settings.debug)
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def startup() -> None:
    configure_logging(settings.log_level)
    offset: str = resolve_time_zone_offset(settings.default_timezone)
    logger.info("[BOOTSTRAP] env=%s default timezone %s (%s)", settings.app_env, settings.default_timezone, offset)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
