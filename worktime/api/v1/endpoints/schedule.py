"""Interval schedule endpoints."""

import logging

from fastapi import APIRouter

from worktime.api.v1.errors import to_http_exception
from worktime.core.config import settings
from worktime.schemas.api import IntervalsRequest, IntervalsResponse, ScheduleCheckRequest, ScheduleCheckResponse
from worktime.services.errors import WorkTimeError
from worktime.services.schedule_generator import compile_schedule
from worktime.services.schedule_validator import ScheduleValidator

router: APIRouter = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/intervals", response_model=IntervalsResponse)
def generate_intervals(payload: IntervalsRequest) -> IntervalsResponse:
    """Compile rules into open intervals over a date range."""
    try:
        generator = compile_schedule(
            payload.rules,
            resolution=payload.resolution,
            strict_breaks=settings.strict_breaks,
        )
        intervals = generator.generate_time_intervals(
            payload.start_date,
            payload.end_date,
            payload.time_zone,
            payload.compact,
        )
    except WorkTimeError as exc:
        logger.info("[SCHEDULE] Interval generation rejected: %s", exc)
        raise to_http_exception(exc) from exc
    return IntervalsResponse(intervals=intervals)


@router.post("/check", response_model=ScheduleCheckResponse)
def check_schedule(payload: ScheduleCheckRequest) -> ScheduleCheckResponse:
    """Check an instant, or a duration starting at it, against a schedule."""
    schedule_validator = ScheduleValidator(payload.schedule)
    try:
        if payload.duration_seconds is None:
            contains: bool = schedule_validator.contains_instant(payload.instant)
        else:
            contains = schedule_validator.contains_duration(payload.instant, payload.duration_seconds)
        time_zone: str = payload.time_zone or settings.default_timezone
        return ScheduleCheckResponse(
            contains=contains,
            earliest_day=schedule_validator.find_day_limit("earliest", time_zone),
            latest_day=schedule_validator.find_day_limit("latest", time_zone),
        )
    except WorkTimeError as exc:
        raise to_http_exception(exc) from exc
