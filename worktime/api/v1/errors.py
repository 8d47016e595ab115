"""Translate work-time errors into HTTP responses."""

from fastapi import HTTPException

from worktime.services.errors import (
    InvalidArgumentError,
    NoScheduleForDayError,
    NotWorkingNowError,
    UnknownTimeZoneError,
    WorkTimeError,
)

ERROR_STATUS: list[tuple[type[WorkTimeError], int, str]] = [
    (UnknownTimeZoneError, 400, "unknown_time_zone"),
    (NoScheduleForDayError, 409, "no_schedule_for_day"),
    (NotWorkingNowError, 409, "working_now"),
    (InvalidArgumentError, 422, "invalid_argument"),
]


def to_http_exception(exc: WorkTimeError) -> HTTPException:
    """Return the HTTPException matching a work-time error."""
    for error_type, status_code, code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail={"code": code, "message": str(exc)})
    return HTTPException(status_code=400, detail={"code": "worktime_error", "message": str(exc)})
