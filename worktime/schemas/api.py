"""HTTP request and response schemas."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from worktime.schemas.worktime import CompiledInterval, Restrictions, RestrictionsOrder, WorkTimeRule
from worktime.services.compiled_day import DayResolution


class WorkNowRequest(BaseModel):
    """Open-now check payload."""

    restrictions: Restrictions
    now: datetime | None = None


class OrderTimeRequest(BaseModel):
    """Next possible delivery or pickup time payload."""

    restrictions: RestrictionsOrder
    now: datetime
    raise_if_open: bool = False


class OrderTimeResponse(BaseModel):
    order_datetime: str


class MaxOrderDateRequest(BaseModel):
    restrictions: RestrictionsOrder
    now: datetime


class MaxOrderDateResponse(BaseModel):
    max_order_date: str


class CurrentWorkTimeRequest(BaseModel):
    restrictions: Restrictions
    day: date


class IntervalsRequest(BaseModel):
    """Interval generation payload."""

    rules: list[WorkTimeRule]
    start_date: date
    end_date: date
    time_zone: str | None = None
    compact: bool = False
    resolution: DayResolution = DayResolution.FIRST_MATCH


class IntervalsResponse(BaseModel):
    intervals: list[CompiledInterval] | list[tuple[int, int]]


class ScheduleCheckRequest(BaseModel):
    """Containment check against a previously generated schedule."""

    schedule: list[tuple[int, int]]
    instant: datetime
    duration_seconds: int | None = Field(default=None, ge=0)
    time_zone: str | None = None


class ScheduleCheckResponse(BaseModel):
    contains: bool
    earliest_day: str | None = None
    latest_day: str | None = None


class TimeZoneResponse(BaseModel):
    zone: str
    offset: str
