"""Business-facing work-time checks: open now, next order time, order horizon."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any, TypeVar

from pydantic import ValidationError

from worktime.schemas.worktime import Restrictions, RestrictionsOrder, ValidatorResult, WorkTimeRule
from worktime.services.compiled_day import Boundary, compile_day, resolve_rule
from worktime.services.errors import InvalidArgumentError, NotWorkingNowError
from worktime.services.timezone import time_zone_offset_in_minutes
from worktime.utils.time import (
    MINUTES_PER_DAY,
    hhmm_to_minutes,
    minutes_to_hhmm,
    utc_offset_minutes,
    weekday_name,
)

logger = logging.getLogger(__name__)

ORDER_TIME_PADDING_MINUTES: int = 1

RestrictionsT = TypeVar("RestrictionsT", bound=Restrictions)


@dataclass(frozen=True)
class BusinessClock:
    """A caller instant seen on the business's wall clock."""

    business_date: date
    minutes: int
    is_new_day: bool


def ensure_restrictions(restriction: Any, model: type[RestrictionsT] = Restrictions) -> RestrictionsT:
    """Validate a restriction mapping or model into ``model``."""
    if restriction is None:
        raise InvalidArgumentError("Restrictions object is required")
    if isinstance(restriction, model):
        return restriction
    payload: Any = restriction.model_dump(by_alias=True) if isinstance(restriction, Restrictions) else restriction
    if not isinstance(payload, Mapping):
        raise InvalidArgumentError("Restrictions must be a mapping")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise InvalidArgumentError(f"Invalid restrictions object: {exc}") from exc


def ensure_datetime(value: Any) -> datetime:
    if not isinstance(value, datetime):
        raise InvalidArgumentError("A valid datetime object is required")
    return value


def business_clock(restriction: Restrictions, now: datetime, *, default_zone: str | None = None) -> BusinessClock:
    """Shift the caller's wall-clock time onto the business's fixed offset.

    When the shift crosses midnight the minutes are folded back into one day
    and the calendar date moves with them.
    """
    business_offset: int = time_zone_offset_in_minutes(restriction.timezone, default_zone=default_zone)
    local_delta: int = business_offset - utc_offset_minutes(now)
    minutes: int = now.hour * 60 + now.minute + local_delta
    day: date = now.date()

    if minutes >= MINUTES_PER_DAY:
        return BusinessClock(business_date=day + timedelta(days=1), minutes=minutes - MINUTES_PER_DAY, is_new_day=True)
    if minutes < 0:
        return BusinessClock(business_date=day - timedelta(days=1), minutes=minutes + MINUTES_PER_DAY, is_new_day=False)
    return BusinessClock(business_date=day, minutes=minutes, is_new_day=False)


def get_current_work_time(restriction: Restrictions | Mapping[str, Any], day: date) -> WorkTimeRule:
    """Return the first declared rule that applies to the weekday of ``day``."""
    restriction = ensure_restrictions(restriction)
    if not isinstance(day, date):
        raise InvalidArgumentError("A valid date object is required")
    return resolve_rule(restriction.worktime, weekday_name(day))


def _evaluate(
    restriction: Restrictions, now: datetime, default_zone: str | None
) -> tuple[ValidatorResult, BusinessClock | None]:
    if not restriction.worktime:
        return ValidatorResult(work_now=True), None

    clock: BusinessClock = business_clock(restriction, now, default_zone=default_zone)
    rule: WorkTimeRule = get_current_work_time(restriction, clock.business_date)
    day = compile_day(rule, weekday_name(clock.business_date))
    result = ValidatorResult(
        work_now=day.is_open_at(clock.minutes, boundary=Boundary.EXCLUSIVE),
        is_new_day=clock.is_new_day,
        current_time=clock.minutes,
        current_day_start_time=day.start,
        current_day_stop_time=day.stop,
    )
    return result, clock


def is_work_now(
    restriction: Restrictions | Mapping[str, Any],
    now: datetime | None = None,
    *,
    default_zone: str | None = None,
) -> ValidatorResult:
    """Check whether the business is open at ``now``.

    Opening and closing minutes themselves count as closed. A restriction
    without rules is always open. ``now`` defaults to the current UTC time;
    naive datetimes are read as UTC.
    """
    restriction = ensure_restrictions(restriction)
    now = datetime.now(timezone.utc) if now is None else ensure_datetime(now)
    result, _ = _evaluate(restriction, now, default_zone)
    return result


def _format_order_datetime(day: date, minutes: int) -> str:
    day = day + timedelta(days=minutes // MINUTES_PER_DAY)
    return f"{day:%Y-%m-%d} {minutes_to_hhmm(minutes)}"


def get_possible_delivery_order_datetime(
    restriction_order: RestrictionsOrder | Mapping[str, Any],
    now: datetime,
    *,
    raise_if_open: bool = False,
    default_zone: str | None = None,
) -> str:
    """Return the earliest ``YYYY-MM-DD HH:MM`` a delivery can be ordered for.

    While open this is now plus the minimal delivery time. While closed it is
    the applicable day's opening plus the minimal delivery time and a
    one-minute pad; after closing hours (or when the zone shift already moved
    to the next day) the date is tomorrow's.
    """
    order: RestrictionsOrder = ensure_restrictions(restriction_order, RestrictionsOrder)
    now = ensure_datetime(now)
    result, clock = _evaluate(order, now, default_zone)

    if result.current_time is None or result.current_day_stop_time is None or clock is None:
        raise InvalidArgumentError("Unable to calculate current time and closing time")

    if result.work_now:
        if raise_if_open:
            raise NotWorkingNowError("Working now; no fallback order time is needed")
        logger.info("[WORKTIME] Open now; next order time is counted from current time")
        return _format_order_datetime(clock.business_date, result.current_time + order.min_delivery_time_in_minutes)

    rule: WorkTimeRule = get_current_work_time(order, clock.business_date)
    minutes: int = rule.start_minutes + order.min_delivery_time_in_minutes + ORDER_TIME_PADDING_MINUTES
    order_date: date = clock.business_date
    if not clock.is_new_day and result.current_time > result.current_day_stop_time:
        order_date = order_date + timedelta(days=1)
    return _format_order_datetime(order_date, minutes)


def apply_self_service(restriction: RestrictionsT) -> RestrictionsT:
    """Return a copy whose rules use their self-service windows where defined."""
    return restriction.model_copy(update={"worktime": [rule.with_self_service() for rule in restriction.worktime]})


def get_possible_self_service_order_datetime(
    restriction_order: RestrictionsOrder | Mapping[str, Any],
    now: datetime,
    *,
    raise_if_open: bool = False,
    default_zone: str | None = None,
) -> str:
    """Same as the delivery variant, computed on the pickup (self-service) windows."""
    order: RestrictionsOrder = ensure_restrictions(restriction_order, RestrictionsOrder)
    return get_possible_delivery_order_datetime(
        apply_self_service(order),
        now,
        raise_if_open=raise_if_open,
        default_zone=default_zone,
    )


def get_max_order_date(restriction_order: RestrictionsOrder | Mapping[str, Any], now: datetime) -> str:
    """Return the last ``YYYY-MM-DD`` an order may be placed for."""
    now = ensure_datetime(now)
    order: RestrictionsOrder = ensure_restrictions(restriction_order, RestrictionsOrder)
    return (now + timedelta(minutes=order.possible_to_order_in_minutes)).strftime("%Y-%m-%d")


def get_time_from_string(value: str) -> int:
    return hhmm_to_minutes(value)


def convert_minutes_to_time(minutes: int) -> str:
    return minutes_to_hhmm(minutes)


class WorkTimeValidator:
    """Stateless access to the work-time checks; see MemoizedWorkTimeValidator for caching."""

    is_work_now = staticmethod(is_work_now)
    get_current_work_time = staticmethod(get_current_work_time)
    get_possible_delivery_order_datetime = staticmethod(get_possible_delivery_order_datetime)
    get_possible_self_service_order_datetime = staticmethod(get_possible_self_service_order_datetime)
    get_max_order_date = staticmethod(get_max_order_date)
    get_time_from_string = staticmethod(get_time_from_string)
    convert_minutes_to_time = staticmethod(convert_minutes_to_time)
