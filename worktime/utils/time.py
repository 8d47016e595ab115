"""Time-of-day and calendar helpers shared by the schedule services."""

from __future__ import annotations

import calendar
import re
from collections.abc import Iterator
from datetime import date, datetime, timedelta, timezone

from worktime.services.errors import InvalidArgumentError

MINUTES_PER_DAY: int = 1440

WEEKDAY_NAMES: list[str] = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

_HHMM_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
_DATETIME_HHMM_RE = re.compile(r"^\d{4}-\d{2}-\d{2}[ T]([01]\d|2[0-3]):([0-5]\d)(?::[0-5]\d)?$")


def hhmm_to_minutes(value: str) -> int:
    """Return minutes elapsed since midnight for an HH:MM string.

    Date-time strings such as ``2024-04-01 10:30`` or ``2024-04-01T10:30:00``
    are accepted too; only their time part is read.
    """
    if value is None or not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError("Time string in HH:mm format is required")

    checked: str = value.strip()
    match = _HHMM_RE.match(checked) or _DATETIME_HHMM_RE.match(checked)
    if match is None:
        raise InvalidArgumentError(f"`{value}` does not match HH:mm (00-23):(00-59)")
    return int(match.group(1)) * 60 + int(match.group(2))


def hhmm_range_to_minutes(value: str) -> tuple[int, int]:
    """Split an ``HH:MM-HH:MM`` range into two minute offsets."""
    parts: list[str] = value.split("-") if isinstance(value, str) else []
    if len(parts) != 2:
        raise InvalidArgumentError(f"`{value}` does not match HH:mm-HH:mm")
    return hhmm_to_minutes(parts[0]), hhmm_to_minutes(parts[1])


def minutes_to_hhmm(minutes: int) -> str:
    """Format minutes since midnight as HH:MM, dropping whole days."""
    minutes = abs(int(minutes)) % MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def weekday_name(day: date) -> str:
    """Return the lowercase English weekday name of a date."""
    return WEEKDAY_NAMES[day.weekday()]


def utc_offset_minutes(moment: datetime) -> int:
    """Return the UTC offset of a datetime in minutes; naive values count as UTC."""
    offset: timedelta | None = moment.utcoffset()
    if offset is None:
        return 0
    return int(offset.total_seconds() // 60)


def to_epoch_seconds(instant: datetime | int | float) -> int:
    """Return whole epoch seconds for a datetime or a numeric timestamp."""
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        return round(instant.timestamp())
    if isinstance(instant, (int, float)) and not isinstance(instant, bool):
        return round(instant)
    raise InvalidArgumentError("A datetime or epoch seconds value is required")


def utc_midnight_epoch(day: date) -> int:
    """Return the epoch seconds of a calendar date's midnight in UTC."""
    return calendar.timegm((day.year, day.month, day.day, 0, 0, 0))


def iter_dates(start: date | datetime, end: date | datetime) -> Iterator[date]:
    """Yield calendar dates from start to end inclusive, stepping whole days."""
    if isinstance(start, datetime) != isinstance(end, datetime):
        start = start.date() if isinstance(start, datetime) else start
        end = end.date() if isinstance(end, datetime) else end
    current = start
    while current <= end:
        yield current.date() if isinstance(current, datetime) else current
        current = current + timedelta(days=1)
