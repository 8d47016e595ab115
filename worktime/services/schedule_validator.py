"""Queries against a generated interval schedule."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Literal

from worktime.schemas.worktime import CompiledInterval, Schedule
from worktime.services.compiled_day import Boundary, within
from worktime.services.errors import InvalidArgumentError
from worktime.services.timezone import time_zone_offset_in_seconds
from worktime.utils.time import to_epoch_seconds

DayLimitMode = Literal["earliest", "latest"]


@dataclass(frozen=True)
class NotImplementedResult:
    """Tag returned by queries that are part of the interface but not computed."""

    operation: str


def normalize_schedule(schedule: Iterable[CompiledInterval | tuple[int, int] | list[int]] | None) -> Schedule:
    """Return the schedule as ``(start, stop)`` pairs, keeping order."""
    pairs: Schedule = []
    for interval in schedule or []:
        if isinstance(interval, CompiledInterval):
            pairs.append(interval.as_pair())
        elif isinstance(interval, dict):
            pairs.append((int(interval["start"]), int(interval["stop"])))
        else:
            start, stop = interval
            pairs.append((int(start), int(stop)))
    return pairs


class ScheduleValidator:
    """Answers repeated containment queries against a fixed schedule."""

    boundary: Boundary = Boundary.INCLUSIVE

    def __init__(self, schedule: Iterable[CompiledInterval | tuple[int, int]] | None) -> None:
        self.schedule: Schedule = normalize_schedule(schedule)

    def contains_instant(self, instant: datetime | int | float) -> bool:
        """Return True when the instant falls inside an interval, boundaries included."""
        moment: int = to_epoch_seconds(instant)
        return any(within(moment, start, stop, self.boundary) for start, stop in self.schedule)

    def contains_duration(self, start_instant: datetime | int | float, duration_seconds: int) -> bool:
        """Return True when the whole duration fits inside a single interval."""
        begin: int = to_epoch_seconds(start_instant)
        end: int = begin + int(duration_seconds)
        return any(start <= begin and stop >= end for start, stop in self.schedule)

    def find_day_limit(self, mode: DayLimitMode, time_zone: str | None = None) -> str | None:
        """Return the date (``YYYY-MM-DD``) of the earliest or latest interval start."""
        if mode not in ("earliest", "latest"):
            raise InvalidArgumentError(f"Unknown day limit mode `{mode}`")
        if not self.schedule:
            return None

        starts: list[int] = [start for start, _ in self.schedule]
        limit: int = min(starts) if mode == "earliest" else max(starts)
        zone = timezone(timedelta(seconds=time_zone_offset_in_seconds(time_zone or "Etc/GMT+0")))
        return datetime.fromtimestamp(limit, tz=zone).strftime("%Y-%m-%d")

    def find_latest_end_date(self, duration_seconds: int | None = None) -> NotImplementedResult:
        return NotImplementedResult(operation="find_latest_end_date")
