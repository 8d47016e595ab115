"""Compile weekly work-time rules into concrete epoch-second intervals."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from pydantic import ValidationError

from worktime.schemas.worktime import CompiledInterval, Schedule, WorkTimeRule
from worktime.services.compiled_day import BreakWindow, CompiledDay, DayResolution, compile_week
from worktime.services.errors import InvalidArgumentError
from worktime.services.timezone import time_zone_offset_in_seconds
from worktime.utils.time import iter_dates, utc_midnight_epoch, weekday_name

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_TIME_ZONE: str = "Etc/GMT+0"


def coerce_rules(rules: Iterable[WorkTimeRule | Mapping[str, Any]]) -> list[WorkTimeRule]:
    """Validate raw rule mappings into WorkTimeRule objects."""
    if rules is None:
        raise InvalidArgumentError("Work-time rules are required")
    try:
        return [rule if isinstance(rule, WorkTimeRule) else WorkTimeRule.model_validate(rule) for rule in rules]
    except ValidationError as exc:
        raise InvalidArgumentError(f"Invalid work-time rule: {exc}") from exc


class ScheduleGenerator:
    """Turns a weekly rule list into open intervals over a date range."""

    def __init__(
        self,
        rules: Iterable[WorkTimeRule | Mapping[str, Any]],
        *,
        resolution: DayResolution = DayResolution.FIRST_MATCH,
        strict_breaks: bool = False,
    ) -> None:
        self.rules: list[WorkTimeRule] = coerce_rules(rules)
        self.resolution: DayResolution = resolution
        self.week: dict[str, CompiledDay] = compile_week(
            self.rules, resolution=resolution, strict_breaks=strict_breaks
        )

    @property
    def days(self) -> dict[str, dict[str, int]]:
        """Opening window per weekday in seconds since midnight."""
        return {name: {"start": day.start * 60, "stop": day.stop * 60} for name, day in self.week.items()}

    @property
    def breaks(self) -> dict[str, dict[str, int]]:
        """Break window per weekday in seconds since midnight; days without a break are absent."""
        return {
            name: {"start": day.lunch.start * 60, "stop": day.lunch.stop * 60}
            for name, day in self.week.items()
            if isinstance(day.lunch, BreakWindow)
        }

    def _intervals_for(self, day: date) -> list[CompiledInterval]:
        compiled: CompiledDay | None = self.week.get(weekday_name(day))
        if compiled is None:
            return []
        midnight: int = utc_midnight_epoch(day)
        return [
            CompiledInterval(start=midnight + start * 60, stop=midnight + stop * 60)
            for start, stop in compiled.intervals
        ]

    def generate_time_intervals(
        self,
        start_date: date | datetime,
        end_date: date | datetime,
        time_zone: str | None = None,
        compact: bool = False,
    ) -> Schedule | list[CompiledInterval]:
        """Generate open intervals for every working date between start and end inclusive.

        Each boundary is that date's midnight plus the rule's time of day, then
        shifted by the fixed offset of ``time_zone`` (``Etc/GMT+0`` when unset).
        """
        if start_date is None or end_date is None:
            raise InvalidArgumentError("Both start and end dates are required")

        offset: int = time_zone_offset_in_seconds(time_zone or DEFAULT_INTERVAL_TIME_ZONE)
        intervals: list[CompiledInterval] = [
            CompiledInterval(start=interval.start + offset, stop=interval.stop + offset)
            for day in iter_dates(start_date, end_date)
            for interval in self._intervals_for(day)
        ]
        logger.debug(
            "[SCHEDULE] Generated %s intervals from %s to %s (offset %ss)",
            len(intervals),
            start_date,
            end_date,
            offset,
        )
        if compact:
            return to_compact(intervals)
        return intervals


def to_compact(intervals: Iterable[CompiledInterval]) -> Schedule:
    return [interval.as_pair() for interval in intervals]


def to_verbose(schedule: Iterable[tuple[int, int]]) -> list[CompiledInterval]:
    return [CompiledInterval(start=start, stop=stop) for start, stop in schedule]


def compile_schedule(
    rules: Iterable[WorkTimeRule | Mapping[str, Any]],
    *,
    resolution: DayResolution = DayResolution.FIRST_MATCH,
    strict_breaks: bool = False,
) -> ScheduleGenerator:
    """Build a ScheduleGenerator for the given rules."""
    return ScheduleGenerator(rules, resolution=resolution, strict_breaks=strict_breaks)
