"""Canonical compiled form of a weekly work-time schedule.

Both the minute-of-day "is it open" check and the epoch interval generator
read from :class:`CompiledDay`, so day matching, break handling and boundary
inclusivity are decided here once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from worktime.schemas.worktime import NO_BREAK, WorkTimeRule
from worktime.services.errors import InvalidArgumentError, NoScheduleForDayError
from worktime.utils.time import WEEKDAY_NAMES, hhmm_range_to_minutes

logger = logging.getLogger(__name__)


class Boundary(str, Enum):
    """Whether the opening and closing minute count as open."""

    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"


class DayResolution(str, Enum):
    """Which rule wins when several rules name the same weekday."""

    FIRST_MATCH = "first_match"
    LAST_WRITE = "last_write"


def within(value: int, start: int, stop: int, boundary: Boundary) -> bool:
    """Check value against [start, stop] or (start, stop) depending on boundary."""
    if boundary is Boundary.INCLUSIVE:
        return start <= value <= stop
    return start < value < stop


@dataclass(frozen=True)
class NoBreak:
    """Tag for a day without a lunch break."""


NO_BREAK_WINDOW: NoBreak = NoBreak()


@dataclass(frozen=True)
class BreakWindow:
    """Lunch break in minutes since midnight."""

    start: int
    stop: int

    @property
    def is_valid(self) -> bool:
        return self.start < self.stop


@dataclass(frozen=True)
class CompiledDay:
    """Opening window of one weekday in minutes since midnight."""

    day_name: str
    start: int
    stop: int
    lunch: BreakWindow | NoBreak = NO_BREAK_WINDOW

    @property
    def intervals(self) -> list[tuple[int, int]]:
        """Open intervals of the day, split around a valid break."""
        if isinstance(self.lunch, BreakWindow) and self.lunch.is_valid:
            return [(self.start, self.lunch.start), (self.lunch.stop, self.stop)]
        return [(self.start, self.stop)]

    def is_open_at(self, minute: int, *, boundary: Boundary) -> bool:
        """Check a minute of the day against the whole opening window; the break is not consulted."""
        return within(minute, self.start, self.stop, boundary)


def parse_break(value: str | None, *, strict: bool = False) -> BreakWindow | NoBreak:
    """Parse an ``HH:MM-HH:MM`` break; the ``00:00-00:00`` sentinel means no break.

    A break whose start is not before its stop is kept but never splits the
    day, unless ``strict`` is set, in which case it is rejected.
    """
    if value is None or value.strip() == NO_BREAK:
        return NO_BREAK_WINDOW

    start, stop = hhmm_range_to_minutes(value)
    window = BreakWindow(start=start, stop=stop)
    if not window.is_valid:
        if strict:
            raise InvalidArgumentError(f"Break `{value}` must start before it stops")
        logger.warning("[SCHEDULE] Ignoring break %s: start is not before stop", value)
    return window


def compile_day(rule: WorkTimeRule, day_name: str, *, strict_breaks: bool = False) -> CompiledDay:
    return CompiledDay(
        day_name=day_name.lower(),
        start=rule.start_minutes,
        stop=rule.stop_minutes,
        lunch=parse_break(rule.break_, strict=strict_breaks),
    )


def find_rule(rules: Iterable[WorkTimeRule], day_name: str) -> WorkTimeRule | None:
    """Return the first declared rule matching the weekday, if any."""
    for rule in rules:
        if rule.matches(day_name):
            return rule
    return None


def resolve_rule(rules: Sequence[WorkTimeRule], day_name: str) -> WorkTimeRule:
    """Return the first declared rule matching the weekday or raise."""
    rule: WorkTimeRule | None = find_rule(rules, day_name)
    if rule is None:
        raise NoScheduleForDayError(day_name)
    return rule


def compile_week(
    rules: Sequence[WorkTimeRule],
    *,
    resolution: DayResolution = DayResolution.FIRST_MATCH,
    strict_breaks: bool = False,
) -> dict[str, CompiledDay]:
    """Compile every weekday covered by the rules; uncovered days are left out."""
    ordered: Sequence[WorkTimeRule] = rules if resolution is DayResolution.FIRST_MATCH else list(reversed(rules))
    week: dict[str, CompiledDay] = {}
    for day_name in WEEKDAY_NAMES:
        rule: WorkTimeRule | None = find_rule(ordered, day_name)
        if rule is not None:
            week[day_name] = compile_day(rule, day_name, strict_breaks=strict_breaks)
    return week
