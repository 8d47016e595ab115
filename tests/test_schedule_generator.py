"""Schedule interval generation tests."""

from datetime import date, datetime

import pytest

from worktime.schemas.worktime import CompiledInterval
from worktime.services.compiled_day import DayResolution
from worktime.services.errors import InvalidArgumentError
from worktime.services.schedule_generator import ScheduleGenerator, compile_schedule, to_compact, to_verbose
from worktime.services.timezone import time_zone_offset_in_seconds

WEEK_RULES: list[dict] = [
    {
        "dayOfWeek": ["monday", "tuesday", "wednesday", "thursday", "sunday"],
        "start": "10:00",
        "stop": "21:45",
        "break": "12:00-12:10",
    },
    {
        "dayOfWeek": ["friday", "saturday"],
        "start": "10:00",
        "stop": "21:45",
        "break": "12:00-13:00",
    },
]

# 2024-04-01 00:00 UTC, a Monday.
APRIL_FIRST: int = 1711929600


def test_single_monday_is_split_around_the_break() -> None:
    generator = compile_schedule([{"dayOfWeek": "Monday", "start": "10:00", "stop": "21:45", "break": "12:00-12:10"}])

    intervals = generator.generate_time_intervals(date(2024, 4, 1), date(2024, 4, 1))

    assert intervals == [
        CompiledInterval(start=APRIL_FIRST + 10 * 3600, stop=APRIL_FIRST + 12 * 3600),
        CompiledInterval(start=APRIL_FIRST + 12 * 3600 + 600, stop=APRIL_FIRST + 21 * 3600 + 45 * 60),
    ]
    first, second = intervals
    assert first.stop <= second.start


def test_week_produces_two_intervals_per_working_day() -> None:
    generator = ScheduleGenerator(WEEK_RULES)

    intervals = generator.generate_time_intervals(date(2024, 4, 1), date(2024, 4, 8), "Etc/GMT+5")

    assert len(intervals) == 16
    friday_morning, friday_afternoon = intervals[8], intervals[9]
    assert friday_afternoon.start - friday_morning.stop == 3600


def test_compact_form_is_projection_of_verbose_form() -> None:
    generator = ScheduleGenerator(WEEK_RULES)

    compact = generator.generate_time_intervals(date(2024, 4, 1), date(2024, 4, 8), "Etc/GMT+5", True)
    verbose = generator.generate_time_intervals(date(2024, 4, 1), date(2024, 4, 8), "Etc/GMT+5", False)

    assert compact == [(interval.start, interval.stop) for interval in verbose]
    assert to_compact(verbose) == compact
    assert to_verbose(compact) == verbose


def test_intervals_are_shifted_by_zone_offset() -> None:
    generator = ScheduleGenerator(WEEK_RULES)
    offset = time_zone_offset_in_seconds("Etc/GMT+5")

    shifted = generator.generate_time_intervals(date(2024, 4, 1), date(2024, 4, 8), "Etc/GMT+5")
    utc = generator.generate_time_intervals(date(2024, 4, 1), date(2024, 4, 8), "Etc/GMT+0")

    assert offset == -18000
    for zoned, plain in zip(shifted, utc):
        assert zoned.start - plain.start == offset
        assert zoned.stop - plain.stop == offset


def test_default_zone_is_utc() -> None:
    generator = ScheduleGenerator(WEEK_RULES)

    assert generator.generate_time_intervals(date(2024, 4, 1), date(2024, 4, 2)) == (
        generator.generate_time_intervals(date(2024, 4, 1), date(2024, 4, 2), "Etc/GMT+0")
    )


def test_generation_is_repeatable() -> None:
    generator = ScheduleGenerator(WEEK_RULES)

    first = generator.generate_time_intervals(date(2024, 4, 1), date(2024, 4, 30), "Europe/Moscow", True)
    second = ScheduleGenerator(WEEK_RULES).generate_time_intervals(
        date(2024, 4, 1), date(2024, 4, 30), "Europe/Moscow", True
    )

    assert first == second


def test_range_without_working_days_is_empty() -> None:
    generator = ScheduleGenerator([{"dayOfWeek": "sunday", "start": "10:00", "stop": "18:00"}])

    assert generator.generate_time_intervals(date(2024, 4, 1), date(2024, 4, 6)) == []


def test_datetime_bounds_are_walked_by_whole_days() -> None:
    generator = ScheduleGenerator([{"dayOfWeek": "all", "start": "10:00", "stop": "18:00"}])

    intervals = generator.generate_time_intervals(datetime(2024, 4, 1, 9, 0), datetime(2024, 4, 2, 8, 0), compact=True)

    assert intervals == [(APRIL_FIRST + 36000, APRIL_FIRST + 64800)]


def test_internal_maps_are_in_seconds_and_skip_the_no_break_sentinel() -> None:
    generator = ScheduleGenerator(
        [
            {"dayOfWeek": "monday", "start": "10:00", "stop": "21:45", "break": "12:00-12:10"},
            {"dayOfWeek": "tuesday", "start": "09:00", "stop": "18:00", "break": "00:00-00:00"},
        ]
    )

    assert generator.days == {
        "monday": {"start": 36000, "stop": 78300},
        "tuesday": {"start": 32400, "stop": 64800},
    }
    assert generator.breaks == {"monday": {"start": 43200, "stop": 43800}}


def test_reversed_break_is_ignored_by_default() -> None:
    generator = ScheduleGenerator([{"dayOfWeek": "monday", "start": "10:00", "stop": "18:00", "break": "13:00-12:00"}])

    intervals = generator.generate_time_intervals(date(2024, 4, 1), date(2024, 4, 1), compact=True)

    assert intervals == [(APRIL_FIRST + 36000, APRIL_FIRST + 64800)]


def test_reversed_break_is_rejected_in_strict_mode() -> None:
    with pytest.raises(InvalidArgumentError):
        ScheduleGenerator(
            [{"dayOfWeek": "monday", "start": "10:00", "stop": "18:00", "break": "13:00-13:00"}],
            strict_breaks=True,
        )


def test_first_declared_rule_wins_by_default() -> None:
    rules = [
        {"dayOfWeek": "all", "start": "10:00", "stop": "20:00"},
        {"dayOfWeek": "monday", "start": "12:00", "stop": "18:00"},
    ]

    first_match = ScheduleGenerator(rules)
    last_write = ScheduleGenerator(rules, resolution=DayResolution.LAST_WRITE)

    assert first_match.days["monday"] == {"start": 36000, "stop": 72000}
    assert last_write.days["monday"] == {"start": 43200, "stop": 64800}
    assert last_write.days["tuesday"] == {"start": 36000, "stop": 72000}


def test_wildcard_covers_every_day() -> None:
    generator = ScheduleGenerator([{"dayOfWeek": "all", "start": "10:00", "stop": "20:00"}])

    assert sorted(generator.days) == sorted(
        ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
    )


def test_malformed_rules_are_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        ScheduleGenerator([{"dayOfWeek": "monday", "start": "10:00"}])
    with pytest.raises(InvalidArgumentError):
        ScheduleGenerator([{"dayOfWeek": "monday", "start": "20:00", "stop": "10:00"}])
    with pytest.raises(InvalidArgumentError):
        ScheduleGenerator([{"dayOfWeek": "monday", "start": "10:00am", "stop": "18:007", "break": "12:00x-13:00y"}])
    with pytest.raises(InvalidArgumentError):
        ScheduleGenerator([{"dayOfWeek": "monday", "start": "10:00", "stop": "18:00", "break": "12:00-13:00y"}])
