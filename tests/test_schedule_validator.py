"""Schedule containment query tests."""

from datetime import date, datetime, timezone

import pytest

from worktime.schemas.worktime import CompiledInterval
from worktime.services.errors import InvalidArgumentError
from worktime.services.schedule_generator import ScheduleGenerator
from worktime.services.schedule_validator import NotImplementedResult, ScheduleValidator


def test_instant_boundaries_are_inclusive() -> None:
    validator = ScheduleValidator([(100, 200), (300, 400)])

    assert validator.contains_instant(100)
    assert validator.contains_instant(200)
    assert validator.contains_instant(350)
    assert not validator.contains_instant(250)
    assert not validator.contains_instant(401)


def test_duration_must_fit_a_single_interval() -> None:
    validator = ScheduleValidator([(100, 200), (200, 400)])

    assert validator.contains_duration(300, 100)
    assert validator.contains_duration(100, 100)
    assert not validator.contains_duration(150, 100)
    assert not validator.contains_duration(350, 51)


def test_verbose_and_compact_schedules_behave_alike() -> None:
    verbose = ScheduleValidator([CompiledInterval(start=100, stop=200)])
    compact = ScheduleValidator([(100, 200)])

    assert verbose.schedule == compact.schedule
    assert verbose.contains_instant(150) and compact.contains_instant(150)


def test_generated_schedule_answers_datetime_queries() -> None:
    generator = ScheduleGenerator([{"dayOfWeek": "monday", "start": "10:00", "stop": "21:45", "break": "12:00-12:10"}])
    validator = ScheduleValidator(generator.generate_time_intervals(date(2024, 4, 1), date(2024, 4, 1)))

    assert validator.contains_instant(datetime(2024, 4, 1, 10, 0, tzinfo=timezone.utc))
    assert validator.contains_instant(datetime(2024, 4, 1, 12, 0, tzinfo=timezone.utc))
    assert not validator.contains_instant(datetime(2024, 4, 1, 12, 5, tzinfo=timezone.utc))
    assert validator.contains_instant(datetime(2024, 4, 1, 12, 10))
    assert not validator.contains_duration(datetime(2024, 4, 1, 11, 30, tzinfo=timezone.utc), 3600)
    assert validator.contains_duration(datetime(2024, 4, 1, 13, 0, tzinfo=timezone.utc), 3600)


def test_find_day_limit() -> None:
    generator = ScheduleGenerator([{"dayOfWeek": "monday", "start": "10:00", "stop": "21:45", "break": "12:00-12:10"}])
    validator = ScheduleValidator(generator.generate_time_intervals(date(2024, 4, 1), date(2024, 4, 8), compact=True))

    assert validator.find_day_limit("earliest", "UTC") == "2024-04-01"
    assert validator.find_day_limit("latest", "UTC") == "2024-04-08"
    assert validator.find_day_limit("latest", "Pacific/Kiritimati") == "2024-04-09"


def test_find_day_limit_on_empty_schedule() -> None:
    assert ScheduleValidator([]).find_day_limit("earliest", "UTC") is None
    assert ScheduleValidator(None).find_day_limit("latest") is None


def test_find_day_limit_rejects_unknown_mode() -> None:
    with pytest.raises(InvalidArgumentError):
        ScheduleValidator([(100, 200)]).find_day_limit("middle", "UTC")


def test_latest_end_date_is_explicitly_not_implemented() -> None:
    result = ScheduleValidator([(100, 200)]).find_latest_end_date(60)

    assert isinstance(result, NotImplementedResult)
    assert result.operation == "find_latest_end_date"


def test_non_instant_values_are_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        ScheduleValidator([(100, 200)]).contains_instant("2024-04-01")
