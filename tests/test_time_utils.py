"""Time string and calendar helper tests."""

from datetime import date, datetime, timedelta, timezone

import pytest

from worktime.services.errors import InvalidArgumentError
from worktime.services.worktime_validator import convert_minutes_to_time, get_time_from_string
from worktime.utils.time import (
    hhmm_range_to_minutes,
    iter_dates,
    to_epoch_seconds,
    utc_offset_minutes,
    weekday_name,
)


def test_get_time_from_string_counts_minutes_since_midnight() -> None:
    assert get_time_from_string("00:00") == 0
    assert get_time_from_string("10:30") == 630
    assert get_time_from_string(" 23:59 ") == 1439


def test_get_time_from_string_reads_time_part_of_datetime_strings() -> None:
    assert get_time_from_string("2021-02-17 10:30") == 630
    assert get_time_from_string("2021-02-17T23:59:00") == 1439


@pytest.mark.parametrize(
    "value",
    ["", None, "24:00", "9:00", "12:60", "noon", "10:305", "10:30junk", "10:00:99", "junk 10:30", "2021-02-17T10:30Z"],
)
def test_get_time_from_string_rejects_malformed_values(value) -> None:
    with pytest.raises(InvalidArgumentError):
        get_time_from_string(value)


def test_convert_minutes_to_time_wraps_whole_days() -> None:
    assert convert_minutes_to_time(50) == "00:50"
    assert convert_minutes_to_time(1200) == "20:00"
    assert convert_minutes_to_time(1500) == "01:00"


def test_hhmm_ranges() -> None:
    assert hhmm_range_to_minutes("12:00-12:10") == (720, 730)
    with pytest.raises(InvalidArgumentError):
        hhmm_range_to_minutes("12:00")


def test_weekday_name_is_lowercase_english() -> None:
    assert weekday_name(date(2024, 4, 1)) == "monday"
    assert weekday_name(date(2021, 2, 17)) == "wednesday"


def test_naive_datetimes_count_as_utc() -> None:
    naive = datetime(2024, 4, 1, 10, 0)

    assert utc_offset_minutes(naive) == 0
    assert to_epoch_seconds(naive) == to_epoch_seconds(naive.replace(tzinfo=timezone.utc))
    assert utc_offset_minutes(datetime(2024, 4, 1, tzinfo=timezone(timedelta(hours=-3)))) == -180


def test_iter_dates_is_inclusive_and_steps_whole_days() -> None:
    days = list(iter_dates(date(2024, 2, 27), date(2024, 3, 1)))

    assert days == [date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]
    assert list(iter_dates(date(2024, 3, 2), date(2024, 3, 1))) == []


def test_iter_dates_accepts_datetimes() -> None:
    days = list(iter_dates(datetime(2024, 4, 1, 0, 0), datetime(2024, 4, 3, 0, 0)))

    assert days == [date(2024, 4, 1), date(2024, 4, 2), date(2024, 4, 3)]
