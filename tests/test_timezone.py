"""Time zone offset resolution tests."""

import re

import pytest

from worktime.services.errors import InvalidArgumentError, UnknownTimeZoneError
from worktime.services.timezone import (
    known_time_zones,
    offset_to_minutes,
    resolve_time_zone_offset,
    time_zone_offset_in_seconds,
)


def test_every_known_zone_resolves_to_an_offset_string() -> None:
    pattern = re.compile(r"^[+-]\d{2}:\d{2}$")

    zones = known_time_zones()

    assert len(zones) > 400
    assert all(pattern.match(resolve_time_zone_offset(zone)) for zone in zones)


def test_offsets_are_fixed_and_ignore_daylight_saving() -> None:
    assert resolve_time_zone_offset("Europe/Moscow") == "+03:00"
    assert resolve_time_zone_offset("Asia/Yekaterinburg") == "+05:00"
    assert resolve_time_zone_offset("America/New_York") == "-05:00"
    assert resolve_time_zone_offset("Asia/Kolkata") == "+05:30"


def test_legacy_aliases_are_utc() -> None:
    assert resolve_time_zone_offset("GMT") == "+00:00"
    assert resolve_time_zone_offset("UTC") == "+00:00"
    assert resolve_time_zone_offset("Factory") == "+00:00"


def test_unknown_zone_raises() -> None:
    with pytest.raises(UnknownTimeZoneError) as exc_info:
        resolve_time_zone_offset("Mars/Olympus_Mons")

    assert exc_info.value.zone == "Mars/Olympus_Mons"


def test_zone_names_are_case_sensitive() -> None:
    with pytest.raises(UnknownTimeZoneError):
        resolve_time_zone_offset("europe/moscow")


def test_empty_zone_falls_back_to_explicit_default() -> None:
    assert resolve_time_zone_offset(None, default_zone="Asia/Tokyo") == "+09:00"
    assert resolve_time_zone_offset("", default_zone="Asia/Tokyo") == "+09:00"


def test_empty_zone_without_default_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        resolve_time_zone_offset(None)


def test_offset_string_is_returned_unchanged() -> None:
    assert resolve_time_zone_offset("-03:30") == "-03:30"


def test_offset_conversions() -> None:
    assert offset_to_minutes("-09:30") == -570
    assert offset_to_minutes("+12:45") == 765
    assert time_zone_offset_in_seconds("Asia/Kolkata") == 19800
    assert time_zone_offset_in_seconds("Etc/GMT+5") == -18000
    assert time_zone_offset_in_seconds("Pacific/Kiritimati") == 50400
