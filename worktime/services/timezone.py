"""Named time zone to fixed UTC offset resolution."""

from __future__ import annotations

import re

from worktime.services.errors import InvalidArgumentError, UnknownTimeZoneError
from worktime.utils.tz_table import TIME_ZONE_OFFSETS

OFFSET_RE = re.compile(r"^[+-]\d{2}:\d{2}$")


def resolve_time_zone_offset(zone_name: str | None = None, *, default_zone: str | None = None) -> str:
    """Return the fixed ``±HH:MM`` offset of a named zone.

    An empty name falls back to ``default_zone``. A value that already looks
    like an offset is returned unchanged.
    """
    zone: str | None = zone_name or default_zone
    if not zone:
        raise InvalidArgumentError("Time zone name is required when no default zone is configured")

    if OFFSET_RE.match(zone):
        return zone

    offset: str | None = TIME_ZONE_OFFSETS.get(zone)
    if offset is None:
        raise UnknownTimeZoneError(zone)
    return offset


def offset_to_minutes(offset: str) -> int:
    """Convert a ``±HH:MM`` offset to signed minutes."""
    if not OFFSET_RE.match(offset):
        raise InvalidArgumentError(f"`{offset}` is not a ±HH:MM offset")
    hours, minutes = offset[1:].split(":")
    total: int = int(hours) * 60 + int(minutes)
    return -total if offset.startswith("-") else total


def time_zone_offset_in_minutes(zone_name: str | None = None, *, default_zone: str | None = None) -> int:
    return offset_to_minutes(resolve_time_zone_offset(zone_name, default_zone=default_zone))


def time_zone_offset_in_seconds(zone_name: str | None = None, *, default_zone: str | None = None) -> int:
    return time_zone_offset_in_minutes(zone_name, default_zone=default_zone) * 60


def known_time_zones() -> list[str]:
    """Return every zone name the resolver recognises."""
    return list(TIME_ZONE_OFFSETS)
