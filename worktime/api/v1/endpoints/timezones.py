"""Time zone lookup endpoints."""

from fastapi import APIRouter

from worktime.api.v1.errors import to_http_exception
from worktime.schemas.api import TimeZoneResponse
from worktime.services.errors import WorkTimeError
from worktime.services.timezone import known_time_zones, resolve_time_zone_offset

router: APIRouter = APIRouter()


@router.get("", response_model=list[str])
def list_time_zones() -> list[str]:
    return known_time_zones()


@router.get("/{zone:path}", response_model=TimeZoneResponse)
def get_time_zone(zone: str) -> TimeZoneResponse:
    """Return the fixed offset of a named zone."""
    try:
        return TimeZoneResponse(zone=zone, offset=resolve_time_zone_offset(zone))
    except WorkTimeError as exc:
        raise to_http_exception(exc) from exc
