"""Work-time endpoints used by the ordering front-end."""

from fastapi import APIRouter

from worktime.api.v1.errors import to_http_exception
from worktime.core.config import settings
from worktime.schemas.api import (
    CurrentWorkTimeRequest,
    MaxOrderDateRequest,
    MaxOrderDateResponse,
    OrderTimeRequest,
    OrderTimeResponse,
    WorkNowRequest,
)
from worktime.schemas.worktime import ValidatorResult, WorkTimeRule
from worktime.services.errors import WorkTimeError
from worktime.services.memo import MemoizedWorkTimeValidator

router: APIRouter = APIRouter()
validator: MemoizedWorkTimeValidator = MemoizedWorkTimeValidator(default_zone=settings.default_timezone)


@router.post("/is-work-now", response_model=ValidatorResult)
def is_work_now(payload: WorkNowRequest) -> ValidatorResult:
    """Return whether the business is open at the given (or current) time."""
    try:
        return validator.is_work_now(payload.restrictions, payload.now)
    except WorkTimeError as exc:
        raise to_http_exception(exc) from exc


@router.post("/delivery-time", response_model=OrderTimeResponse)
def delivery_time(payload: OrderTimeRequest) -> OrderTimeResponse:
    """Return the earliest possible courier delivery time."""
    try:
        value: str = validator.get_possible_delivery_order_datetime(
            payload.restrictions, payload.now, raise_if_open=payload.raise_if_open
        )
    except WorkTimeError as exc:
        raise to_http_exception(exc) from exc
    return OrderTimeResponse(order_datetime=value)


@router.post("/self-service-time", response_model=OrderTimeResponse)
def self_service_time(payload: OrderTimeRequest) -> OrderTimeResponse:
    """Return the earliest possible pickup time."""
    try:
        value: str = validator.get_possible_self_service_order_datetime(
            payload.restrictions, payload.now, raise_if_open=payload.raise_if_open
        )
    except WorkTimeError as exc:
        raise to_http_exception(exc) from exc
    return OrderTimeResponse(order_datetime=value)


@router.post("/max-order-date", response_model=MaxOrderDateResponse)
def max_order_date(payload: MaxOrderDateRequest) -> MaxOrderDateResponse:
    try:
        value: str = validator.get_max_order_date(payload.restrictions, payload.now)
    except WorkTimeError as exc:
        raise to_http_exception(exc) from exc
    return MaxOrderDateResponse(max_order_date=value)


@router.post("/current", response_model=WorkTimeRule)
def current_work_time(payload: CurrentWorkTimeRequest) -> WorkTimeRule:
    """Return the rule that applies to the requested day."""
    try:
        return validator.get_current_work_time(payload.restrictions, payload.day)
    except WorkTimeError as exc:
        raise to_http_exception(exc) from exc
