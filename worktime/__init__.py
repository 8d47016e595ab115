"""Business work-time restrictions: open-now checks and schedule intervals."""

from worktime.services.errors import (
    InvalidArgumentError,
    NoScheduleForDayError,
    NotWorkingNowError,
    UnknownTimeZoneError,
    WorkTimeError,
)
from worktime.services.memo import MemoizedWorkTimeValidator
from worktime.services.schedule_generator import ScheduleGenerator, compile_schedule
from worktime.services.schedule_validator import ScheduleValidator
from worktime.services.timezone import resolve_time_zone_offset
from worktime.services.worktime_validator import (
    WorkTimeValidator,
    get_current_work_time,
    get_max_order_date,
    get_possible_delivery_order_datetime,
    get_possible_self_service_order_datetime,
    is_work_now,
)

__all__ = [
    "InvalidArgumentError",
    "MemoizedWorkTimeValidator",
    "NoScheduleForDayError",
    "NotWorkingNowError",
    "ScheduleGenerator",
    "ScheduleValidator",
    "UnknownTimeZoneError",
    "WorkTimeError",
    "WorkTimeValidator",
    "compile_schedule",
    "get_current_work_time",
    "get_max_order_date",
    "get_possible_delivery_order_datetime",
    "get_possible_self_service_order_datetime",
    "is_work_now",
    "resolve_time_zone_offset",
]
