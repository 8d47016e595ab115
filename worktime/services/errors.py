"""Errors raised by the work-time services."""


class WorkTimeError(ValueError):
    """Base class for work-time failures."""


class InvalidArgumentError(WorkTimeError):
    """Raised for a missing or malformed restriction, date or time string."""


class UnknownTimeZoneError(WorkTimeError):
    """Raised when a zone name is not present in the offset table."""

    def __init__(self, zone: str) -> None:
        super().__init__(f"Unknown timezone `{zone}`")
        self.zone = zone


class NoScheduleForDayError(WorkTimeError):
    """Raised when no work-time rule matches the resolved weekday."""

    def __init__(self, day_name: str) -> None:
        super().__init__(f"No work-time rule for {day_name}")
        self.day_name = day_name


class NotWorkingNowError(WorkTimeError):
    """Raised when a fallback order time is requested while the business is open.

    Call sites that treat "already open" as an expected branch catch this one
    separately from the other errors.
    """
