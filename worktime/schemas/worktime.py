"""Work-time restriction schemas."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from worktime.utils.time import hhmm_range_to_minutes, hhmm_to_minutes

ALL_DAYS: str = "all"
NO_BREAK: str = "00:00-00:00"


class WorkTimeBase(BaseModel):
    """Opening window of one day: start, stop and an optional lunch break."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    start: str
    stop: str
    break_: str | None = Field(default=None, alias="break")

    @field_validator("start", "stop")
    @classmethod
    def _check_hhmm(cls, value: str) -> str:
        hhmm_to_minutes(value)
        return value.strip()

    @field_validator("break_")
    @classmethod
    def _check_break(cls, value: str | None) -> str | None:
        if value is None:
            return None
        hhmm_range_to_minutes(value)
        return value.strip()

    @model_validator(mode="after")
    def _check_order(self) -> "WorkTimeBase":
        if hhmm_to_minutes(self.start) >= hhmm_to_minutes(self.stop):
            raise ValueError(f"start {self.start} must be earlier than stop {self.stop}")
        return self

    @property
    def start_minutes(self) -> int:
        return hhmm_to_minutes(self.start)

    @property
    def stop_minutes(self) -> int:
        return hhmm_to_minutes(self.stop)


class WorkTimeRule(WorkTimeBase):
    """Weekly rule applied to one weekday, several weekdays or all days."""

    day_of_week: str | list[str] = Field(alias="dayOfWeek")
    self_service: WorkTimeBase | None = Field(default=None, alias="selfService")

    def matches(self, day_name: str) -> bool:
        """Return True when the rule applies to the given English weekday name.

        The ``all`` wildcard is compared literally; day names ignore case.
        """
        if self.day_of_week == ALL_DAYS:
            return True
        days: list[str] = [self.day_of_week] if isinstance(self.day_of_week, str) else self.day_of_week
        return day_name.lower() in {day.lower() for day in days}

    def with_self_service(self) -> "WorkTimeRule":
        """Return a copy whose start/stop/break come from the self-service override."""
        if self.self_service is None:
            return self
        data: dict = self.model_dump(by_alias=True)
        data.update(self.self_service.model_dump(by_alias=True, exclude_none=True))
        return WorkTimeRule.model_validate(data)


class Restrictions(BaseModel):
    """Business timezone and weekly work-time rules."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timezone: str | None = None
    worktime: list[WorkTimeRule] = Field(validation_alias=AliasChoices("worktime", "workTime"))


class RestrictionsOrder(Restrictions):
    """Restrictions extended with ordering limits."""

    min_delivery_time_in_minutes: int = Field(
        alias="minDeliveryTimeInMinutes",
        validation_alias=AliasChoices("minDeliveryTimeInMinutes", "minDeliveryTime", "min_delivery_time_in_minutes"),
        ge=0,
    )
    possible_to_order_in_minutes: int = Field(
        alias="possibleToOrderInMinutes",
        validation_alias=AliasChoices(
            "possibleToOrderInMinutes", "periodPossibleForOrder", "possible_to_order_in_minutes"
        ),
        ge=0,
    )


class ValidatorResult(BaseModel):
    """Outcome of an "is it open now" check, with the minute figures it used."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    work_now: bool = Field(alias="workNow")
    is_new_day: bool | None = Field(default=None, alias="isNewDay")
    current_time: int | None = Field(default=None, alias="currentTime")
    current_day_start_time: int | None = Field(default=None, alias="curentDayStartTime")
    current_day_stop_time: int | None = Field(default=None, alias="curentDayStopTime")


class CompiledInterval(BaseModel):
    """Open interval in epoch seconds, already shifted by the zone offset."""

    model_config = ConfigDict(frozen=True)

    start: int
    stop: int

    def as_pair(self) -> tuple[int, int]:
        return self.start, self.stop


Schedule = list[tuple[int, int]]
