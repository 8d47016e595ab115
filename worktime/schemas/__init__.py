"""Schema exports."""

from worktime.schemas.worktime import (
    CompiledInterval,
    Restrictions,
    RestrictionsOrder,
    Schedule,
    ValidatorResult,
    WorkTimeBase,
    WorkTimeRule,
)

__all__ = [
    "CompiledInterval",
    "Restrictions",
    "RestrictionsOrder",
    "Schedule",
    "ValidatorResult",
    "WorkTimeBase",
    "WorkTimeRule",
]
