from typing import Any, Optional

from pydantic import BaseModel, field_validator

from workhours.core.validation import parse_int_or_default


class MonthlyGoalRead(BaseModel):
    monthly_hours: int  # minutes
    formatted: str      # "HH:MM"
    goal_hours: str     # whole hours, "HH:00"


class MonthlyGoalUpsert(BaseModel):
    """Either `monthly_hours` (minutes) or an `hours` + `minutes` pair."""

    monthly_hours: Optional[int] = None
    hours: int = 0
    minutes: int = 0

    @field_validator("monthly_hours", mode="before")
    @classmethod
    def _empty_to_none(cls, v):
        if v in ("", None, "null", "None"):
            return None
        return parse_int_or_default(v)

    @field_validator("hours", "minutes", mode="before")
    @classmethod
    def _coerce(cls, v: Any):
        return parse_int_or_default(v)

    def total_minutes(self) -> int:
        if self.monthly_hours is not None:
            return self.monthly_hours
        return self.hours * 60 + self.minutes
