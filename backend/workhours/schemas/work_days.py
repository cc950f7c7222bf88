from typing import Any

from pydantic import BaseModel, field_validator

from workhours.core.validation import normalize_work_days


class WorkDaysRead(BaseModel):
    days: list[int]  # 0 = Sunday ... 6 = Saturday


class WorkDaysUpdate(BaseModel):
    days: list[int] = []

    @field_validator("days", mode="before")
    @classmethod
    def _filter_days(cls, v: Any):
        if not isinstance(v, (list, tuple, set, frozenset)):
            return []
        return list(normalize_work_days(v))
