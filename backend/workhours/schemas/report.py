from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from workhours.core.time_utils import hhmm_to_minutes
from workhours.core.validation import clean_text, parse_int_or_default


class ReportWrite(BaseModel):
    """Payload for creating or replacing a report.

    Nothing here is rejected: numbers coerce to 0, text defaults to "" and a
    missing date means "now". `duration` also accepts "HH:MM".
    """

    date: Any = None
    duration: Any = 0
    study_hours: Any = 0
    observations: Any = ""

    model_config = ConfigDict(extra="ignore")

    @field_validator("duration", mode="before")
    @classmethod
    def _coerce_duration(cls, v):
        if isinstance(v, str) and ":" in v:
            try:
                return hhmm_to_minutes(v)
            except ValueError:
                return 0
        return parse_int_or_default(v)

    @field_validator("study_hours", mode="before")
    @classmethod
    def _coerce_study_hours(cls, v):
        return parse_int_or_default(v)

    @field_validator("observations", mode="before")
    @classmethod
    def _coerce_observations(cls, v):
        return clean_text(v)


class ReportRead(BaseModel):
    """Schema returned to clients when reading a report."""

    id: int
    date: datetime
    duration: int
    duration_hhmm: str  # e.g. "01:05"
    study_hours: int
    observations: str

    model_config = ConfigDict(from_attributes=True)
