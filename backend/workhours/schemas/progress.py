from datetime import datetime

from pydantic import BaseModel, ConfigDict


class MonthProgressRead(BaseModel):
    """Progress figures for one calendar month."""

    month_start: datetime
    month_end: datetime
    total_minutes: int
    total_hours: str  # "HH:MM"
    total_study_count: int
    monthly_goal_minutes: int
    monthly_goal: str
    remaining_working_days: int
    daily_goal: str
    remaining_hours: str
    goal_met: bool

    model_config = ConfigDict(from_attributes=True)
