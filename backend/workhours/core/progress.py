"""Monthly goal and progress computation.

Everything here is a pure function of its arguments: callers load reports,
the goal and the work days from the store and pass them in. Reference dates
select a calendar month; day-of-month and time only matter for "today".
"""

import calendar
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Any

from workhours.core.constants import ZERO_DURATION
from workhours.core.time_utils import format_duration, format_goal_hours, to_local_naive
from workhours.core.validation import parse_int_or_default


@dataclass(frozen=True, slots=True)
class MonthTotals:
    total_minutes: int
    total_study_count: int


@dataclass(frozen=True, slots=True)
class MonthProgress:
    month_start: datetime
    month_end: datetime
    total_minutes: int
    total_hours: str
    total_study_count: int
    monthly_goal_minutes: int
    monthly_goal: str
    remaining_working_days: int
    daily_goal: str
    remaining_hours: str
    goal_met: bool


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def sunday_weekday(value: date) -> int:
    """Weekday index with Sunday = 0 ... Saturday = 6."""
    return (value.weekday() + 1) % 7


def get_month_range(reference: date | datetime) -> tuple[datetime, datetime]:
    """First and last instant of the calendar month containing *reference*."""
    tzinfo = reference.tzinfo if isinstance(reference, datetime) else None
    last_day = calendar.monthrange(reference.year, reference.month)[1]
    start = datetime(reference.year, reference.month, 1, tzinfo=tzinfo)
    end = datetime.combine(
        date(reference.year, reference.month, last_day), time.max, tzinfo=tzinfo
    )
    return start, end


def is_date_in_range(value: date | datetime, start: datetime, end: datetime) -> bool:
    """Inclusive on both bounds."""
    return start <= _as_datetime(value) <= end


def shift_month(reference: date | datetime, months: int) -> date:
    """Move the month cursor by *months*, clamping the day to the target month."""
    index = reference.year * 12 + (reference.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(reference.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _field(session: Any, *names: str) -> Any:
    for name in names:
        if isinstance(session, Mapping):
            if name in session:
                return session[name]
        elif hasattr(session, name):
            return getattr(session, name)
    return None


def _session_datetime(session: Any, like: datetime) -> datetime | None:
    value = _field(session, "date")
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    if not isinstance(value, date):
        return None

    value = _as_datetime(value)
    # Align awareness with the range bounds so comparisons are defined.
    if like.tzinfo is None and value.tzinfo is not None:
        return to_local_naive(value)
    if like.tzinfo is not None and value.tzinfo is None:
        return value.replace(tzinfo=like.tzinfo)
    return value


def aggregate_month(sessions: Iterable[Any], start: datetime, end: datetime) -> MonthTotals:
    """Sum duration and study count of the sessions dated within [start, end]."""
    total_minutes = 0
    total_study_count = 0
    for session in sessions:
        when = _session_datetime(session, start)
        if when is None or not is_date_in_range(when, start, end):
            continue
        total_minutes += parse_int_or_default(_field(session, "duration"))
        total_study_count += parse_int_or_default(_field(session, "study_hours", "studyHours"))
    return MonthTotals(total_minutes=total_minutes, total_study_count=total_study_count)


def get_remaining_working_days(from_date: date | datetime, work_days: Iterable[int]) -> int:
    """Count working days from *from_date* (inclusive) to the end of its month."""
    selected = frozenset(work_days)
    if not selected:
        return 0

    first = from_date.date() if isinstance(from_date, datetime) else from_date
    last_day = calendar.monthrange(first.year, first.month)[1]
    return sum(
        1
        for offset in range(last_day - first.day + 1)
        if sunday_weekday(first + timedelta(days=offset)) in selected
    )


def _pacing_anchor(reference: date | datetime, today: date | datetime) -> date | datetime:
    if (reference.year, reference.month) == (today.year, today.month):
        return today
    return date(reference.year, reference.month, 1)


def calculate_daily_goal(
    monthly_minutes: int,
    total_logged: int,
    reference: date | datetime,
    today: date | datetime,
    work_days: Iterable[int],
) -> str:
    """Minutes needed per remaining working day to reach the goal, rounded up."""
    if monthly_minutes == 0 or total_logged >= monthly_minutes:
        return ZERO_DURATION

    remaining = monthly_minutes - total_logged
    working_days = get_remaining_working_days(_pacing_anchor(reference, today), work_days)
    if working_days == 0:
        return ZERO_DURATION

    return format_duration(math.ceil(remaining / working_days))


def calculate_remaining_hours(monthly_minutes: int, total_logged: int) -> str:
    if monthly_minutes == 0:
        return ZERO_DURATION
    return format_duration(max(0, monthly_minutes - total_logged))


def compute_month_progress(
    reference: date | datetime,
    today: date | datetime,
    sessions: Iterable[Any],
    monthly_minutes: int,
    work_days: Iterable[int],
) -> MonthProgress:
    work_days = tuple(work_days)
    start, end = get_month_range(reference)
    totals = aggregate_month(sessions, start, end)
    return MonthProgress(
        month_start=start,
        month_end=end,
        total_minutes=totals.total_minutes,
        total_hours=format_duration(totals.total_minutes),
        total_study_count=totals.total_study_count,
        monthly_goal_minutes=monthly_minutes,
        monthly_goal=format_duration(monthly_minutes),
        remaining_working_days=get_remaining_working_days(
            _pacing_anchor(reference, today), work_days
        ),
        daily_goal=calculate_daily_goal(
            monthly_minutes, totals.total_minutes, reference, today, work_days
        ),
        remaining_hours=calculate_remaining_hours(monthly_minutes, totals.total_minutes),
        goal_met=monthly_minutes > 0 and totals.total_minutes >= monthly_minutes,
    )


def build_share_message(progress: MonthProgress, personal_name: str = "") -> str:
    """Plain-text monthly summary meant to be shared from the client."""
    title = f"Activity Report - {calendar.month_name[progress.month_start.month]}/{progress.month_start.year}"
    lines = [title, ""]
    if personal_name:
        lines += [personal_name, ""]

    lines += [
        "Month summary:",
        f"Total hours: {progress.total_hours}",
        f"Studies: {progress.total_study_count}",
    ]
    if progress.monthly_goal_minutes > 0:
        lines += [
            f"Monthly goal: {format_goal_hours(progress.monthly_goal_minutes)}",
            f"Remaining: {progress.remaining_hours}",
        ]
    return "\n".join(lines)
