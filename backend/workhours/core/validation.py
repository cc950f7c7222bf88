"""Input coercion applied wherever user data enters the store.

User input is never rejected here: numbers fall back to a default, text
falls back to an empty string, and work days outside the week are dropped.
"""

import logging
import math
from datetime import date, datetime, time
from typing import Any, Iterable

from workhours.core.constants import ALL_WEEKDAYS, MAX_STORED_INT
from workhours.core.time_utils import local_now, to_local_naive

logger = logging.getLogger(__name__)


def parse_int_or_default(
    value: Any,
    default: int = 0,
    minimum: int | None = 0,
    maximum: int | None = MAX_STORED_INT,
) -> int:
    """Coerce *value* to an int, or return *default*.

    Floats and numeric strings are truncated toward zero. Booleans, None,
    NaN/inf, unparseable text and values outside [*minimum*, *maximum*]
    give *default*. The default maximum is the largest storable INTEGER.
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, int):
        parsed = value
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return default
        if not math.isfinite(number):
            return default
        parsed = int(number)

    if minimum is not None and parsed < minimum:
        return default
    if maximum is not None and parsed > maximum:
        return default
    return parsed


def clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def normalize_work_days(values: Iterable[Any] | None) -> tuple[int, ...]:
    """Return the selected weekday indices as a sorted, de-duplicated tuple."""
    if values is None:
        return ()
    return tuple(
        sorted(
            {
                day
                for day in values
                if isinstance(day, int) and not isinstance(day, bool) and day in ALL_WEEKDAYS
            }
        )
    )


def parse_report_date(value: Any, tz_name: str | None = None) -> datetime:
    """Normalize a report date to a naive local datetime.

    Accepts datetimes, dates and ISO-8601 strings (a trailing 'Z' included).
    Missing or unparseable values fall back to the current local time.
    """
    if isinstance(value, datetime):
        return to_local_naive(value, tz_name)
    if isinstance(value, date):
        return datetime.combine(value, time.min)

    text = clean_text(value)
    if not text:
        return local_now(tz_name)

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        logger.warning("Unreadable report date %r, using current time", text)
        return local_now(tz_name)
    return to_local_naive(parsed, tz_name)
