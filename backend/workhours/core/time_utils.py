from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def format_duration(total_minutes: int) -> str:
    """
    Convert total minutes (int) -> 'HH:MM'.
    Example: 65 -> '01:05', 600 -> '10:00'
    Hours are not capped at 24.
    """
    hours = total_minutes // 60
    minutes = total_minutes % 60
    return f"{hours:02d}:{minutes:02d}"


def hhmm_to_minutes(hhmm: str) -> int:
    """
    Convert 'HH:MM' -> total minutes (int).
    Example: '01:05' -> 65
    """
    parts = hhmm.strip().split(":")
    if len(parts) != 2:
        raise ValueError("Duration must be in HH:MM format")

    hours, minutes = map(int, parts)
    if hours < 0 or not 0 <= minutes < 60:
        raise ValueError("Duration must be in HH:MM format")
    return hours * 60 + minutes


def format_goal_hours(total_minutes: int) -> str:
    """Render a goal as whole hours, 'HH:00'. Leftover minutes are dropped."""
    return f"{total_minutes // 60:02d}:00"


def _resolve_tz(tz_name: str | None):
    """Return a tzinfo for an IANA name, or None for the system timezone."""
    if not tz_name or tz_name == "local":
        return None
    try:
        return ZoneInfo(tz_name)
    except ZoneInfoNotFoundError:
        return None


def to_local_datetime(dt: datetime, tz_name: str | None = None) -> datetime:
    """Convert a datetime from source tz (assume UTC if naive) to local or given tz.

    - If `tz_name` is 'local' or None: use system local timezone.
    - If `tz_name` is IANA tz name (e.g., 'America/Sao_Paulo'): use that.
    - If `dt` has no tzinfo, assume UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    tz = _resolve_tz(tz_name)
    return dt.astimezone(tz) if tz is not None else dt.astimezone()


def to_local_naive(dt: datetime, tz_name: str | None = None) -> datetime:
    """Local wall-clock time without tzinfo, the form reports are stored in.

    Naive input is already wall-clock time and is returned unchanged.
    """
    if dt.tzinfo is None:
        return dt
    return to_local_datetime(dt, tz_name).replace(tzinfo=None)


def local_now(tz_name: str | None = None) -> datetime:
    return to_local_naive(datetime.now(timezone.utc), tz_name)
