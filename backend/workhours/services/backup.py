"""JSON export/import of everything in the store.

Envelope: {"version", "timestamp", "data"} where data holds reports, goals,
personalInfo and workDays. Restore wipes the store and replays each section;
reports are recreated one by one, so they come back with new ids.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from workhours.core.constants import (
    BACKUP_REQUIRED_KEYS,
    BACKUP_VERSION,
    LEGACY_BACKUP_VERSION,
    LEGACY_STORAGE_KEYS,
)
from workhours.core.errors import BackupError, InvalidBackupError, PersistenceError
from workhours.core.validation import parse_int_or_default
from workhours.schemas.report import ReportWrite
from workhours.services.store import WorkHoursStore

logger = logging.getLogger(__name__)


def _iso_timestamp(now: datetime) -> str:
    # Same shape as JavaScript's Date.toISOString(): UTC, milliseconds, "Z"
    now = now.astimezone(timezone.utc) if now.tzinfo else now
    return now.isoformat(timespec="milliseconds").split("+")[0] + "Z"


def build_backup(store: WorkHoursStore, now: Optional[datetime] = None) -> dict[str, Any]:
    try:
        reports = [
            {
                "id": report.id,
                "date": report.date.isoformat(),
                "duration": report.duration,
                "studyHours": report.study_hours,
                "observations": report.observations,
            }
            for report in store.list_reports()
        ]
        personal_info = store.get_personal_info()
        data = {
            "reports": reports,
            "goals": {"monthlyHours": store.get_goal()},
            "personalInfo": {"name": personal_info.name, "email": personal_info.email},
            "workDays": list(store.get_work_days()),
        }
    except PersistenceError as exc:
        logger.error("Error creating backup: %s", exc)
        raise BackupError("Could not create the data backup") from exc

    return {
        "version": BACKUP_VERSION,
        "timestamp": _iso_timestamp(now or datetime.now(timezone.utc)),
        "data": data,
    }


def create_backup(store: WorkHoursStore, now: Optional[datetime] = None) -> str:
    return json.dumps(build_backup(store, now), ensure_ascii=False)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number {name} is not valid JSON")


def _parse_envelope(backup_text: str | bytes) -> Optional[dict[str, Any]]:
    try:
        backup = json.loads(backup_text, parse_constant=_reject_constant)
    except (TypeError, ValueError):
        return None
    if not isinstance(backup, dict):
        return None
    # An empty data object still counts as present; null, "" and 0 do not.
    if any(backup.get(key) in (None, "", 0) for key in BACKUP_REQUIRED_KEYS):
        return None
    return backup


def validate_backup(backup_text: str | bytes) -> bool:
    return _parse_envelope(backup_text) is not None


def _sections(version: str, data: dict[str, Any]) -> dict[str, Any]:
    """Map the data section to current keys; 1.0.0 files use storage keys."""
    if version != LEGACY_BACKUP_VERSION:
        return data
    return {
        key: data.get(legacy_key, data.get(key))
        for key, legacy_key in LEGACY_STORAGE_KEYS.items()
    }


def _goal_minutes(version: str, goals: Any) -> Optional[int]:
    if not isinstance(goals, dict):
        return None
    value = goals.get("monthlyHours")
    if version == LEGACY_BACKUP_VERSION:
        # Old backups only carried a goal once one was set.
        return value if value else None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return parse_int_or_default(value)
    return None


def restore_backup(store: WorkHoursStore, backup_text: str | bytes) -> int:
    """Replace the store contents with a backup. Returns the report count.

    Writes are committed one at a time; a failure part way through leaves
    whatever was already restored in place.
    """
    backup = _parse_envelope(backup_text)
    if backup is None:
        raise InvalidBackupError()

    data = backup["data"]
    if not isinstance(data, dict):
        raise InvalidBackupError()

    version = str(backup["version"])
    sections = _sections(version, data)
    restored = 0
    try:
        store.clear_all()

        personal_info = sections.get("personalInfo")
        if isinstance(personal_info, dict):
            store.update_personal_info(personal_info.get("name"), personal_info.get("email"))

        goal = _goal_minutes(version, sections.get("goals"))
        if goal is not None:
            store.update_monthly_goal(goal)

        work_days = sections.get("workDays")
        if isinstance(work_days, list):
            store.update_work_days(work_days)

        reports = sections.get("reports")
        if isinstance(reports, list):
            for report in reports:
                if not isinstance(report, dict):
                    continue
                store.create_report(
                    ReportWrite(
                        date=report.get("date"),
                        duration=report.get("duration"),
                        study_hours=report.get("studyHours"),
                        observations=report.get("observations"),
                    )
                )
                restored += 1
    except PersistenceError as exc:
        logger.error("Error restoring backup after %d reports: %s", restored, exc)
        raise BackupError("Could not restore the backup") from exc

    logger.info("Restored backup version %s with %d reports", version, restored)
    return restored
