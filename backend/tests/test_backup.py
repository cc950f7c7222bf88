import json
from datetime import datetime, timezone

import pytest

from workhours.core.errors import InvalidBackupError
from workhours.schemas.report import ReportWrite
from workhours.services.backup import build_backup, create_backup, restore_backup, validate_backup


def _fill(store):
    store.update_monthly_goal(2700)
    store.update_personal_info("Ana Souza", "ana@example.com")
    store.update_work_days([1, 3, 5])
    store.create_report(ReportWrite(date="2026-10-01T09:00:00", duration=90, study_hours=1, observations="a"))
    store.create_report(ReportWrite(date="2026-10-02T09:00:00", duration=45, study_hours=0, observations=""))
    store.create_report(ReportWrite(date="2026-09-30T18:00:00", duration=120, study_hours=3, observations="c"))


def _report_fields(store):
    return sorted(
        (r.date, r.duration, r.study_hours, r.observations) for r in store.list_reports()
    )


def test_envelope_shape(store):
    _fill(store)
    now = datetime(2026, 10, 18, 12, 30, 5, 123456, tzinfo=timezone.utc)

    backup = json.loads(create_backup(store, now=now))

    assert backup["version"] == "2.0.0"
    assert backup["timestamp"] == "2026-10-18T12:30:05.123Z"
    data = backup["data"]
    assert data["goals"] == {"monthlyHours": 2700}
    assert data["personalInfo"] == {"name": "Ana Souza", "email": "ana@example.com"}
    assert data["workDays"] == [1, 3, 5]
    assert len(data["reports"]) == 3
    assert set(data["reports"][0]) == {"id", "date", "duration", "studyHours", "observations"}


def test_round_trip_reproduces_data_with_new_ids(store):
    _fill(store)
    before = _report_fields(store)
    old_ids = {r.id for r in store.list_reports()}

    count = restore_backup(store, create_backup(store))

    assert count == 3
    assert store.get_goal() == 2700
    info = store.get_personal_info()
    assert (info.name, info.email) == ("Ana Souza", "ana@example.com")
    assert store.get_work_days() == (1, 3, 5)
    assert _report_fields(store) == before
    assert old_ids.isdisjoint({r.id for r in store.list_reports()})


def test_validate_backup():
    assert validate_backup('{"version": "2.0.0", "timestamp": "t", "data": {}}') is True
    assert validate_backup("not json") is False
    assert validate_backup("[1, 2]") is False
    assert validate_backup('{"timestamp": "t", "data": {}}') is False
    assert validate_backup('{"version": "2.0.0", "data": {}}') is False
    assert validate_backup('{"version": "2.0.0", "timestamp": "t"}') is False
    assert validate_backup('{"version": "", "timestamp": "t", "data": {}}') is False


def test_non_finite_numbers_make_a_backup_invalid():
    for constant in ("Infinity", "-Infinity", "NaN"):
        text = '{"version": "2.0.0", "timestamp": "t", "data": {"goals": {"monthlyHours": ' + constant + "}}}"
        assert validate_backup(text) is False


def test_non_finite_goal_does_not_wipe_data(store):
    _fill(store)
    text = '{"version": "2.0.0", "timestamp": "t", "data": {"goals": {"monthlyHours": Infinity}}}'

    with pytest.raises(InvalidBackupError):
        restore_backup(store, text)

    assert store.get_goal() == 2700
    assert len(store.list_reports()) == 3
    assert store.get_work_days() == (1, 3, 5)


def test_out_of_range_goal_restores_as_zero(store):
    _fill(store)
    # 1e400 parses to float inf; 10**30 does not fit an INTEGER column
    for goal in ("1e400", str(10**30)):
        text = '{"version": "2.0.0", "timestamp": "t", "data": {"goals": {"monthlyHours": ' + goal + "}}}"
        assert restore_backup(store, text) == 0
        assert store.get_goal() == 0


def test_invalid_backup_leaves_data_untouched(store):
    _fill(store)
    with pytest.raises(InvalidBackupError, match="Invalid backup format"):
        restore_backup(store, '{"version": "2.0.0", "data": {}}')
    assert len(store.list_reports()) == 3
    assert store.get_goal() == 2700


def test_restore_skips_missing_or_malformed_sections(store):
    _fill(store)
    payload = {
        "version": "2.0.0",
        "timestamp": "2026-10-18T12:00:00.000Z",
        "data": {
            "goals": {"monthlyHours": "600"},
            "workDays": "1,2",
            "reports": [
                {"date": "2026-10-03T10:00:00", "duration": "abc", "studyHours": 2},
                "not a report",
            ],
        },
    }

    assert restore_backup(store, json.dumps(payload)) == 1
    # Everything else was cleared back to defaults
    assert store.get_goal() == 0
    assert store.get_work_days() == ()
    assert store.get_personal_info().name == ""
    report = store.list_reports()[0]
    assert (report.duration, report.study_hours, report.observations) == (0, 2, "")


def test_restore_legacy_backup(store):
    payload = {
        "version": "1.0.0",
        "timestamp": "2024-01-01T00:00:00.000Z",
        "data": {
            "@RelatorioApp:reports": [
                {"date": "2024-01-05T12:00:00.000Z", "duration": 60, "studyHours": 1, "observations": "old"},
            ],
            "@RelatorioApp:goals": {"monthlyHours": 1200},
            "@RelatorioApp:personalInfo": {"name": "Legacy", "email": ""},
            "@RelatorioApp:workDays": [2, 4],
        },
    }

    assert restore_backup(store, json.dumps(payload)) == 1
    assert store.get_goal() == 1200
    assert store.get_personal_info().name == "Legacy"
    assert store.get_work_days() == (2, 4)
    assert store.list_reports()[0].date == datetime(2024, 1, 5, 12, 0)


def test_build_backup_uses_current_time_by_default(store):
    backup = build_backup(store)
    assert backup["timestamp"].endswith("Z")
    assert backup["data"]["reports"] == []
