from datetime import datetime

import pytest
from sqlalchemy.exc import OperationalError

from workhours.core.errors import PersistenceError
from workhours.schemas.report import ReportWrite


def test_defaults_are_seeded(store):
    assert store.get_goal() == 0
    info = store.get_personal_info()
    assert (info.name, info.email) == ("", "")
    assert store.get_work_days() == ()


def test_initialize_default_data_is_idempotent(store):
    store.update_monthly_goal(300)
    store.initialize_default_data()
    assert store.get_goal() == 300


def test_report_crud(store):
    created = store.create_report(
        ReportWrite(date="2026-10-05T14:30:00", duration="90", study_hours=2, observations="  notes ")
    )
    assert created.id is not None
    assert created.date == datetime(2026, 10, 5, 14, 30)
    assert (created.duration, created.study_hours, created.observations) == (90, 2, "notes")

    updated = store.update_report(
        created.id, ReportWrite(date="2026-10-06T08:00:00", duration="01:15", study_hours="x")
    )
    assert updated.id == created.id
    assert (updated.duration, updated.study_hours, updated.observations) == (75, 0, "")

    assert store.get_report(created.id).date == datetime(2026, 10, 6, 8, 0)
    assert store.delete_report(created.id) is True
    assert store.get_report(created.id) is None
    assert store.delete_report(created.id) is False
    assert store.update_report(created.id, ReportWrite()) is None


def test_oversized_numbers_are_stored_as_zero(store):
    report = store.create_report(ReportWrite(date="2026-10-01", duration=1e30, study_hours=2**64))
    assert (report.duration, report.study_hours) == (0, 0)

    report = store.create_report(ReportWrite(date="2026-10-01", duration="999999999999999999999:00"))
    assert report.duration == 0

    assert store.update_monthly_goal("1e30") == 0
    assert store.get_goal() == 0


def test_list_reports_newest_first_and_by_range(store):
    for day in (3, 15, 28):
        store.create_report(ReportWrite(date=f"2026-10-{day:02d}T10:00:00", duration=day))
    store.create_report(ReportWrite(date="2026-11-01T00:00:00", duration=1))

    assert [r.duration for r in store.list_reports()] == [1, 28, 15, 3]
    october = store.list_reports(datetime(2026, 10, 1), datetime(2026, 10, 31, 23, 59, 59))
    assert [r.duration for r in october] == [28, 15, 3]


def test_singletons_update_in_place(store):
    assert store.update_monthly_goal("3000") == 3000
    assert store.update_monthly_goal(-20) == 0
    assert store.update_monthly_goal(45 * 60) == 2700
    assert store.get_goal() == 2700

    store.update_personal_info("  Ana Souza ", None)
    info = store.get_personal_info()
    assert (info.name, info.email) == ("Ana Souza", "")


def test_work_days_full_replace_and_filtering(store):
    assert store.update_work_days([5, 1, 9, "3", 1]) == (1, 5)
    assert store.get_work_days() == (1, 5)
    assert store.update_work_days([0, 6]) == (0, 6)
    assert store.get_work_days() == (0, 6)
    assert store.update_work_days([]) == ()
    assert store.get_work_days() == ()


def test_clear_all_wipes_and_reseeds(store):
    store.create_report(ReportWrite(date="2026-10-05", duration=30))
    store.update_monthly_goal(600)
    store.update_personal_info("Ana", "ana@example.com")
    store.update_work_days([1, 2])

    store.clear_all()

    assert store.list_reports() == []
    assert store.get_goal() == 0
    assert store.get_personal_info().name == ""
    assert store.get_work_days() == ()
    from workhours.models.work_day import WorkDay
    assert store.db.query(WorkDay).count() == 7


def test_storage_failures_become_persistence_errors(store, monkeypatch):
    def broken_query(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(store.db, "query", broken_query)
    with pytest.raises(PersistenceError):
        store.list_reports()


def test_seeding_failures_are_swallowed(store, monkeypatch):
    def broken_get(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(store.db, "get", broken_get)
    store.initialize_default_data()
