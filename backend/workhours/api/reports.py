from datetime import date, datetime, time
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from workhours.core.progress import get_month_range
from workhours.core.time_utils import format_duration
from workhours.models.report import Report
from workhours.schemas.report import ReportRead, ReportWrite
from workhours.services.store import WorkHoursStore, get_store

router = APIRouter(prefix="/reports", tags=["reports"])


def to_read(report: Report) -> ReportRead:
    return ReportRead(
        id=report.id,
        date=report.date,
        duration=report.duration,
        duration_hhmm=format_duration(report.duration),
        study_hours=report.study_hours,
        observations=report.observations,
    )


@router.post("/", response_model=ReportRead)
def create_report(payload: ReportWrite, store: WorkHoursStore = Depends(get_store)):
    return to_read(store.create_report(payload))


@router.get("/", response_model=list[ReportRead])
def list_reports(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    month: Optional[date] = Query(None),
    store: WorkHoursStore = Depends(get_store),
):
    """
    List reports, most recent first.

    `month` takes any day of the month to show and wins over the
    start_date/end_date pair:
      GET /reports?month=2026-10-01
      GET /reports?start_date=2026-10-01&end_date=2026-10-15
    """
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    if month is not None:
        start, end = get_month_range(month)
    else:
        if start_date is not None:
            start = datetime.combine(start_date, time.min)
        if end_date is not None:
            end = datetime.combine(end_date, time.max)

    return [to_read(report) for report in store.list_reports(start, end)]


@router.get("/{report_id}", response_model=ReportRead)
def get_report(report_id: int, store: WorkHoursStore = Depends(get_store)):
    report = store.get_report(report_id)
    if report is None:
        raise HTTPException(status_code=404, detail="Report not found")
    return to_read(report)


@router.put("/{report_id}", response_model=ReportRead)
def update_report(
    report_id: int,
    payload: ReportWrite,
    store: WorkHoursStore = Depends(get_store),
):
    report = store.update_report(report_id, payload)
    if report is None:
        raise HTTPException(status_code=404, detail="Report not found")
    return to_read(report)


@router.delete("/{report_id}")
def delete_report(report_id: int, store: WorkHoursStore = Depends(get_store)):
    if not store.delete_report(report_id):
        raise HTTPException(status_code=404, detail="Report not found")
    return {"ok": True}
