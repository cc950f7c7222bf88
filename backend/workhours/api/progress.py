from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from workhours.core.progress import (
    MonthProgress,
    build_share_message,
    compute_month_progress,
    shift_month,
)
from workhours.core.time_utils import local_now
from workhours.schemas.progress import MonthProgressRead
from workhours.services.store import WorkHoursStore, get_store


router = APIRouter(prefix="/progress", tags=["progress"])

# A century either way
MAX_MONTH_OFFSET = 1200


def _month_progress(
    store: WorkHoursStore,
    reference: Optional[date],
    offset: int,
) -> MonthProgress:
    today = local_now(store.tz_name)
    try:
        reference = shift_month(reference or today.date(), offset)
    except ValueError:
        raise HTTPException(status_code=400, detail="Month out of range")
    return compute_month_progress(
        reference=reference,
        today=today,
        sessions=store.list_reports(),
        monthly_minutes=store.get_goal(),
        work_days=store.get_work_days(),
    )


@router.get("", response_model=MonthProgressRead)
def get_progress(
    date: Optional[date] = Query(None, description="Any day of the month; defaults to today"),
    offset: int = Query(
        0,
        ge=-MAX_MONTH_OFFSET,
        le=MAX_MONTH_OFFSET,
        description="Months to move from `date`, e.g. -1 for the previous month",
    ),
    store: WorkHoursStore = Depends(get_store),
):
    return MonthProgressRead.model_validate(_month_progress(store, date, offset))


@router.get("/share", response_class=PlainTextResponse)
def get_share_message(
    date: Optional[date] = Query(None),
    offset: int = Query(0, ge=-MAX_MONTH_OFFSET, le=MAX_MONTH_OFFSET),
    store: WorkHoursStore = Depends(get_store),
):
    progress = _month_progress(store, date, offset)
    return build_share_message(progress, store.get_personal_info().name)
