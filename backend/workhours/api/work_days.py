from fastapi import APIRouter, Depends

from workhours.schemas.work_days import WorkDaysRead, WorkDaysUpdate
from workhours.services.store import WorkHoursStore, get_store


router = APIRouter(prefix="/work-days", tags=["work-days"])


@router.get("", response_model=WorkDaysRead)
def get_work_days(store: WorkHoursStore = Depends(get_store)):
    return WorkDaysRead(days=list(store.get_work_days()))


@router.put("", response_model=WorkDaysRead)
def update_work_days(
    payload: WorkDaysUpdate,
    store: WorkHoursStore = Depends(get_store),
):
    return WorkDaysRead(days=list(store.update_work_days(payload.days)))
