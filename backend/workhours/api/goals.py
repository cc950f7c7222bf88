from fastapi import APIRouter, Depends

from workhours.core.time_utils import format_duration, format_goal_hours
from workhours.schemas.goal import MonthlyGoalRead, MonthlyGoalUpsert
from workhours.services.store import WorkHoursStore, get_store


router = APIRouter(prefix="/goals", tags=["goals"])


def _goal_read(minutes: int) -> MonthlyGoalRead:
    return MonthlyGoalRead(
        monthly_hours=minutes,
        formatted=format_duration(minutes),
        goal_hours=format_goal_hours(minutes),
    )


@router.get("/monthly", response_model=MonthlyGoalRead)
def get_monthly_goal(store: WorkHoursStore = Depends(get_store)):
    return _goal_read(store.get_goal())


@router.put("/monthly", response_model=MonthlyGoalRead)
def update_monthly_goal(
    payload: MonthlyGoalUpsert,
    store: WorkHoursStore = Depends(get_store),
):
    return _goal_read(store.update_monthly_goal(payload.total_minutes()))
