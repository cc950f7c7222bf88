from fastapi import APIRouter, Depends

from workhours.services.store import WorkHoursStore, get_store


router = APIRouter(prefix="/data", tags=["data"])


@router.delete("")
def clear_all_data(store: WorkHoursStore = Depends(get_store)):
    store.clear_all()
    return {"ok": True}
