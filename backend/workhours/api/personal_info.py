from fastapi import APIRouter, Depends

from workhours.schemas.personal_info import PersonalInfoRead, PersonalInfoUpsert
from workhours.services.store import WorkHoursStore, get_store


router = APIRouter(prefix="/personal-info", tags=["personal-info"])


@router.get("", response_model=PersonalInfoRead)
def get_personal_info(store: WorkHoursStore = Depends(get_store)):
    return store.get_personal_info()


@router.put("", response_model=PersonalInfoRead)
def update_personal_info(
    payload: PersonalInfoUpsert,
    store: WorkHoursStore = Depends(get_store),
):
    return store.update_personal_info(payload.name, payload.email)
