from fastapi import APIRouter, Body, Depends

from workhours.schemas.backup import BackupValidation, RestoreResult
from workhours.services.backup import build_backup, restore_backup, validate_backup
from workhours.services.store import WorkHoursStore, get_store


router = APIRouter(prefix="/backup", tags=["backup"])


@router.get("")
def export_backup(store: WorkHoursStore = Depends(get_store)):
    return build_backup(store)


# Bodies are taken as raw text so malformed JSON reaches the validator
# instead of being rejected by request parsing.
@router.post("/validate", response_model=BackupValidation)
def check_backup(body: str = Body(..., media_type="text/plain")):
    return BackupValidation(valid=validate_backup(body))


@router.post("/restore", response_model=RestoreResult)
def restore(
    body: str = Body(..., media_type="text/plain"),
    store: WorkHoursStore = Depends(get_store),
):
    restored = restore_backup(store, body)
    return RestoreResult(restored_reports=restored)
