from pydantic import BaseModel


class BackupValidation(BaseModel):
    valid: bool


class RestoreResult(BaseModel):
    restored_reports: int
