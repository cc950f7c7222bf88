class WorkHoursError(Exception):
    """Base class for errors surfaced to API clients as a message."""


class PersistenceError(WorkHoursError):
    """The local store could not complete an operation."""


class BackupError(WorkHoursError):
    """A backup could not be created or restored."""


class InvalidBackupError(BackupError):
    def __init__(self, message: str = "Invalid backup format") -> None:
        super().__init__(message)
