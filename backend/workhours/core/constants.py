"""Shared application constants.

Centralizes values used by the store, the progress engine and the backup
format so we can document and adjust them in one place.
"""

# Weekday indices use the Sunday-first convention: 0 = Sunday ... 6 = Saturday
ALL_WEEKDAYS = (0, 1, 2, 3, 4, 5, 6)

# Fixed primary key of the single-row tables (goals, personal_info)
SINGLETON_ID = 1

# Rendered when there is no goal, the goal is met, or no working day remains
ZERO_DURATION = "00:00"

# Largest value an INTEGER column can hold (signed 64-bit)
MAX_STORED_INT = 2**63 - 1

# Backup envelope
BACKUP_VERSION = "2.0.0"
LEGACY_BACKUP_VERSION = "1.0.0"
BACKUP_REQUIRED_KEYS = ("version", "timestamp", "data")

# Section keys used by 1.0.0 backups (exported from the old key/value storage)
LEGACY_STORAGE_KEYS = {
    "reports": "@RelatorioApp:reports",
    "goals": "@RelatorioApp:goals",
    "personalInfo": "@RelatorioApp:personalInfo",
    "workDays": "@RelatorioApp:workDays",
}
