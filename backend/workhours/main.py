import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from workhours.api.reports import router as reports_router
from workhours.api.goals import router as goals_router
from workhours.api.personal_info import router as personal_info_router
from workhours.api.work_days import router as work_days_router
from workhours.api.progress import router as progress_router
from workhours.api.backup import router as backup_router
from workhours.api.data import router as data_router
from workhours.core.config import settings
from workhours.core.errors import BackupError, InvalidBackupError, PersistenceError
from workhours.db import Base, SessionLocal, engine
from workhours.models.report import Report  # noqa: F401  (import ensures table is registered)
from workhours.models.monthly_goal import MonthlyGoal  # noqa: F401
from workhours.models.personal_info import PersonalInfo  # noqa: F401
from workhours.models.work_day import WorkDay  # noqa: F401
from workhours.services.store import WorkHoursStore


logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Work Hours")

# Allow CORS for local frontend
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def init_db() -> None:
    """Create tables and seed the default goal, personal info and weekdays."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        WorkHoursStore(db).initialize_default_data()
    finally:
        db.close()
    logger.info("Database ready (%s)", engine.url.render_as_string(hide_password=True))


# Create DB tables on startup
init_db()


@app.exception_handler(InvalidBackupError)
def invalid_backup_handler(request: Request, exc: InvalidBackupError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(BackupError)
def backup_error_handler(request: Request, exc: BackupError):
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.exception_handler(PersistenceError)
def persistence_error_handler(request: Request, exc: PersistenceError):
    return JSONResponse(status_code=500, content={"detail": str(exc)})


app.include_router(reports_router)
app.include_router(goals_router)
app.include_router(personal_info_router)
app.include_router(work_days_router)
app.include_router(progress_router)
app.include_router(backup_router)
app.include_router(data_router)


@app.get("/")
def root():
    return {"message": "Work hours backend is running"}
