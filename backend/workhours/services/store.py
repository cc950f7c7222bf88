"""SQLAlchemy-backed store for reports, the monthly goal, personal info and work days.

A store wraps one Session and is created per request (see `get_store`).
Every write commits on its own; failures are rolled back, logged and
re-raised as PersistenceError.
"""

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Iterable, Optional

from fastapi import Depends
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from workhours.core.config import settings
from workhours.core.constants import ALL_WEEKDAYS, SINGLETON_ID
from workhours.core.errors import PersistenceError
from workhours.core.validation import (
    clean_text,
    normalize_work_days,
    parse_int_or_default,
    parse_report_date,
)
from workhours.db import get_db
from workhours.models.monthly_goal import MonthlyGoal
from workhours.models.personal_info import PersonalInfo
from workhours.models.report import Report
from workhours.models.work_day import WorkDay
from workhours.schemas.personal_info import PersonalInfoRead
from workhours.schemas.report import ReportWrite

logger = logging.getLogger(__name__)


class WorkHoursStore:
    def __init__(self, db: Session, tz_name: Optional[str] = None) -> None:
        self.db = db
        self.tz_name = tz_name if tz_name is not None else settings.timezone

    @contextmanager
    def _guard(self, action: str, commit: bool = False):
        try:
            yield
            if commit:
                self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Error while trying to %s", action)
            raise PersistenceError(f"Could not {action}") from exc

    # --------- Defaults --------- #

    def initialize_default_data(self) -> None:
        """Seed the single-row tables and the seven weekdays when missing.

        Seeding problems are logged and otherwise ignored.
        """
        try:
            if self.db.get(MonthlyGoal, SINGLETON_ID) is None:
                self.db.add(MonthlyGoal(id=SINGLETON_ID, monthly_hours=0))
            if self.db.get(PersonalInfo, SINGLETON_ID) is None:
                self.db.add(PersonalInfo(id=SINGLETON_ID, name="", email=""))
            self._ensure_weekdays()
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error initializing default data")

    def _ensure_weekdays(self) -> None:
        existing = {row.day_of_week for row in self.db.query(WorkDay).all()}
        for day in ALL_WEEKDAYS:
            if day not in existing:
                self.db.add(WorkDay(day_of_week=day, is_selected=False))
        self.db.flush()

    # --------- Reports --------- #

    def list_reports(
        self, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> list[Report]:
        with self._guard("list reports"):
            query = self.db.query(Report)
            if start is not None:
                query = query.filter(Report.date >= start)
            if end is not None:
                query = query.filter(Report.date <= end)
            # Most recent first
            return query.order_by(Report.date.desc(), Report.id.desc()).all()

    def get_report(self, report_id: int) -> Optional[Report]:
        with self._guard("load report"):
            return self.db.get(Report, report_id)

    def _apply(self, report: Report, data: ReportWrite) -> None:
        report.date = parse_report_date(data.date, self.tz_name)
        report.duration = parse_int_or_default(data.duration)
        report.study_hours = parse_int_or_default(data.study_hours)
        report.observations = clean_text(data.observations)

    def create_report(self, data: ReportWrite) -> Report:
        report = Report()
        self._apply(report, data)
        with self._guard("create report", commit=True):
            self.db.add(report)
        with self._guard("load report"):
            self.db.refresh(report)
        return report

    def update_report(self, report_id: int, data: ReportWrite) -> Optional[Report]:
        """Replace every field of a report. Returns None when the id is unknown."""
        with self._guard("update report", commit=True):
            report = self.db.get(Report, report_id)
            if report is None:
                return None
            self._apply(report, data)
        with self._guard("load report"):
            self.db.refresh(report)
        return report

    def delete_report(self, report_id: int) -> bool:
        with self._guard("delete report", commit=True):
            report = self.db.get(Report, report_id)
            if report is None:
                return False
            self.db.delete(report)
        return True

    # --------- Goal --------- #

    def get_goal(self) -> int:
        """Monthly goal in minutes (0 when unset)."""
        with self._guard("load goal"):
            row = self.db.get(MonthlyGoal, SINGLETON_ID)
            return row.monthly_hours if row else 0

    def update_monthly_goal(self, minutes) -> int:
        value = parse_int_or_default(minutes)
        with self._guard("update monthly goal", commit=True):
            row = self.db.get(MonthlyGoal, SINGLETON_ID)
            if row is None:
                row = MonthlyGoal(id=SINGLETON_ID)
                self.db.add(row)
            row.monthly_hours = value
        return value

    # --------- Personal info --------- #

    def get_personal_info(self) -> PersonalInfoRead:
        with self._guard("load personal info"):
            row = self.db.get(PersonalInfo, SINGLETON_ID)
            if row is None:
                return PersonalInfoRead()
            return PersonalInfoRead(name=row.name or "", email=row.email or "")

    def update_personal_info(self, name, email) -> PersonalInfoRead:
        info = PersonalInfoRead(name=clean_text(name), email=clean_text(email))
        with self._guard("update personal info", commit=True):
            row = self.db.get(PersonalInfo, SINGLETON_ID)
            if row is None:
                row = PersonalInfo(id=SINGLETON_ID)
                self.db.add(row)
            row.name = info.name
            row.email = info.email
        return info

    # --------- Work days --------- #

    def get_work_days(self) -> tuple[int, ...]:
        with self._guard("load work days"):
            rows = (
                self.db.query(WorkDay.day_of_week)
                .filter(WorkDay.is_selected.is_(True))
                .all()
            )
            return normalize_work_days(row[0] for row in rows)

    def update_work_days(self, days: Iterable) -> tuple[int, ...]:
        """Replace the selected weekdays; invalid entries are dropped."""
        selected = normalize_work_days(days)
        with self._guard("update work days", commit=True):
            self._ensure_weekdays()
            self.db.execute(update(WorkDay).values(is_selected=False))
            if selected:
                self.db.execute(
                    update(WorkDay)
                    .where(WorkDay.day_of_week.in_(selected))
                    .values(is_selected=True)
                )
        return selected

    # --------- Utility --------- #

    def clear_all(self) -> None:
        """Delete everything, then reseed the defaults."""
        with self._guard("clear all data", commit=True):
            self.db.query(Report).delete()
            self.db.query(MonthlyGoal).delete()
            self.db.query(PersonalInfo).delete()
            self.db.query(WorkDay).delete()
        self.initialize_default_data()
        logger.info("All data cleared")


# Dependency we will use in FastAPI routes
def get_store(db: Session = Depends(get_db)) -> WorkHoursStore:
    return WorkHoursStore(db)
