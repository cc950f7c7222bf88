from datetime import date, datetime, time, timedelta
import logging
import random

from workhours.core.time_utils import hhmm_to_minutes
from workhours.db import Base, SessionLocal, engine
from workhours.models.report import Report
from workhours.services.store import WorkHoursStore

logger = logging.getLogger(__name__)


def clear_recent_reports(db, days: int = 120) -> None:
    """Delete reports in the last N days so we can reseed cleanly."""
    cutoff = datetime.combine(date.today() - timedelta(days=days), time.min)
    db.query(Report).filter(Report.date >= cutoff).delete()
    db.commit()


def seed_demo_reports(store: WorkHoursStore, weeks: int = 8) -> int:
    """Insert a block of weekday reports plus a 50h goal and Mon-Fri work days."""
    today = date.today()
    start_day = today - timedelta(days=today.weekday(), weeks=weeks - 1)

    reports_to_add = []
    for offset in range(weeks * 7):
        day = start_day + timedelta(days=offset)
        # Skip weekends and future days
        if day.weekday() >= 5 or day > today:
            continue

        dur_str = random.choice(["01:30", "02:00", "02:45", "03:15"])
        reports_to_add.append(
            Report(
                date=datetime.combine(day, time(9, 0)),
                duration=hhmm_to_minutes(dur_str),
                study_hours=random.randint(0, 2),
                observations="",
            )
        )

    if reports_to_add:
        store.db.add_all(reports_to_add)
        store.db.commit()

    store.update_monthly_goal(50 * 60)
    store.update_work_days([1, 2, 3, 4, 5])
    return len(reports_to_add)


def main():
    logging.basicConfig(level=logging.INFO)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        store = WorkHoursStore(db)
        store.initialize_default_data()
        clear_recent_reports(db, days=70)
        count = seed_demo_reports(store)
        logger.info("Seeded %d demo reports", count)
    finally:
        db.close()


if __name__ == "__main__":
    main()
