import os

# Use a shared in-memory sqlite for tests; must be set before workhours is imported
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["TIMEZONE"] = "UTC"

import pytest  # noqa: E402


def _reset_schema():
    from workhours.main import app  # noqa: F401  (registers models, creates tables)
    from workhours.db import Base, engine

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture
def store():
    from workhours.db import SessionLocal
    from workhours.services.store import WorkHoursStore

    _reset_schema()
    db = SessionLocal()
    s = WorkHoursStore(db, tz_name="UTC")
    s.initialize_default_data()
    try:
        yield s
    finally:
        db.close()


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from workhours.db import SessionLocal
    from workhours.main import app
    from workhours.services.store import WorkHoursStore

    _reset_schema()
    db = SessionLocal()
    try:
        WorkHoursStore(db).initialize_default_data()
    finally:
        db.close()
    return TestClient(app)
