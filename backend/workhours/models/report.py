from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from workhours.db import Base

class Report(Base):
    __tablename__ = "reports"
    # Ids are never reused, so restored reports always get new ones
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)

    # Local wall-clock time of the session; only the calendar day is used
    # when grouping reports into months.
    date = Column(DateTime, nullable=False, index=True)

    # Duration stored as **total minutes** (int)
    duration = Column(Integer, nullable=False, default=0)

    # Number of study sessions held (a count, not hours)
    study_hours = Column(Integer, nullable=False, default=0)

    observations = Column(String, nullable=False, default="")

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
