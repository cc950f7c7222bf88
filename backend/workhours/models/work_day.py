from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Integer
from sqlalchemy.sql import func
from workhours.db import Base


class WorkDay(Base):
    __tablename__ = "work_days"
    __table_args__ = (CheckConstraint("day_of_week BETWEEN 0 AND 6", name="work_days_weekday_range"),)

    # 0 = Sunday ... 6 = Saturday; all seven rows always exist
    day_of_week = Column(Integer, primary_key=True, autoincrement=False)
    is_selected = Column(Boolean, nullable=False, default=False)

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
