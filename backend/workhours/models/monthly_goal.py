from sqlalchemy import CheckConstraint, Column, DateTime, Integer
from sqlalchemy.sql import func
from workhours.db import Base
from workhours.core.constants import SINGLETON_ID


class MonthlyGoal(Base):
    __tablename__ = "goals"
    __table_args__ = (CheckConstraint(f"id = {SINGLETON_ID}", name="goals_single_row"),)

    id = Column(Integer, primary_key=True, default=SINGLETON_ID)

    # Target in minutes despite the name; 0 means no goal set
    monthly_hours = Column(Integer, nullable=False, default=0)

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
