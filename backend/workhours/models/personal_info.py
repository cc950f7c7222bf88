from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String
from sqlalchemy.sql import func
from workhours.db import Base
from workhours.core.constants import SINGLETON_ID


class PersonalInfo(Base):
    __tablename__ = "personal_info"
    __table_args__ = (CheckConstraint(f"id = {SINGLETON_ID}", name="personal_info_single_row"),)

    id = Column(Integer, primary_key=True, default=SINGLETON_ID)
    name = Column(String, nullable=False, default="")
    email = Column(String, nullable=False, default="")

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
