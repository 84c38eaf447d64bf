"""WaterIntake ORM: one glass counter per calendar day.

Invariants:
    - date is UNIQUE: at most one row per day, upserts key on it
    - count is overwritten in place on repeat writes, never accumulated
"""

import datetime

from sqlalchemy import Date, Integer
from sqlalchemy.orm import Mapped, mapped_column

from daily_tracker.db.base import Base


class WaterIntake(Base):
    """Daily water intake counter."""
    __tablename__ = "water_intake"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    date: Mapped[datetime.date] = mapped_column(
        Date, nullable=False, unique=True,
    )
    count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
