"""Task ORM: one timed activity, written once and never updated.

Invariants:
    - id is an autoincrement integer assigned by the store
    - type, start_time, end_time, duration are all non-nullable
    - start_time/end_time are zone-naive, whole seconds, in the storage zone
"""

import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from daily_tracker.db.base import Base


class Task(Base):
    """Task row: label, interval and duration in seconds."""
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    start_time: Mapped[datetime.datetime] = mapped_column(
        DateTime, nullable=False,
    )
    end_time: Mapped[datetime.datetime] = mapped_column(
        DateTime, nullable=False,
    )
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
