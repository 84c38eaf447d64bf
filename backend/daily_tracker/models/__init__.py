"""ORM Models: SQLAlchemy declarative models for the two tracked resources.

Invariants:
    - All models inherit from Base (db/base.py)
    - Rows are only ever inserted (tasks) or upserted by date (water intake)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from daily_tracker.models.task import Task  # noqa: F401
from daily_tracker.models.water_intake import WaterIntake  # noqa: F401
