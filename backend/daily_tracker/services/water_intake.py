"""Water Intake Store: per-day upsert and lookups.

Invariants:
    - upsert_water_intake is one INSERT ... conflict-update statement, never read-then-write
    - Concurrent writers for the same date are serialized by the UNIQUE(date) constraint
    - get_water_intake never reports absence as an error: unknown days read as count 0

Design Decisions:
    - Upsert statement chosen by dialect: MySQL/MariaDB ON DUPLICATE KEY UPDATE,
      PostgreSQL/SQLite ON CONFLICT (date) DO UPDATE
"""

import logging

from sqlalchemy import select
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from daily_tracker.core.errors import InvalidDateFormatError
from daily_tracker.core.required_fields import check_required_fields
from daily_tracker.core.wire_format import format_wire_date, parse_calendar_date
from daily_tracker.infrastructure.database import storage_errors
from daily_tracker.models.water_intake import WaterIntake
from daily_tracker.schemas.water_intake import WaterIntakeRecord, WaterIntakeUpsert

logger = logging.getLogger(__name__)


def build_upsert(dialect_name: str, day, count: int):
    """INSERT for (day, count) that overwrites count when day already exists."""
    values = {"date": day, "count": count}
    if dialect_name in ("mysql", "mariadb"):
        stmt = mysql.insert(WaterIntake).values(**values)
        return stmt.on_duplicate_key_update(count=stmt.inserted["count"])
    if dialect_name == "postgresql":
        stmt = postgresql.insert(WaterIntake).values(**values)
    elif dialect_name == "sqlite":
        stmt = sqlite.insert(WaterIntake).values(**values)
    else:
        raise ValueError(f"No upsert statement for dialect '{dialect_name}'")
    return stmt.on_conflict_do_update(
        index_elements=[WaterIntake.date],
        set_={"count": stmt.excluded["count"]},
    )


async def upsert_water_intake(db: AsyncSession, body: WaterIntakeUpsert) -> None:
    check_required_fields({"date": body.date, "count": body.count})
    day = parse_calendar_date(body.date)

    stmt = build_upsert(db.bind.dialect.name, day, body.count)
    async with storage_errors(db, "upsert water intake"):
        await db.execute(stmt)
        await db.commit()
    logger.info(
        "Water intake saved",
        extra={"date": format_wire_date(day), "count": body.count},
    )


async def get_water_intake(db: AsyncSession, date: str) -> WaterIntakeRecord:
    """Record for `date`, or a zero-count placeholder echoing `date` as given."""
    placeholder = WaterIntakeRecord(id=None, date=date, count=0)
    try:
        day = parse_calendar_date(date)
    except InvalidDateFormatError:
        return placeholder

    async with storage_errors(db, "get water intake"):
        result = await db.execute(
            select(WaterIntake).where(WaterIntake.date == day),
        )
        row = result.scalar_one_or_none()
    if row is None:
        return placeholder
    return _to_record(row)


async def list_water_intake(db: AsyncSession) -> list[WaterIntakeRecord]:
    async with storage_errors(db, "list water intake"):
        result = await db.execute(
            select(WaterIntake).order_by(WaterIntake.id.desc()),
        )
        rows = result.scalars().all()
    return [_to_record(r) for r in rows]


def _to_record(row: WaterIntake) -> WaterIntakeRecord:
    return WaterIntakeRecord(
        id=row.id, date=format_wire_date(row.date), count=row.count,
    )
