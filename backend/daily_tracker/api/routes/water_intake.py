"""Water Intake Routes: per-day upsert, lookup and listing.

Invariants:
    - POST never distinguishes created from updated
    - GET /water-intake/{date} answers 200 even for days never written
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from daily_tracker.infrastructure.database import get_db
from daily_tracker.schemas.water_intake import (
    WaterIntakeRecord, WaterIntakeSaved, WaterIntakeUpsert,
)
from daily_tracker.services import water_intake as water_store

router = APIRouter(prefix="/water-intake", tags=["water-intake"])


@router.post("", response_model=WaterIntakeSaved)
async def upsert_water_intake(
    body: WaterIntakeUpsert | None = None,
    db: AsyncSession = Depends(get_db),
):
    await water_store.upsert_water_intake(db, body or WaterIntakeUpsert())
    return WaterIntakeSaved()


@router.get("", response_model=list[WaterIntakeRecord])
async def list_water_intake(db: AsyncSession = Depends(get_db)):
    return await water_store.list_water_intake(db)


@router.get("/{date}", response_model=WaterIntakeRecord)
async def get_water_intake(date: str, db: AsyncSession = Depends(get_db)):
    """One day's record, or {id: null, date, count: 0} when absent."""
    return await water_store.get_water_intake(db, date)
