"""Water Intake Schemas: upsert body and per-day records."""

from pydantic import BaseModel


class WaterIntakeUpsert(BaseModel):
    """POST /water-intake body."""
    date: str | None = None
    count: int | None = None


class WaterIntakeSaved(BaseModel):
    message: str = "Water intake updated/inserted successfully."


class WaterIntakeRecord(BaseModel):
    """One day's count. id is None for a day never written."""
    id: int | None
    date: str
    count: int
