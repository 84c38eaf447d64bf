"""Task Schemas: camelCase request body, store-native response rows."""

from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    """POST /tasks body."""
    model_config = ConfigDict(populate_by_name=True)

    type: str | None = None
    start_time: str | int | float | None = Field(None, alias="startTime")
    end_time: str | int | float | None = Field(None, alias="endTime")
    duration: int | None = None


class TaskCreated(BaseModel):
    message: str = "Task created."
    taskId: int


class TaskRecord(BaseModel):
    """Task row with timestamps in wire format."""
    id: int
    type: str
    start_time: str
    end_time: str
    duration: int
