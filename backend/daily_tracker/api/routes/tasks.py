"""Task Routes: create and list tasks."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from daily_tracker.config import Settings, get_settings
from daily_tracker.infrastructure.database import get_db
from daily_tracker.schemas.task import TaskCreate, TaskCreated, TaskRecord
from daily_tracker.services import tasks as task_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post(
    "", response_model=TaskCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: TaskCreate | None = None,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Insert one task; start/end stored in the configured storage zone."""
    task_id = await task_store.create_task(
        db, body or TaskCreate(), settings.storage_zone,
    )
    return TaskCreated(taskId=task_id)


@router.get("", response_model=list[TaskRecord])
async def list_tasks(db: AsyncSession = Depends(get_db)):
    logger.info("Listing tasks")
    return await task_store.list_tasks(db)
