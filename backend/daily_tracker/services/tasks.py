"""Task Store: insert and list task rows."""

import logging
from zoneinfo import ZoneInfo

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from daily_tracker.core.required_fields import check_required_fields
from daily_tracker.core.wire_format import (
    format_wire_datetime, parse_instant, to_storage_datetime,
)
from daily_tracker.infrastructure.database import storage_errors
from daily_tracker.models.task import Task
from daily_tracker.schemas.task import TaskCreate, TaskRecord

logger = logging.getLogger(__name__)


async def create_task(
    db: AsyncSession, body: TaskCreate, zone: ZoneInfo,
) -> int:
    """Validate, normalize both instants to the storage zone, insert one row."""
    check_required_fields({
        "type": body.type,
        "startTime": body.start_time,
        "endTime": body.end_time,
        "duration": body.duration,
    })
    start = parse_instant(body.start_time, "startTime")
    end = parse_instant(body.end_time, "endTime")

    task = Task(
        type=body.type,
        start_time=to_storage_datetime(start, zone, "startTime"),
        end_time=to_storage_datetime(end, zone, "endTime"),
        duration=body.duration,
    )
    async with storage_errors(db, "insert task"):
        db.add(task)
        await db.commit()
    logger.info("Task created", extra={"task_id": task.id})
    return task.id


async def list_tasks(db: AsyncSession) -> list[TaskRecord]:
    """All tasks, newest id first."""
    async with storage_errors(db, "list tasks"):
        result = await db.execute(select(Task).order_by(Task.id.desc()))
        tasks = result.scalars().all()
    return [
        TaskRecord(
            id=t.id,
            type=t.type,
            start_time=format_wire_datetime(t.start_time),
            end_time=format_wire_datetime(t.end_time),
            duration=t.duration,
        )
        for t in tasks
    ]
