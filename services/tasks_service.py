"""Service layer for Task business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from models.task import (
    Task,
    TaskCreate,
    TaskListResponse,
    TaskQueryParams,
    TaskResponse,
    TaskUpdate,
)
from repos import tasks_repo


async def create_task(session: AsyncSession, *, payload: TaskCreate) -> Task:
    """Create a new task."""
    task = Task(**payload.model_dump())
    try:
        task = await tasks_repo.create(session, task)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return task


async def get_task(session: AsyncSession, *, task_id: int) -> Task:
    return await tasks_repo.get_one(session, task_id)


async def list_tasks(
    session: AsyncSession,
    *,
    params: TaskQueryParams | None = None,
) -> TaskListResponse:
    items, total = await tasks_repo.get_many(session, params)
    return TaskListResponse(
        data=[TaskResponse.model_validate(item) for item in items],
        total=total,
    )


async def update_task(session: AsyncSession, *, task_id: int, payload: TaskUpdate) -> int:
    """Replace every field of an existing task. Returns the number of rows affected."""
    task = Task(id=task_id, **payload.model_dump())
    try:
        rows_affected = await tasks_repo.update(session, task)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return rows_affected


async def delete_task(session: AsyncSession, *, task_id: int) -> None:
    try:
        await tasks_repo.delete(session, task_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
