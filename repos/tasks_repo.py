"""Repository for Task database operations."""

from sqlalchemy.ext.asyncio import AsyncSession

from models.task import Task, TaskQueryParams
from repos import base
from repos.filters import FilterSet

FILTERS = FilterSet.for_params(
    Task,
    TaskQueryParams,
    search=("name_like", "description_like"),
    sort_fields=(
        "id",
        "name",
        "project_id",
        "milestone_id",
        "parent_id",
        "level",
        "priority",
        "estimated_effort",
        "status",
        "created_at",
        "updated_at",
    ),
)


async def create(session: AsyncSession, task: Task) -> Task:
    return await base.create(session, task)


async def get_one(session: AsyncSession, task_id: int) -> Task:
    return await base.get_one(session, Task, task_id)


async def get_many(
    session: AsyncSession,
    params: TaskQueryParams | None = None,
) -> tuple[list[Task], int]:
    return await base.get_many(session, FILTERS, params)


async def update(session: AsyncSession, task: Task) -> int:
    return await base.update(session, task)


async def delete(session: AsyncSession, task_id: int) -> None:
    """Delete a task together with its subtasks."""
    await base.delete(session, Task, task_id)
