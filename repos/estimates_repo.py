"""Aggregate queries backing the project estimate summary."""

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.common import Status
from models.cost import Cost
from models.milestone import Milestone
from models.task import Task, TaskStatus
from repos.base import storage_errors


async def sum_task_effort(session: AsyncSession, *, project_id: int) -> tuple[int, float]:
    """
    Count the project's tasks and add up their estimated effort, cancelled tasks excluded.

    Returns:
        Tuple of (task count, total estimated hours)
    """
    query = select(func.count(Task.id), func.coalesce(func.sum(Task.estimated_effort), 0)).where(
        Task.project_id == project_id,
        Task.status != TaskStatus.CANCELLED,
    )
    with storage_errors("Task", "sum_task_effort"):
        result = await session.execute(query)
    task_count, total_hours = result.one()
    return task_count, float(total_hours)


async def sum_costs_by_type(session: AsyncSession, *, project_id: int) -> list[tuple[str, bool, float]]:
    """
    Add up active cost amounts attached to a project directly or through its milestones and tasks.

    Returns:
        Rows of (cost type, is_estimated, total amount)
    """
    milestone_ids = select(Milestone.id).where(Milestone.project_id == project_id)
    task_ids = select(Task.id).where(Task.project_id == project_id)
    query = (
        select(Cost.type, Cost.is_estimated, func.coalesce(func.sum(Cost.amount), 0))
        .where(
            Cost.status == Status.ACTIVE,
            or_(
                Cost.project_id == project_id,
                Cost.milestone_id.in_(milestone_ids),
                Cost.task_id.in_(task_ids),
            ),
        )
        .group_by(Cost.type, Cost.is_estimated)
        .order_by(Cost.type)
    )
    with storage_errors("Cost", "sum_costs_by_type"):
        result = await session.execute(query)
    return [(cost_type, bool(is_estimated), float(total)) for cost_type, is_estimated, total in result.all()]
