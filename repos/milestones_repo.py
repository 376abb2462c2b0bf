"""Repository for Milestone database operations."""

from sqlalchemy.ext.asyncio import AsyncSession

from models.milestone import Milestone, MilestoneQueryParams
from repos import base
from repos.filters import FilterSet

FILTERS = FilterSet.for_params(
    Milestone,
    MilestoneQueryParams,
    search=("name_like", "description_like"),
    sort_fields=("id", "name", "project_id", "start_date", "end_date", "status", "created_at", "updated_at"),
)


async def create(session: AsyncSession, milestone: Milestone) -> Milestone:
    return await base.create(session, milestone)


async def get_one(session: AsyncSession, milestone_id: int) -> Milestone:
    return await base.get_one(session, Milestone, milestone_id)


async def get_many(
    session: AsyncSession,
    params: MilestoneQueryParams | None = None,
) -> tuple[list[Milestone], int]:
    return await base.get_many(session, FILTERS, params)


async def update(session: AsyncSession, milestone: Milestone) -> int:
    return await base.update(session, milestone)


async def delete(session: AsyncSession, milestone_id: int) -> None:
    """Delete a milestone. Tasks and costs pointing at it keep existing with no milestone."""
    await base.delete(session, Milestone, milestone_id)
