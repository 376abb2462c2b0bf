"""Service layer for Milestone business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from models.milestone import (
    Milestone,
    MilestoneCreate,
    MilestoneListResponse,
    MilestoneQueryParams,
    MilestoneResponse,
    MilestoneUpdate,
)
from repos import milestones_repo


async def create_milestone(session: AsyncSession, *, payload: MilestoneCreate) -> Milestone:
    """Create a new milestone."""
    milestone = Milestone(**payload.model_dump())
    try:
        milestone = await milestones_repo.create(session, milestone)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return milestone


async def get_milestone(session: AsyncSession, *, milestone_id: int) -> Milestone:
    return await milestones_repo.get_one(session, milestone_id)


async def list_milestones(
    session: AsyncSession,
    *,
    params: MilestoneQueryParams | None = None,
) -> MilestoneListResponse:
    items, total = await milestones_repo.get_many(session, params)
    return MilestoneListResponse(
        data=[MilestoneResponse.model_validate(item) for item in items],
        total=total,
    )


async def update_milestone(session: AsyncSession, *, milestone_id: int, payload: MilestoneUpdate) -> int:
    """Replace every field of an existing milestone. Returns the number of rows affected."""
    milestone = Milestone(id=milestone_id, **payload.model_dump())
    try:
        rows_affected = await milestones_repo.update(session, milestone)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return rows_affected


async def delete_milestone(session: AsyncSession, *, milestone_id: int) -> None:
    try:
        await milestones_repo.delete(session, milestone_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
