"""Service layer for HumanResource business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from models.human_resource import (
    HumanResource,
    HumanResourceCreate,
    HumanResourceListResponse,
    HumanResourceQueryParams,
    HumanResourceResponse,
    HumanResourceUpdate,
)
from repos import human_resources_repo


async def create_human_resource(session: AsyncSession, *, payload: HumanResourceCreate) -> HumanResource:
    """Create a new human resource."""
    human_resource = HumanResource(**payload.model_dump())
    try:
        human_resource = await human_resources_repo.create(session, human_resource)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return human_resource


async def get_human_resource(session: AsyncSession, *, human_resource_id: int) -> HumanResource:
    return await human_resources_repo.get_one(session, human_resource_id)


async def list_human_resources(
    session: AsyncSession,
    *,
    params: HumanResourceQueryParams | None = None,
) -> HumanResourceListResponse:
    items, total = await human_resources_repo.get_many(session, params)
    return HumanResourceListResponse(
        data=[HumanResourceResponse.model_validate(item) for item in items],
        total=total,
    )


async def update_human_resource(session: AsyncSession, *, human_resource_id: int, payload: HumanResourceUpdate) -> int:
    """Replace every field of an existing human resource. Returns the number of rows affected."""
    human_resource = HumanResource(id=human_resource_id, **payload.model_dump())
    try:
        rows_affected = await human_resources_repo.update(session, human_resource)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return rows_affected


async def delete_human_resource(session: AsyncSession, *, human_resource_id: int) -> None:
    try:
        await human_resources_repo.delete(session, human_resource_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
