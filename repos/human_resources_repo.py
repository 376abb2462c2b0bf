"""Repository for HumanResource database operations."""

from sqlalchemy.ext.asyncio import AsyncSession

from models.human_resource import HumanResource, HumanResourceQueryParams
from repos import base
from repos.filters import FilterSet

FILTERS = FilterSet.for_params(
    HumanResource,
    HumanResourceQueryParams,
    search=("name_like", "title_like", "level_like"),
    sort_fields=("id", "name", "title", "level", "status", "created_at", "updated_at"),
)


async def create(session: AsyncSession, human_resource: HumanResource) -> HumanResource:
    return await base.create(session, human_resource)


async def get_one(session: AsyncSession, human_resource_id: int) -> HumanResource:
    return await base.get_one(session, HumanResource, human_resource_id)


async def get_many(
    session: AsyncSession,
    params: HumanResourceQueryParams | None = None,
) -> tuple[list[HumanResource], int]:
    """
    List human resources. name_like, title_like and level_like match any of the three columns.

    Returns:
        Tuple of (human resources on the page, total matching rows)
    """
    return await base.get_many(session, FILTERS, params)


async def update(session: AsyncSession, human_resource: HumanResource) -> int:
    return await base.update(session, human_resource)


async def delete(session: AsyncSession, human_resource_id: int) -> None:
    await base.delete(session, HumanResource, human_resource_id)
