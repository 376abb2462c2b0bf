"""Repository for ProjectResource (allocation) database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from errors import NotFoundError
from models.project_resource import ProjectResource, ProjectResourceQueryParams
from repos import base
from repos.filters import FilterSet

FILTERS = FilterSet.for_params(
    ProjectResource,
    ProjectResourceQueryParams,
    sort_fields=(
        "id",
        "project_id",
        "human_resource_id",
        "role",
        "allocation",
        "start_date",
        "end_date",
        "status",
        "created_at",
        "updated_at",
    ),
)


async def create(session: AsyncSession, project_resource: ProjectResource) -> ProjectResource:
    return await base.create(session, project_resource)


async def get_one(session: AsyncSession, project_resource_id: int) -> ProjectResource:
    return await base.get_one(session, ProjectResource, project_resource_id)


async def get_by_project_and_resource(
    session: AsyncSession,
    *,
    project_id: int,
    human_resource_id: int,
) -> ProjectResource:
    """
    Get the allocation of a human resource to a project.

    Args:
        session: Database session
        project_id: Project ID
        human_resource_id: Human resource ID

    Returns:
        The allocation

    Raises:
        NotFoundError: If the resource is not allocated to the project
    """
    query = select(ProjectResource).where(
        ProjectResource.project_id == project_id,
        ProjectResource.human_resource_id == human_resource_id,
    )
    with base.storage_errors("ProjectResource", "get_by_project_and_resource"):
        result = await session.execute(query)
    project_resource = result.scalar_one_or_none()
    if project_resource is None:
        raise NotFoundError(
            f"human resource {human_resource_id} is not allocated to project {project_id}"
        )
    return project_resource


async def get_many(
    session: AsyncSession,
    params: ProjectResourceQueryParams | None = None,
) -> tuple[list[ProjectResource], int]:
    return await base.get_many(session, FILTERS, params)


async def update(session: AsyncSession, project_resource: ProjectResource) -> int:
    return await base.update(session, project_resource)


async def delete(session: AsyncSession, project_resource_id: int) -> None:
    await base.delete(session, ProjectResource, project_resource_id)
