"""Service layer for ProjectResource business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from models.project_resource import (
    ProjectResource,
    ProjectResourceCreate,
    ProjectResourceListResponse,
    ProjectResourceQueryParams,
    ProjectResourceResponse,
    ProjectResourceUpdate,
)
from repos import project_resources_repo


async def create_project_resource(session: AsyncSession, *, payload: ProjectResourceCreate) -> ProjectResource:
    """Create a new project resource (allocation)."""
    project_resource = ProjectResource(**payload.model_dump())
    try:
        project_resource = await project_resources_repo.create(session, project_resource)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return project_resource


async def get_project_resource(session: AsyncSession, *, project_resource_id: int) -> ProjectResource:
    return await project_resources_repo.get_one(session, project_resource_id)


async def list_project_resources(
    session: AsyncSession,
    *,
    params: ProjectResourceQueryParams | None = None,
) -> ProjectResourceListResponse:
    items, total = await project_resources_repo.get_many(session, params)
    return ProjectResourceListResponse(
        data=[ProjectResourceResponse.model_validate(item) for item in items],
        total=total,
    )


async def update_project_resource(session: AsyncSession, *, project_resource_id: int, payload: ProjectResourceUpdate) -> int:
    """Replace every field of an existing project resource (allocation). Returns the number of rows affected."""
    project_resource = ProjectResource(id=project_resource_id, **payload.model_dump())
    try:
        rows_affected = await project_resources_repo.update(session, project_resource)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return rows_affected


async def delete_project_resource(session: AsyncSession, *, project_resource_id: int) -> None:
    try:
        await project_resources_repo.delete(session, project_resource_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise


async def get_project_resource_by_pair(
    session: AsyncSession,
    *,
    project_id: int,
    human_resource_id: int,
) -> ProjectResource:
    """
    Get the allocation of one human resource to one project.

    Raises:
        NotFoundError: If the resource is not allocated to the project
    """
    return await project_resources_repo.get_by_project_and_resource(
        session,
        project_id=project_id,
        human_resource_id=human_resource_id,
    )
