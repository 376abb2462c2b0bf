"""Service layer for ProjectRole business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from models.project_role import (
    ProjectRole,
    ProjectRoleCreate,
    ProjectRoleListResponse,
    ProjectRoleQueryParams,
    ProjectRoleResponse,
    ProjectRoleUpdate,
)
from repos import project_roles_repo


async def create_project_role(session: AsyncSession, *, payload: ProjectRoleCreate) -> ProjectRole:
    """Create a new project role."""
    project_role = ProjectRole(**payload.model_dump())
    try:
        project_role = await project_roles_repo.create(session, project_role)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return project_role


async def get_project_role(session: AsyncSession, *, project_role_id: int) -> ProjectRole:
    return await project_roles_repo.get_one(session, project_role_id)


async def list_project_roles(
    session: AsyncSession,
    *,
    params: ProjectRoleQueryParams | None = None,
) -> ProjectRoleListResponse:
    items, total = await project_roles_repo.get_many(session, params)
    return ProjectRoleListResponse(
        data=[ProjectRoleResponse.model_validate(item) for item in items],
        total=total,
    )


async def update_project_role(session: AsyncSession, *, project_role_id: int, payload: ProjectRoleUpdate) -> int:
    """Replace every field of an existing project role. Returns the number of rows affected."""
    project_role = ProjectRole(id=project_role_id, **payload.model_dump())
    try:
        rows_affected = await project_roles_repo.update(session, project_role)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return rows_affected


async def delete_project_role(session: AsyncSession, *, project_role_id: int) -> None:
    try:
        await project_roles_repo.delete(session, project_role_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise


async def list_project_roles_by_project(
    session: AsyncSession,
    *,
    project_id: int,
    params: ProjectRoleQueryParams | None = None,
) -> ProjectRoleListResponse:
    """
    List the roles of a single project.

    Any project filter in params is replaced by project_id.
    """
    params = (params or ProjectRoleQueryParams()).model_copy(
        update={"project_id": project_id, "project_id_in": []}
    )
    return await list_project_roles(session, params=params)


async def get_project_role_by_key(
    session: AsyncSession,
    *,
    project_id: int,
    name: str,
    level: int,
) -> ProjectRole:
    return await project_roles_repo.get_by_project_name_and_level(
        session,
        project_id=project_id,
        name=name,
        level=level,
    )
