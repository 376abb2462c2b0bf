"""Repository for ProjectRole database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from errors import NotFoundError
from models.project_role import ProjectRole, ProjectRoleQueryParams, role_level_name
from repos import base
from repos.filters import FilterSet

FILTERS = FilterSet.for_params(
    ProjectRole,
    ProjectRoleQueryParams,
    sort_fields=("id", "name", "project_id", "level", "headcount", "created_at", "updated_at"),
)


async def create(session: AsyncSession, project_role: ProjectRole) -> ProjectRole:
    """
    Create a new project role.

    Level UNKNOWN becomes MID and headcount 0 becomes 1 before validation.
    """
    return await base.create(session, project_role)


async def get_one(session: AsyncSession, project_role_id: int) -> ProjectRole:
    return await base.get_one(session, ProjectRole, project_role_id)


async def get_by_project_name_and_level(
    session: AsyncSession,
    *,
    project_id: int,
    name: str,
    level: int,
) -> ProjectRole:
    """
    Get a project role by its unique (project, name, level) key.

    Raises:
        NotFoundError: If the project has no such role
    """
    query = select(ProjectRole).where(
        ProjectRole.project_id == project_id,
        ProjectRole.name == name.strip(),
        ProjectRole.level == level,
    )
    with base.storage_errors("ProjectRole", "get_by_project_name_and_level"):
        result = await session.execute(query)
    project_role = result.scalar_one_or_none()
    if project_role is None:
        raise NotFoundError(
            f"project {project_id} has no {role_level_name(level)} role named {name.strip()!r}"
        )
    return project_role


async def get_many(
    session: AsyncSession,
    params: ProjectRoleQueryParams | None = None,
) -> tuple[list[ProjectRole], int]:
    return await base.get_many(session, FILTERS, params)


async def update(session: AsyncSession, project_role: ProjectRole) -> int:
    return await base.update(session, project_role)


async def delete(session: AsyncSession, project_role_id: int) -> None:
    await base.delete(session, ProjectRole, project_role_id)
