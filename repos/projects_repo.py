"""Repository for Project database operations."""

from sqlalchemy.ext.asyncio import AsyncSession

from models.project import Project, ProjectQueryParams
from repos import base
from repos.filters import FilterSet

FILTERS = FilterSet.for_params(
    Project,
    ProjectQueryParams,
    search=("name_like", "description_like"),
    sort_fields=(
        "id",
        "name",
        "client_id",
        "start_date",
        "end_date",
        "status",
        "created_at",
        "updated_at",
    ),
)


async def create(session: AsyncSession, project: Project) -> Project:
    """
    Create a new project. Unset work-time values take the defaults
    (8 hours per day, 5 days per week, Monday to Friday).

    Args:
        session: Database session
        project: Project instance to create

    Returns:
        Created project
    """
    return await base.create(session, project)


async def get_one(session: AsyncSession, project_id: int) -> Project:
    return await base.get_one(session, Project, project_id)


async def get_many(
    session: AsyncSession,
    params: ProjectQueryParams | None = None,
) -> tuple[list[Project], int]:
    return await base.get_many(session, FILTERS, params)


async def update(session: AsyncSession, project: Project) -> int:
    return await base.update(session, project)


async def delete(session: AsyncSession, project_id: int) -> None:
    """Delete a project; its milestones, tasks, allocations, roles and costs go with it."""
    await base.delete(session, Project, project_id)
