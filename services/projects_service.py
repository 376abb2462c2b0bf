"""Service layer for Project business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from models.project import (
    Project,
    ProjectCreate,
    ProjectListResponse,
    ProjectQueryParams,
    ProjectResponse,
    ProjectUpdate,
)
from repos import projects_repo


async def create_project(session: AsyncSession, *, payload: ProjectCreate) -> Project:
    """Create a new project."""
    project = Project(**payload.model_dump())
    try:
        project = await projects_repo.create(session, project)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return project


async def get_project(session: AsyncSession, *, project_id: int) -> Project:
    return await projects_repo.get_one(session, project_id)


async def list_projects(
    session: AsyncSession,
    *,
    params: ProjectQueryParams | None = None,
) -> ProjectListResponse:
    items, total = await projects_repo.get_many(session, params)
    return ProjectListResponse(
        data=[ProjectResponse.model_validate(item) for item in items],
        total=total,
    )


async def update_project(session: AsyncSession, *, project_id: int, payload: ProjectUpdate) -> int:
    """Replace every field of an existing project. Returns the number of rows affected."""
    project = Project(id=project_id, **payload.model_dump())
    try:
        rows_affected = await projects_repo.update(session, project)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return rows_affected


async def delete_project(session: AsyncSession, *, project_id: int) -> None:
    try:
        await projects_repo.delete(session, project_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
