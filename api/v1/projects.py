"""Project endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_db
from api.errors import to_http_exception
from models.estimate import ProjectEstimate
from models.project import (
    ProjectCreate,
    ProjectListResponse,
    ProjectQueryParams,
    ProjectResponse,
    ProjectUpdate,
)
from models.project_role import ProjectRoleListResponse
from services.estimates_service import get_project_estimate
from services.project_roles_service import list_project_roles_by_project
from services.projects_service import (
    create_project,
    delete_project,
    get_project,
    list_projects,
    update_project,
)

router = APIRouter()


@router.get("/projects", response_model=ProjectListResponse)
async def list_projects_endpoint(db: AsyncSession = Depends(get_db)):
    """List projects with default pagination."""
    try:
        return await list_projects(db)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch projects") from e


@router.post("/projects/search", response_model=ProjectListResponse)
async def search_projects_endpoint(
    params: ProjectQueryParams,
    db: AsyncSession = Depends(get_db),
):
    """List projects matching the filters, sorts and pagination in the request body."""
    try:
        return await list_projects(db, params=params)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "search projects") from e


@router.get("/projects/{project_id}", response_model=ProjectResponse)
async def get_project_endpoint(
    project_id: int,
    db: AsyncSession = Depends(get_db),
):
    try:
        project = await get_project(db, project_id=project_id)
        return ProjectResponse.model_validate(project)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch project") from e


@router.post("/projects", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project_endpoint(
    project_data: ProjectCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new project."""
    try:
        project = await create_project(db, payload=project_data)
        return ProjectResponse.model_validate(project)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "create project") from e


@router.put("/projects/{project_id}")
async def update_project_endpoint(
    project_id: int,
    project_data: ProjectUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Replace an existing project.

    Returns:
        dict: Number of rows affected
    """
    try:
        rows_affected = await update_project(db, project_id=project_id, payload=project_data)
        return {"rows_affected": rows_affected}
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "update project") from e


@router.delete("/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project_endpoint(
    project_id: int,
    db: AsyncSession = Depends(get_db),
):
    try:
        await delete_project(db, project_id=project_id)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "delete project") from e


@router.get("/projects/{project_id}/roles", response_model=ProjectRoleListResponse)
async def list_project_roles_by_project_endpoint(
    project_id: int,
    db: AsyncSession = Depends(get_db),
):
    """List the roles of a project with default pagination."""
    try:
        return await list_project_roles_by_project(db, project_id=project_id)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch project roles") from e


@router.get("/projects/{project_id}/estimate", response_model=ProjectEstimate)
async def get_project_estimate_endpoint(
    project_id: int,
    db: AsyncSession = Depends(get_db),
):
    """
    Summarize a project's estimated effort and costs.

    Returns:
        Effort in hours, days, weeks and man-months plus cost totals by type.

    Raises:
        404 if project not found.
    """
    try:
        return await get_project_estimate(db, project_id=project_id)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "estimate project") from e
