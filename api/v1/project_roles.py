"""Project role endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_db
from api.errors import to_http_exception
from models.project_role import (
    ProjectRoleCreate,
    ProjectRoleListResponse,
    ProjectRoleQueryParams,
    ProjectRoleResponse,
    ProjectRoleUpdate,
)
from services.project_roles_service import (
    create_project_role,
    delete_project_role,
    get_project_role,
    get_project_role_by_key,
    list_project_roles,
    update_project_role,
)

router = APIRouter()


@router.get("/project-roles", response_model=ProjectRoleListResponse)
async def list_project_roles_endpoint(db: AsyncSession = Depends(get_db)):
    """List project roles with default pagination."""
    try:
        return await list_project_roles(db)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch project roles") from e


@router.post("/project-roles/search", response_model=ProjectRoleListResponse)
async def search_project_roles_endpoint(
    params: ProjectRoleQueryParams,
    db: AsyncSession = Depends(get_db),
):
    """List project roles matching the filters, sorts and pagination in the request body."""
    try:
        return await list_project_roles(db, params=params)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "search project roles") from e


@router.get("/project-roles/lookup", response_model=ProjectRoleResponse)
async def get_project_role_by_key_endpoint(
    project_id: int,
    name: str,
    level: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a project role by its (project, name, level) key."""
    try:
        project_role = await get_project_role_by_key(db, project_id=project_id, name=name, level=level)
        return ProjectRoleResponse.model_validate(project_role)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch project role") from e


@router.get("/project-roles/{project_role_id}", response_model=ProjectRoleResponse)
async def get_project_role_endpoint(
    project_role_id: int,
    db: AsyncSession = Depends(get_db),
):
    try:
        project_role = await get_project_role(db, project_role_id=project_role_id)
        return ProjectRoleResponse.model_validate(project_role)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch project role") from e


@router.post("/project-roles", response_model=ProjectRoleResponse, status_code=status.HTTP_201_CREATED)
async def create_project_role_endpoint(
    project_role_data: ProjectRoleCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new project role."""
    try:
        project_role = await create_project_role(db, payload=project_role_data)
        return ProjectRoleResponse.model_validate(project_role)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "create project role") from e


@router.put("/project-roles/{project_role_id}")
async def update_project_role_endpoint(
    project_role_id: int,
    project_role_data: ProjectRoleUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Replace an existing project role.

    Returns:
        dict: Number of rows affected
    """
    try:
        rows_affected = await update_project_role(db, project_role_id=project_role_id, payload=project_role_data)
        return {"rows_affected": rows_affected}
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "update project role") from e


@router.delete("/project-roles/{project_role_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project_role_endpoint(
    project_role_id: int,
    db: AsyncSession = Depends(get_db),
):
    try:
        await delete_project_role(db, project_role_id=project_role_id)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "delete project role") from e
