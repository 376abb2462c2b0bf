"""Project resource (allocation) endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_db
from api.errors import to_http_exception
from models.project_resource import (
    ProjectResourceCreate,
    ProjectResourceListResponse,
    ProjectResourceQueryParams,
    ProjectResourceResponse,
    ProjectResourceUpdate,
)
from services.project_resources_service import (
    create_project_resource,
    delete_project_resource,
    get_project_resource,
    get_project_resource_by_pair,
    list_project_resources,
    update_project_resource,
)

router = APIRouter()


@router.get("/project-resources", response_model=ProjectResourceListResponse)
async def list_project_resources_endpoint(db: AsyncSession = Depends(get_db)):
    """List project resources with default pagination."""
    try:
        return await list_project_resources(db)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch project resources") from e


@router.post("/project-resources/search", response_model=ProjectResourceListResponse)
async def search_project_resources_endpoint(
    params: ProjectResourceQueryParams,
    db: AsyncSession = Depends(get_db),
):
    """List project resources matching the filters, sorts and pagination in the request body."""
    try:
        return await list_project_resources(db, params=params)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "search project resources") from e


@router.get("/project-resources/lookup", response_model=ProjectResourceResponse)
async def get_project_resource_by_pair_endpoint(
    project_id: int,
    human_resource_id: int,
    db: AsyncSession = Depends(get_db),
):
    """
    Get the allocation of a human resource to a project.

    Raises:
        404 if the resource is not allocated to the project.
    """
    try:
        project_resource = await get_project_resource_by_pair(
            db,
            project_id=project_id,
            human_resource_id=human_resource_id,
        )
        return ProjectResourceResponse.model_validate(project_resource)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch project resource") from e


@router.get("/project-resources/{project_resource_id}", response_model=ProjectResourceResponse)
async def get_project_resource_endpoint(
    project_resource_id: int,
    db: AsyncSession = Depends(get_db),
):
    try:
        project_resource = await get_project_resource(db, project_resource_id=project_resource_id)
        return ProjectResourceResponse.model_validate(project_resource)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch project resource") from e


@router.post("/project-resources", response_model=ProjectResourceResponse, status_code=status.HTTP_201_CREATED)
async def create_project_resource_endpoint(
    project_resource_data: ProjectResourceCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new project resource."""
    try:
        project_resource = await create_project_resource(db, payload=project_resource_data)
        return ProjectResourceResponse.model_validate(project_resource)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "create project resource") from e


@router.put("/project-resources/{project_resource_id}")
async def update_project_resource_endpoint(
    project_resource_id: int,
    project_resource_data: ProjectResourceUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Replace an existing project resource.

    Returns:
        dict: Number of rows affected
    """
    try:
        rows_affected = await update_project_resource(db, project_resource_id=project_resource_id, payload=project_resource_data)
        return {"rows_affected": rows_affected}
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "update project resource") from e


@router.delete("/project-resources/{project_resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project_resource_endpoint(
    project_resource_id: int,
    db: AsyncSession = Depends(get_db),
):
    try:
        await delete_project_resource(db, project_resource_id=project_resource_id)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "delete project resource") from e
