"""Human resource endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_db
from api.errors import to_http_exception
from models.human_resource import (
    HumanResourceCreate,
    HumanResourceListResponse,
    HumanResourceQueryParams,
    HumanResourceResponse,
    HumanResourceUpdate,
)
from services.human_resources_service import (
    create_human_resource,
    delete_human_resource,
    get_human_resource,
    list_human_resources,
    update_human_resource,
)

router = APIRouter()


@router.get("/human-resources", response_model=HumanResourceListResponse)
async def list_human_resources_endpoint(db: AsyncSession = Depends(get_db)):
    """List human resources with default pagination."""
    try:
        return await list_human_resources(db)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch human resources") from e


@router.post("/human-resources/search", response_model=HumanResourceListResponse)
async def search_human_resources_endpoint(
    params: HumanResourceQueryParams,
    db: AsyncSession = Depends(get_db),
):
    """List human resources matching the filters, sorts and pagination in the request body."""
    try:
        return await list_human_resources(db, params=params)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "search human resources") from e


@router.get("/human-resources/{human_resource_id}", response_model=HumanResourceResponse)
async def get_human_resource_endpoint(
    human_resource_id: int,
    db: AsyncSession = Depends(get_db),
):
    try:
        human_resource = await get_human_resource(db, human_resource_id=human_resource_id)
        return HumanResourceResponse.model_validate(human_resource)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch human resource") from e


@router.post("/human-resources", response_model=HumanResourceResponse, status_code=status.HTTP_201_CREATED)
async def create_human_resource_endpoint(
    human_resource_data: HumanResourceCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new human resource."""
    try:
        human_resource = await create_human_resource(db, payload=human_resource_data)
        return HumanResourceResponse.model_validate(human_resource)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "create human resource") from e


@router.put("/human-resources/{human_resource_id}")
async def update_human_resource_endpoint(
    human_resource_id: int,
    human_resource_data: HumanResourceUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Replace an existing human resource.

    Returns:
        dict: Number of rows affected
    """
    try:
        rows_affected = await update_human_resource(db, human_resource_id=human_resource_id, payload=human_resource_data)
        return {"rows_affected": rows_affected}
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "update human resource") from e


@router.delete("/human-resources/{human_resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_human_resource_endpoint(
    human_resource_id: int,
    db: AsyncSession = Depends(get_db),
):
    try:
        await delete_human_resource(db, human_resource_id=human_resource_id)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "delete human resource") from e
