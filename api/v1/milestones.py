"""Milestone endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_db
from api.errors import to_http_exception
from models.milestone import (
    MilestoneCreate,
    MilestoneListResponse,
    MilestoneQueryParams,
    MilestoneResponse,
    MilestoneUpdate,
)
from services.milestones_service import (
    create_milestone,
    delete_milestone,
    get_milestone,
    list_milestones,
    update_milestone,
)

router = APIRouter()


@router.get("/milestones", response_model=MilestoneListResponse)
async def list_milestones_endpoint(db: AsyncSession = Depends(get_db)):
    """List milestones with default pagination."""
    try:
        return await list_milestones(db)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch milestones") from e


@router.post("/milestones/search", response_model=MilestoneListResponse)
async def search_milestones_endpoint(
    params: MilestoneQueryParams,
    db: AsyncSession = Depends(get_db),
):
    """List milestones matching the filters, sorts and pagination in the request body."""
    try:
        return await list_milestones(db, params=params)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "search milestones") from e


@router.get("/milestones/{milestone_id}", response_model=MilestoneResponse)
async def get_milestone_endpoint(
    milestone_id: int,
    db: AsyncSession = Depends(get_db),
):
    try:
        milestone = await get_milestone(db, milestone_id=milestone_id)
        return MilestoneResponse.model_validate(milestone)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch milestone") from e


@router.post("/milestones", response_model=MilestoneResponse, status_code=status.HTTP_201_CREATED)
async def create_milestone_endpoint(
    milestone_data: MilestoneCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new milestone."""
    try:
        milestone = await create_milestone(db, payload=milestone_data)
        return MilestoneResponse.model_validate(milestone)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "create milestone") from e


@router.put("/milestones/{milestone_id}")
async def update_milestone_endpoint(
    milestone_id: int,
    milestone_data: MilestoneUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Replace an existing milestone.

    Returns:
        dict: Number of rows affected
    """
    try:
        rows_affected = await update_milestone(db, milestone_id=milestone_id, payload=milestone_data)
        return {"rows_affected": rows_affected}
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "update milestone") from e


@router.delete("/milestones/{milestone_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_milestone_endpoint(
    milestone_id: int,
    db: AsyncSession = Depends(get_db),
):
    try:
        await delete_milestone(db, milestone_id=milestone_id)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "delete milestone") from e
