"""Cost endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_db
from api.errors import to_http_exception
from models.cost import (
    CostCreate,
    CostListResponse,
    CostQueryParams,
    CostResponse,
    CostUpdate,
)
from services.costs_service import (
    create_cost,
    delete_cost,
    get_cost,
    list_costs,
    update_cost,
)

router = APIRouter()


@router.get("/costs", response_model=CostListResponse)
async def list_costs_endpoint(db: AsyncSession = Depends(get_db)):
    """List costs with default pagination."""
    try:
        return await list_costs(db)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch costs") from e


@router.post("/costs/search", response_model=CostListResponse)
async def search_costs_endpoint(
    params: CostQueryParams,
    db: AsyncSession = Depends(get_db),
):
    """List costs matching the filters, sorts and pagination in the request body."""
    try:
        return await list_costs(db, params=params)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "search costs") from e


@router.get("/costs/{cost_id}", response_model=CostResponse)
async def get_cost_endpoint(
    cost_id: int,
    db: AsyncSession = Depends(get_db),
):
    try:
        cost = await get_cost(db, cost_id=cost_id)
        return CostResponse.model_validate(cost)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch cost") from e


@router.post("/costs", response_model=CostResponse, status_code=status.HTTP_201_CREATED)
async def create_cost_endpoint(
    cost_data: CostCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new cost."""
    try:
        cost = await create_cost(db, payload=cost_data)
        return CostResponse.model_validate(cost)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "create cost") from e


@router.put("/costs/{cost_id}")
async def update_cost_endpoint(
    cost_id: int,
    cost_data: CostUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Replace an existing cost.

    Returns:
        dict: Number of rows affected
    """
    try:
        rows_affected = await update_cost(db, cost_id=cost_id, payload=cost_data)
        return {"rows_affected": rows_affected}
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "update cost") from e


@router.delete("/costs/{cost_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_cost_endpoint(
    cost_id: int,
    db: AsyncSession = Depends(get_db),
):
    try:
        await delete_cost(db, cost_id=cost_id)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "delete cost") from e
