"""Repository for Cost database operations."""

from sqlalchemy.ext.asyncio import AsyncSession

from models.cost import Cost, CostQueryParams
from repos import base
from repos.filters import FilterSet

FILTERS = FilterSet.for_params(
    Cost,
    CostQueryParams,
    search=("name_like", "category_like", "notes_like"),
    sort_fields=(
        "id",
        "type",
        "category",
        "name",
        "amount",
        "quantity",
        "unit_cost",
        "hours",
        "date",
        "is_estimated",
        "created_at",
        "updated_at",
    ),
)


async def create(session: AsyncSession, cost: Cost) -> Cost:
    """
    Create a new cost.

    amount is recomputed from unit_cost * quantity when both are positive.

    Args:
        session: Database session
        cost: Cost instance to create

    Returns:
        Created cost
    """
    return await base.create(session, cost)


async def get_one(session: AsyncSession, cost_id: int) -> Cost:
    return await base.get_one(session, Cost, cost_id)


async def get_many(
    session: AsyncSession,
    params: CostQueryParams | None = None,
) -> tuple[list[Cost], int]:
    return await base.get_many(session, FILTERS, params)


async def update(session: AsyncSession, cost: Cost) -> int:
    return await base.update(session, cost)


async def delete(session: AsyncSession, cost_id: int) -> None:
    await base.delete(session, Cost, cost_id)
