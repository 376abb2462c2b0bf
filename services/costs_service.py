"""Service layer for Cost business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from models.cost import (
    Cost,
    CostBase,
    CostCreate,
    CostListResponse,
    CostQueryParams,
    CostResponse,
    CostUpdate,
)
from repos import costs_repo


def _to_columns(payload: CostBase) -> dict:
    """Payload fields as column values; enums are stored by value, no rate type as ""."""
    data = payload.model_dump()
    data["type"] = payload.type.value
    data["rate_type"] = payload.rate_type.value if payload.rate_type else ""
    return data


async def create_cost(session: AsyncSession, *, payload: CostCreate) -> Cost:
    """
    Create a new cost.

    Args:
        session: Database session
        payload: Cost creation data

    Returns:
        Created cost, with amount derived from unit_cost * quantity when both are positive

    Raises:
        EntityValidationError: If the cost has no association, a negative figure,
            or is a labor cost without a resource or project role
    """
    cost = Cost(**_to_columns(payload))
    try:
        cost = await costs_repo.create(session, cost)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return cost


async def get_cost(session: AsyncSession, *, cost_id: int) -> Cost:
    return await costs_repo.get_one(session, cost_id)


async def list_costs(
    session: AsyncSession,
    *,
    params: CostQueryParams | None = None,
) -> CostListResponse:
    costs, total = await costs_repo.get_many(session, params)
    return CostListResponse(
        data=[CostResponse.model_validate(cost) for cost in costs],
        total=total,
    )


async def update_cost(session: AsyncSession, *, cost_id: int, payload: CostUpdate) -> int:
    """Replace every field of an existing cost. Returns the number of rows affected."""
    cost = Cost(id=cost_id, **_to_columns(payload))
    try:
        rows_affected = await costs_repo.update(session, cost)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return rows_affected


async def delete_cost(session: AsyncSession, *, cost_id: int) -> None:
    try:
        await costs_repo.delete(session, cost_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
