"""Repository for Client database operations."""

from sqlalchemy.ext.asyncio import AsyncSession

from models.client import Client, ClientQueryParams
from repos import base
from repos.filters import FilterSet

FILTERS = FilterSet.for_params(
    Client,
    ClientQueryParams,
    search=(
        "name_like",
        "email_like",
        "phone_like",
        "address_like",
        "contact_person_like",
        "notes_like",
    ),
    sort_fields=("id", "name", "email", "phone", "contact_person", "status", "created_at", "updated_at"),
)


async def create(session: AsyncSession, client: Client) -> Client:
    """
    Create a new client.

    Args:
        session: Database session
        client: Client instance to create

    Returns:
        Created client
    """
    return await base.create(session, client)


async def get_one(session: AsyncSession, client_id: int) -> Client:
    """Get a client by ID. Raises NotFoundError if absent."""
    return await base.get_one(session, Client, client_id)


async def get_many(
    session: AsyncSession,
    params: ClientQueryParams | None = None,
) -> tuple[list[Client], int]:
    """
    List clients matching the filters.

    Args:
        session: Database session
        params: Filters, sorts and pagination (None means first default page)

    Returns:
        Tuple of (clients on the page, total matching clients)
    """
    return await base.get_many(session, FILTERS, params)


async def update(session: AsyncSession, client: Client) -> int:
    """Overwrite an existing client. Returns the number of rows affected."""
    return await base.update(session, client)


async def delete(session: AsyncSession, client_id: int) -> None:
    """Delete a client by ID."""
    await base.delete(session, Client, client_id)
