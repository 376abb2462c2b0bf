"""Service layer for Client business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from models.client import (
    Client,
    ClientCreate,
    ClientListResponse,
    ClientQueryParams,
    ClientResponse,
    ClientUpdate,
)
from repos import clients_repo


async def create_client(session: AsyncSession, *, payload: ClientCreate) -> Client:
    """
    Create a new client.

    Args:
        session: Database session
        payload: Client creation data

    Returns:
        Created client

    Raises:
        EntityValidationError: If the client breaks an invariant (e.g. invalid email)
        RepositoryError: If the store rejects the row
    """
    client = Client(**payload.model_dump())
    try:
        client = await clients_repo.create(session, client)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return client


async def get_client(session: AsyncSession, *, client_id: int) -> Client:
    """
    Get a client by ID.

    Raises:
        NotFoundError: If the client does not exist
    """
    return await clients_repo.get_one(session, client_id)


async def list_clients(
    session: AsyncSession,
    *,
    params: ClientQueryParams | None = None,
) -> ClientListResponse:
    """
    List clients matching the query parameters.

    Args:
        session: Database session
        params: Filters, sorts and pagination

    Returns:
        One page of clients plus the total number of matches
    """
    clients, total = await clients_repo.get_many(session, params)
    return ClientListResponse(
        data=[ClientResponse.model_validate(client) for client in clients],
        total=total,
    )


async def update_client(session: AsyncSession, *, client_id: int, payload: ClientUpdate) -> int:
    """
    Replace every field of an existing client.

    Returns:
        Number of rows affected

    Raises:
        NotFoundError: If the client does not exist
    """
    client = Client(id=client_id, **payload.model_dump())
    try:
        rows_affected = await clients_repo.update(session, client)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return rows_affected


async def delete_client(session: AsyncSession, *, client_id: int) -> None:
    """
    Delete a client.

    Raises:
        NotFoundError: If the client does not exist
        ForeignKeyViolatedError: If projects still reference the client
    """
    try:
        await clients_repo.delete(session, client_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
