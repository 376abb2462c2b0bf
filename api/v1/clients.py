"""Client endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_db
from api.errors import to_http_exception
from models.client import (
    ClientCreate,
    ClientListResponse,
    ClientQueryParams,
    ClientResponse,
    ClientUpdate,
)
from services.clients_service import (
    create_client,
    delete_client,
    get_client,
    list_clients,
    update_client,
)

router = APIRouter()


@router.get("/clients", response_model=ClientListResponse)
async def list_clients_endpoint(db: AsyncSession = Depends(get_db)):
    """
    List clients with default pagination (first page of 20).
    """
    try:
        return await list_clients(db)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch clients") from e


@router.post("/clients/search", response_model=ClientListResponse)
async def search_clients_endpoint(
    params: ClientQueryParams,
    db: AsyncSession = Depends(get_db),
):
    """
    List clients matching the filters, sorts and pagination in the request body.

    The *_like fields match any of name, email, phone, address, contact person or notes.
    """
    try:
        return await list_clients(db, params=params)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "search clients") from e


@router.get("/clients/{client_id}", response_model=ClientResponse)
async def get_client_endpoint(
    client_id: int,
    db: AsyncSession = Depends(get_db),
):
    """
    Get a specific client by ID.

    Raises:
        404 if client not found.
    """
    try:
        client = await get_client(db, client_id=client_id)
        return ClientResponse.model_validate(client)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "fetch client") from e


@router.post("/clients", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client_endpoint(
    client_data: ClientCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Create a new client.

    Name and email are required; the email must be a valid address.
    """
    try:
        client = await create_client(db, payload=client_data)
        return ClientResponse.model_validate(client)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "create client") from e


@router.put("/clients/{client_id}")
async def update_client_endpoint(
    client_id: int,
    client_data: ClientUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Replace an existing client.

    Returns:
        dict: Number of rows affected
    """
    try:
        rows_affected = await update_client(db, client_id=client_id, payload=client_data)
        return {"rows_affected": rows_affected}
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "update client") from e


@router.delete("/clients/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client_endpoint(
    client_id: int,
    db: AsyncSession = Depends(get_db),
):
    """
    Delete a client.

    Fails with 409 while projects still reference the client.
    """
    try:
        await delete_client(db, client_id=client_id)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "delete client") from e
