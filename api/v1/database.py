"""Endpoints for switching and copying the active database file."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from api.errors import HTTP_422_UNPROCESSABLE, to_http_exception
from db import database

router = APIRouter()


class DatabasePath(BaseModel):
    path: str


class DatabaseInfo(BaseModel):
    path: str | None
    is_open: bool


@router.get("/database", response_model=DatabaseInfo)
async def get_database_endpoint():
    """Report which database file is active."""
    return DatabaseInfo(path=database.path, is_open=database.is_open)


@router.post("/database/open", response_model=DatabaseInfo)
async def open_database_endpoint(body: DatabasePath):
    """
    Open (or create) a database file and make it the active one.

    Requests already holding a session finish against the previous file;
    new requests use the new one.
    """
    if not body.path.strip():
        raise HTTPException(
            status_code=HTTP_422_UNPROCESSABLE,
            detail="database path is required",
        )
    try:
        path = await database.open(body.path.strip())
        return DatabaseInfo(path=path, is_open=True)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "open database") from e


@router.post("/database/save-as", response_model=DatabasePath)
async def save_database_as_endpoint(body: DatabasePath):
    """
    Copy the active database file to another path.

    ".db" is appended when the target has no extension. The active file does not change.
    """
    if not body.path.strip():
        raise HTTPException(
            status_code=HTTP_422_UNPROCESSABLE,
            detail="database path is required",
        )
    try:
        path = await database.save_as(body.path.strip())
        return DatabasePath(path=path)
    except HTTPException:
        raise
    except Exception as e:
        raise to_http_exception(e, "save database") from e
