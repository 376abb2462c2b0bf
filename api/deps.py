"""FastAPI dependencies for the database session."""

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from db import database
from db import get_db as get_db_session


async def get_db() -> AsyncSession:
    """
    Dependency to get database session.
    Reuses the get_db function from db.py.

    Raises:
        HTTPException: 503 while no database file is open
    """
    if not database.is_open:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="service not initialized",
        )
    async for session in get_db_session():
        yield session
