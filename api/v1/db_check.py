"""Database connectivity check endpoint."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from api.deps import get_db

router = APIRouter()


@router.get("/db-check")
async def db_check(db: AsyncSession = Depends(get_db)):
    """
    Check database connectivity and report the SQLite settings in effect.

    Returns:
        dict: Database status, journal mode and foreign key enforcement

    Raises:
        HTTPException: If database connection fails
    """
    try:
        result = await db.execute(text("SELECT 1"))
        result.scalar()
        journal_mode = (await db.execute(text("PRAGMA journal_mode"))).scalar()
        foreign_keys = (await db.execute(text("PRAGMA foreign_keys"))).scalar()
        return {
            "db": "ok",
            "journal_mode": journal_mode,
            "foreign_keys": bool(foreign_keys),
        }
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Database connection failed: {str(e)}",
        )
