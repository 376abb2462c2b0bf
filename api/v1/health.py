"""Liveness endpoint for the desktop shell."""

from fastapi import APIRouter

import config
from db import database

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Report that the process is up and whether it can serve data.

    Returns:
        dict: Status, environment, app name and the active database file (None when closed)
    """
    settings = config.settings
    return {
        "status": "ok",
        "env": settings.ENV,
        "app": settings.APP_NAME,
        "database_open": database.is_open,
        "database_path": database.path,
    }
