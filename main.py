"""FastAPI application factory and main entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
import logging_config
from api import router as api_router
from db import close_db, database, init_db
from errors import ServiceNotInitializedError

APP_VERSION = "0.1.0"

logging_config.setup_logging(config.settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Open the configured database file on startup and release it on shutdown.
    """
    await init_db()
    yield
    await close_db()


async def service_not_initialized_handler(request: Request, exc: ServiceNotInitializedError):
    """A database file was closed between dependency resolution and use."""
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc)},
    )


def create_app() -> FastAPI:
    """
    Build the API application.

    Returns:
        FastAPI: App with CORS for the desktop shell and every v1 router mounted
    """
    settings = config.settings
    application = FastAPI(
        title="Plan Craft Backend",
        description="Project estimation and resource planning backend",
        version=APP_VERSION,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(ServiceNotInitializedError, service_not_initialized_handler)
    application.include_router(api_router.api_router, prefix=settings.API_PREFIX)

    @application.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": "Plan Craft Backend API",
            "version": APP_VERSION,
            "database": database.path,
        }

    return application


app = create_app()
