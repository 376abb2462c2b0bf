"""Database configuration and session management."""

import asyncio
import logging
import shutil
from pathlib import Path

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import AsyncAdaptedQueuePool

import config
from errors import ServiceNotInitializedError

logger = logging.getLogger(__name__)

# Base class for declarative models
Base = declarative_base()


def create_engine(path: str) -> AsyncEngine:
    """
    Create an async engine for a SQLite file with the configured pragmas.

    Args:
        path: Path of the database file

    Returns:
        AsyncEngine: Engine with a bounded connection pool
    """
    settings = config.settings
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{path}",
        echo=settings.DB_ECHO,
        poolclass=AsyncAdaptedQueuePool,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=300,
    )
    pragmas = settings.sqlite_pragmas

    @event.listens_for(engine.sync_engine, "connect")
    def _apply_pragmas(dbapi_connection, connection_record):
        # The driver never emits BEGIN before a SELECT; _begin below takes over
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        for name, value in pragmas.items():
            cursor.execute(f"PRAGMA {name}={value}")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _begin(conn):
        # Every statement of a session transaction, reads included, shares one snapshot
        conn.exec_driver_sql("BEGIN")

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory bound to an engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create every table known to the ORM metadata."""
    import models  # noqa: F401  registers all tables on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


class Database:
    """
    Holder of the active database file.

    The desktop shell can switch files at runtime, so the engine and session
    factory are swapped under an exclusive lock and every request resolves
    the factory again through get_db().
    """

    def __init__(self):
        self.path: str | None = None
        self.engine: AsyncEngine | None = None
        self.session_factory: async_sessionmaker[AsyncSession] | None = None
        self._lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        return self.session_factory is not None

    async def open(self, path: str) -> str:
        """
        Open (or create) a database file and make it the active one.

        Args:
            path: Path of the SQLite file

        Returns:
            The path now in use
        """
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(path)
        try:
            await create_schema(engine)
        except Exception:
            await engine.dispose()
            raise

        async with self._lock:
            previous = self.engine
            self.engine = engine
            self.session_factory = create_session_factory(engine)
            self.path = path

        if previous is not None:
            await previous.dispose()
        logger.info("Database opened: path=%s driver=sqlite", path)
        return path

    async def save_as(self, destination: str) -> str:
        """
        Copy the active database file to a new location.

        Args:
            destination: Target path; ".db" is appended when it has no extension

        Returns:
            The path written

        Raises:
            ServiceNotInitializedError: If no database is open
        """
        if not Path(destination).suffix:
            destination += ".db"

        async with self._lock:
            if self.engine is None or self.path is None:
                raise ServiceNotInitializedError("no database is currently open")
            async with self.engine.connect() as conn:
                await conn.execute(text("PRAGMA wal_checkpoint(FULL)"))
            Path(destination).parent.mkdir(parents=True, exist_ok=True)
            await asyncio.to_thread(shutil.copyfile, self.path, destination)

        logger.info("Database copied: source=%s destination=%s", self.path, destination)
        return destination

    async def close(self) -> None:
        """Dispose of the active engine, if any."""
        async with self._lock:
            engine = self.engine
            self.engine = None
            self.session_factory = None
            self.path = None
        if engine is not None:
            await engine.dispose()
            logger.info("Database closed")


# Active database shared by the API layer
database = Database()


async def get_db() -> AsyncSession:
    """
    Dependency function to get database session.

    Yields:
        AsyncSession: Database session

    Raises:
        ServiceNotInitializedError: If no database is open
    """
    session_factory = database.session_factory
    if session_factory is None:
        raise ServiceNotInitializedError()
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db() -> None:
    """
    Open the configured database file and create its tables.
    This should be called on application startup.
    """
    await database.open(config.settings.DATABASE_PATH)


async def close_db() -> None:
    """
    Close database connections.
    This should be called on application shutdown.
    """
    await database.close()
