"""Pytest configuration and fixtures."""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from db import create_engine, create_schema, create_session_factory, database
from main import app
from models.client import Client
from models.human_resource import HumanResource
from models.project import Project
from repos import clients_repo, human_resources_repo, projects_repo


@pytest_asyncio.fixture(scope="function")
async def db_engine(tmp_path):
    """Engine bound to a fresh SQLite file for each test."""
    engine = create_engine(str(tmp_path / "test.db"))
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine):
    """Create a test database session."""
    session_factory = create_session_factory(db_engine)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def api_client(tmp_path):
    """HTTP client for the app with the active database pointed at a temporary file."""
    await database.open(str(tmp_path / "api.db"))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    await database.close()


@pytest_asyncio.fixture
async def client(db_session) -> Client:
    """A persisted client."""
    created = await clients_repo.create(
        db_session,
        Client(name="Acme", email="contact@acme.com"),
    )
    await db_session.commit()
    return created


@pytest_asyncio.fixture
async def project(db_session, client) -> Project:
    """A persisted project owned by the client fixture."""
    created = await projects_repo.create(
        db_session,
        Project(name="Website Revamp", client_id=client.id),
    )
    await db_session.commit()
    return created


@pytest_asyncio.fixture
async def human_resource(db_session) -> HumanResource:
    """A persisted human resource."""
    created = await human_resources_repo.create(
        db_session,
        HumanResource(name="Jane Doe", title="Backend Engineer", level="Senior"),
    )
    await db_session.commit()
    return created
