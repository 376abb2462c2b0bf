"""Unit tests for projects repository layer.

These tests verify database operations in isolation.
"""

from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from errors import EntityValidationError, NotFoundError
from models.client import Client
from models.milestone import Milestone
from models.project import Project, ProjectQueryParams
from models.query import Sort
from models.task import Task
from repos import clients_repo, milestones_repo, projects_repo, tasks_repo


@pytest.mark.asyncio
async def test_repo_create_project_applies_work_time_defaults(db_session: AsyncSession, client: Client):
    """Test: Unset work-time settings take the defaults on create."""
    project = await projects_repo.create(db_session, Project(name="  Website  ", client_id=client.id))
    await db_session.commit()

    fetched = await projects_repo.get_one(db_session, project.id)

    assert fetched.name == "Website"
    assert fetched.hours_per_day == 8
    assert fetched.days_per_week == 5
    assert fetched.working_days == [1, 2, 3, 4, 5]
    assert fetched.timezone == "UTC"
    assert fetched.currency == "USD"


@pytest.mark.asyncio
async def test_repo_create_project_keeps_explicit_work_time(db_session: AsyncSession, client: Client):
    project = await projects_repo.create(
        db_session,
        Project(
            name="Mobile App",
            client_id=client.id,
            hours_per_day=6,
            days_per_week=4,
            working_days=[1, 2, 3, 4],
            currency="EUR",
        ),
    )

    assert project.hours_per_day == 6
    assert project.days_per_week == 4
    assert project.working_days == [1, 2, 3, 4]
    assert project.currency == "EUR"


@pytest.mark.asyncio
async def test_repo_create_project_rejects_reversed_dates(db_session: AsyncSession, client: Client):
    with pytest.raises(EntityValidationError, match="end date must be after start date"):
        await projects_repo.create(
            db_session,
            Project(
                name="Backwards",
                client_id=client.id,
                start_date=date(2025, 6, 1),
                end_date=date(2025, 1, 1),
            ),
        )


@pytest.mark.asyncio
async def test_repo_get_many_filters_by_client_and_date_range(db_session: AsyncSession, client: Client):
    other = await clients_repo.create(db_session, Client(name="Globex", email="info@globex.com"))
    for name, owner, start in (
        ("Q1 Audit", client.id, date(2025, 1, 15)),
        ("Q2 Audit", client.id, date(2025, 4, 15)),
        ("Q3 Audit", client.id, date(2025, 7, 15)),
        ("Globex Audit", other.id, date(2025, 4, 20)),
    ):
        await projects_repo.create(db_session, Project(name=name, client_id=owner, start_date=start))
    await db_session.commit()

    params = ProjectQueryParams(
        client_id=client.id,
        start_date_gte=date(2025, 2, 1),
        sorts=[Sort(field="start_date", order="desc")],
    )
    projects, total = await projects_repo.get_many(db_session, params)

    assert total == 2
    assert [project.name for project in projects] == ["Q3 Audit", "Q2 Audit"]


@pytest.mark.asyncio
async def test_repo_get_many_search_covers_description(db_session: AsyncSession, client: Client):
    await projects_repo.create(db_session, Project(name="Website", client_id=client.id))
    await projects_repo.create(
        db_session,
        Project(name="Backend", client_id=client.id, description="API for the Website"),
    )
    await projects_repo.create(db_session, Project(name="Data", client_id=client.id))
    await db_session.commit()

    projects, total = await projects_repo.get_many(
        db_session,
        ProjectQueryParams(name_like="Website", description_like="Website"),
    )

    assert total == 2
    assert {project.name for project in projects} == {"Website", "Backend"}


@pytest.mark.asyncio
async def test_repo_delete_project_cascades_to_children(db_session: AsyncSession, project: Project):
    """Test: Removing a project removes its milestones and tasks."""
    milestone = await milestones_repo.create(db_session, Milestone(name="Launch", project_id=project.id))
    task = await tasks_repo.create(db_session, Task(name="Design", project_id=project.id))
    await db_session.commit()

    await projects_repo.delete(db_session, project.id)
    await db_session.commit()

    with pytest.raises(NotFoundError):
        await milestones_repo.get_one(db_session, milestone.id)
    with pytest.raises(NotFoundError):
        await tasks_repo.get_one(db_session, task.id)
