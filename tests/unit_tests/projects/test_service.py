"""Unit tests for projects service layer, including the estimate summary."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from errors import EntityValidationError, NotFoundError
from models.common import Status
from models.cost import Cost, CostType
from models.milestone import Milestone
from models.project import Project, ProjectCreate, ProjectUpdate
from models.project_role import ProjectRole
from models.task import Task, TaskStatus
from repos import costs_repo, milestones_repo, project_roles_repo, tasks_repo
from services.estimates_service import get_project_estimate
from services.projects_service import create_project, get_project, list_projects, update_project


@pytest.mark.asyncio
async def test_service_create_project(db_session: AsyncSession, client):
    project = await create_project(db_session, payload=ProjectCreate(name="Website", client_id=client.id))

    assert project.id is not None
    assert project.client_id == client.id
    assert project.status == Status.ACTIVE


@pytest.mark.asyncio
async def test_service_create_project_rejects_bad_working_days(db_session: AsyncSession, client):
    with pytest.raises(EntityValidationError, match="duplicates"):
        await create_project(
            db_session,
            payload=ProjectCreate(name="Website", client_id=client.id, working_days=[1, 1]),
        )

    result = await list_projects(db_session)
    assert result.total == 0


@pytest.mark.asyncio
async def test_service_update_project_replaces_row(db_session: AsyncSession, project: Project):
    """Test: Update overwrites all fields and keeps created_at."""
    project_id = project.id
    client_id = project.client_id
    created_at = project.created_at

    rows = await update_project(
        db_session,
        project_id=project_id,
        payload=ProjectUpdate(
            name="Website v2",
            client_id=client_id,
            hours_per_day=7,
            days_per_week=5,
            working_days=[1, 2, 3, 4, 5],
            timezone="Europe/Berlin",
            currency="EUR",
        ),
    )

    assert rows == 1
    fetched = await get_project(db_session, project_id=project_id)
    assert fetched.name == "Website v2"
    assert fetched.hours_per_day == 7
    assert fetched.timezone == "Europe/Berlin"
    assert fetched.created_at == created_at


@pytest.mark.asyncio
async def test_estimate_for_missing_project(db_session: AsyncSession):
    with pytest.raises(NotFoundError):
        await get_project_estimate(db_session, project_id=404)


@pytest.mark.asyncio
async def test_estimate_empty_project(db_session: AsyncSession, project: Project):
    estimate = await get_project_estimate(db_session, project_id=project.id)

    assert estimate.task_count == 0
    assert estimate.effort.hours == 0
    assert estimate.costs_by_type == {}
    assert estimate.total_cost.estimated == 0
    assert estimate.total_cost.actual == 0


@pytest.mark.asyncio
async def test_estimate_sums_effort_and_costs(db_session: AsyncSession, project: Project):
    """Test: Effort skips cancelled tasks and costs are reached through milestones and tasks too."""
    milestone = await milestones_repo.create(db_session, Milestone(name="Launch", project_id=project.id))
    design = await tasks_repo.create(db_session, Task(name="Design", project_id=project.id, estimated_effort=80))
    await tasks_repo.create(db_session, Task(name="Build", project_id=project.id, estimated_effort=240))
    await tasks_repo.create(
        db_session,
        Task(name="Dropped", project_id=project.id, estimated_effort=500, status=TaskStatus.CANCELLED),
    )
    role = await project_roles_repo.create(db_session, ProjectRole(project_id=project.id, name="Developer"))

    await costs_repo.create(
        db_session,
        Cost(project_id=project.id, type=CostType.INFRASTRUCTURE.value, name="Hosting", amount=1200),
    )
    await costs_repo.create(
        db_session,
        Cost(
            milestone_id=milestone.id,
            type=CostType.INFRASTRUCTURE.value,
            name="CDN",
            amount=300,
            is_estimated=False,
        ),
    )
    await costs_repo.create(
        db_session,
        Cost(
            task_id=design.id,
            type=CostType.LABOR.value,
            name="Design work",
            project_role_id=role.id,
            unit_cost=50,
            quantity=80,
        ),
    )
    await costs_repo.create(
        db_session,
        Cost(
            project_id=project.id,
            type=CostType.SERVICE.value,
            name="Old licence",
            amount=999,
            status=Status.INACTIVE,
        ),
    )
    await db_session.commit()

    estimate = await get_project_estimate(db_session, project_id=project.id)

    assert estimate.task_count == 2
    assert estimate.effort.hours == 320
    assert estimate.effort.days == 40
    assert estimate.effort.weeks == 8
    assert estimate.effort.man_months == 2
    assert set(estimate.costs_by_type) == {"infrastructure", "labor"}
    assert estimate.costs_by_type["infrastructure"].estimated == 1200
    assert estimate.costs_by_type["infrastructure"].actual == 300
    assert estimate.costs_by_type["labor"].estimated == 4000
    assert estimate.total_cost.estimated == 5200
    assert estimate.total_cost.actual == 300
    assert estimate.currency == "USD"
