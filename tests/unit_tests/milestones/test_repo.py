"""Unit tests for milestones repository layer."""

from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from errors import EntityValidationError
from models.milestone import Milestone, MilestoneQueryParams
from models.project import Project
from models.task import Task
from repos import milestones_repo, tasks_repo


@pytest.mark.asyncio
async def test_repo_create_milestone_rejects_reversed_dates(db_session: AsyncSession, project: Project):
    with pytest.raises(EntityValidationError):
        await milestones_repo.create(
            db_session,
            Milestone(
                name="Launch",
                project_id=project.id,
                start_date=date(2025, 3, 1),
                end_date=date(2025, 2, 1),
            ),
        )


@pytest.mark.asyncio
async def test_repo_get_many_by_project(db_session: AsyncSession, project: Project):
    for name in ("Kickoff", "Beta", "Launch"):
        await milestones_repo.create(db_session, Milestone(name=name, project_id=project.id))
    await db_session.commit()

    milestones, total = await milestones_repo.get_many(
        db_session,
        MilestoneQueryParams(project_id=project.id, name_like="a"),
    )

    assert total == 2
    assert [milestone.name for milestone in milestones] == ["Beta", "Launch"]


@pytest.mark.asyncio
async def test_repo_delete_milestone_unlinks_tasks(db_session: AsyncSession, project: Project):
    """Test: Tasks survive their milestone with the reference cleared."""
    milestone = await milestones_repo.create(db_session, Milestone(name="Launch", project_id=project.id))
    task = await tasks_repo.create(
        db_session,
        Task(name="Release notes", project_id=project.id, milestone_id=milestone.id),
    )
    await db_session.commit()

    await milestones_repo.delete(db_session, milestone.id)
    await db_session.commit()

    fetched = await tasks_repo.get_one(db_session, task.id)
    assert fetched.milestone_id is None
