"""Service computing effort and cost estimates for a project."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from models.estimate import CostTotals, EffortSummary, ProjectEstimate
from repos import estimates_repo, projects_repo

logger = logging.getLogger(__name__)


async def get_project_estimate(session: AsyncSession, *, project_id: int) -> ProjectEstimate:
    """
    Summarize a project's estimated effort and its costs.

    Effort is the sum of non-cancelled task estimates, converted with the
    project's hours per day and days per week (20 working days per man-month).
    Costs are split by type into estimated and actual totals.

    Args:
        session: Database session
        project_id: Project ID

    Returns:
        ProjectEstimate

    Raises:
        NotFoundError: If the project does not exist
    """
    project = await projects_repo.get_one(session, project_id)
    task_count, hours = await estimates_repo.sum_task_effort(session, project_id=project_id)

    costs_by_type: dict[str, CostTotals] = {}
    total_cost = CostTotals()
    for cost_type, is_estimated, amount in await estimates_repo.sum_costs_by_type(session, project_id=project_id):
        totals = costs_by_type.setdefault(cost_type, CostTotals())
        if is_estimated:
            totals.estimated += amount
            total_cost.estimated += amount
        else:
            totals.actual += amount
            total_cost.actual += amount

    logger.debug(
        "Project estimate computed: project_id=%s tasks=%s hours=%s",
        project_id,
        task_count,
        hours,
    )
    return ProjectEstimate(
        project_id=project.id,
        currency=project.currency,
        hours_per_day=project.get_hours_per_day(),
        days_per_week=project.get_days_per_week(),
        task_count=task_count,
        effort=EffortSummary(
            hours=hours,
            days=project.hours_to_days(hours),
            weeks=project.hours_to_weeks(hours),
            man_months=project.hours_to_man_months(hours),
        ),
        costs_by_type=costs_by_type,
        total_cost=total_cost,
    )
