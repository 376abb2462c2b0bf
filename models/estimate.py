"""Response schemas for the per-project estimate summary."""

from pydantic import BaseModel, Field


class EffortSummary(BaseModel):
    """Effort expressed in the project's own work-time units."""

    hours: float = 0
    days: float = 0
    weeks: float = 0
    man_months: float = 0


class CostTotals(BaseModel):
    estimated: float = 0
    actual: float = 0


class ProjectEstimate(BaseModel):
    """Total estimated task effort and cost totals for one project."""

    project_id: int
    currency: str
    hours_per_day: int
    days_per_week: int
    task_count: int
    effort: EffortSummary
    costs_by_type: dict[str, CostTotals] = Field(default_factory=dict)
    total_cost: CostTotals = Field(default_factory=CostTotals)
