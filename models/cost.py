"""Cost model - an estimated or actual expense attached to a project, milestone or task."""

import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict
from sqlalchemy import Boolean, Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from db import Base
from errors import EntityValidationError
from models.common import (
    EntityMixin,
    Status,
    check_non_negative,
    check_status,
    default_status,
    require,
    trim_fields,
)
from models.query import ListResponse, QueryParams

DEFAULT_COST_CURRENCY = "USD"

# Labor pricing assumes 8-hour days and 20-day months
LABOR_HOURS_PER_DAY = 8
LABOR_HOURS_PER_MONTH = 160


class CostType(str, Enum):
    LABOR = "labor"
    MATERIAL = "material"
    EQUIPMENT = "equipment"
    OVERHEAD = "overhead"
    # Cloud, hosting, servers
    INFRASTRUCTURE = "infrastructure"
    # Third-party services, SaaS, APIs
    SERVICE = "service"
    OTHER = "other"


class RateType(str, Enum):
    HOURLY = "hourly"
    DAILY = "daily"
    MONTHLY = "monthly"
    FIXED = "fixed"


_COST_TYPES = {cost_type.value for cost_type in CostType}
_RATE_TYPES = {rate_type.value for rate_type in RateType}


def _fk(target: str, ondelete: str):
    return mapped_column(Integer, ForeignKey(target, ondelete=ondelete), nullable=True, index=True)


class Cost(EntityMixin, Base):
    """Cost ORM model."""

    __tablename__ = "costs"

    project_id: Mapped[int | None] = _fk("projects.id", "CASCADE")
    milestone_id: Mapped[int | None] = _fk("milestones.id", "SET NULL")
    task_id: Mapped[int | None] = _fk("tasks.id", "CASCADE")

    type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    # Free-form grouping label
    category: Mapped[str] = mapped_column(String(100), nullable=False, default="", index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    amount: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default=DEFAULT_COST_CURRENCY)
    quantity: Mapped[float] = mapped_column(Float, nullable=False, default=1)
    unit_cost: Mapped[float] = mapped_column(Float, nullable=False, default=0)

    # Labor costs point at either a named resource or a project role
    resource_id: Mapped[int | None] = _fk("human_resources.id", "SET NULL")
    project_role_id: Mapped[int | None] = _fk("project_roles.id", "SET NULL")
    rate_type: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    hours: Mapped[float] = mapped_column(Float, nullable=False, default=0)

    # False means the amount was actually spent
    is_estimated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    date: Mapped[dt.date | None] = mapped_column(Date, nullable=True, index=True)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[int] = mapped_column(Integer, nullable=False, default=Status.ACTIVE)

    @property
    def is_labor(self) -> bool:
        return self.type == CostType.LABOR.value

    @property
    def is_actual(self) -> bool:
        return not self.is_estimated

    def normalize_defaults(self) -> None:
        self.status = default_status(self.status)
        if not self.currency:
            self.currency = DEFAULT_COST_CURRENCY

    def validate(self) -> None:
        trim_fields(self, "name", "category", "currency", "notes")

        require(self.name, "cost name is required")

        if not (self.project_id or self.milestone_id or self.task_id):
            raise EntityValidationError("cost must be associated with a project, milestone, or task")

        check_non_negative(self.amount, "amount cannot be negative")
        check_non_negative(self.quantity, "quantity cannot be negative")
        check_non_negative(self.unit_cost, "unit cost cannot be negative")
        check_non_negative(self.hours, "hours cannot be negative")

        if self.type not in _COST_TYPES:
            raise EntityValidationError("invalid cost type")
        if self.rate_type and self.rate_type not in _RATE_TYPES:
            raise EntityValidationError("invalid rate type")
        check_status(self.status, "cost status must be 1 (inactive) or 2 (active)")

        self.derive_amount()

        if self.is_labor and not (self.resource_id or self.project_role_id):
            raise EntityValidationError("labor costs must have a resource or project role")

    @property
    def total_amount(self) -> float:
        """unit_cost * quantity when both are positive, otherwise the stored amount."""
        if self.unit_cost and self.quantity and self.unit_cost > 0 and self.quantity > 0:
            return self.unit_cost * self.quantity
        return self.amount or 0

    def derive_amount(self) -> None:
        """Set amount to unit_cost * quantity when both are positive and the amount is unset or stale."""
        calculated = self.total_amount
        if self.amount != calculated:
            self.amount = calculated

    def calculate_labor_cost(self, rate: float) -> float:
        """
        Price the cost's hours at a rate expressed in its rate type.

        Hours convert to days at 8 hours and to months at 160 hours (20 days of 8 hours).
        Non-labor costs and costs without hours are 0; fixed or unset rate types
        return the stored amount.

        Args:
            rate: Price per hour, day or month, matching rate_type
        """
        if not self.is_labor or not self.hours or self.hours <= 0:
            return 0
        if self.rate_type == RateType.HOURLY.value:
            return self.hours * rate
        if self.rate_type == RateType.DAILY.value:
            return self.hours / LABOR_HOURS_PER_DAY * rate
        if self.rate_type == RateType.MONTHLY.value:
            return self.hours / LABOR_HOURS_PER_MONTH * rate
        return self.amount or 0


# Pydantic schemas
class CostBase(BaseModel):
    """Base cost schema."""

    project_id: int | None = None
    milestone_id: int | None = None
    task_id: int | None = None
    type: CostType
    category: str = ""
    name: str
    amount: float = 0
    currency: str = ""
    quantity: float = 1
    unit_cost: float = 0
    resource_id: int | None = None
    project_role_id: int | None = None
    rate_type: RateType | None = None
    hours: float = 0
    is_estimated: bool = True
    date: dt.date | None = None
    notes: str = ""
    status: int = Status.ACTIVE


class CostCreate(CostBase):
    """Schema for creating a cost. amount is derived from unit_cost * quantity when both are set."""


class CostUpdate(CostBase):
    """Schema for updating a cost. The whole row is replaced."""


class CostResponse(CostBase):
    """Schema for cost response."""

    model_config = ConfigDict(from_attributes=True)

    type: str
    rate_type: str = ""
    id: int
    created_at: dt.datetime
    updated_at: dt.datetime


class CostQueryParams(QueryParams):
    """Filters for listing costs. name_like, category_like and notes_like form the search box."""

    id_in: list[int] = []
    project_id: int = 0
    project_id_in: list[int] = []
    milestone_id: int = 0
    milestone_id_in: list[int] = []
    task_id: int = 0
    task_id_in: list[int] = []
    resource_id: int = 0
    project_role_id: int = 0
    type: str = ""
    type_in: list[str] = []
    category: str = ""
    category_like: str = ""
    name: str = ""
    name_like: str = ""
    notes_like: str = ""
    currency: str = ""
    rate_type: str = ""
    is_estimated: bool | None = None
    status: int = 0
    status_in: list[int] = []
    amount_gte: float | None = None
    amount_lte: float | None = None
    hours_gte: float | None = None
    hours_lte: float | None = None
    date_gte: dt.date | None = None
    date_lte: dt.date | None = None
    created_at_gte: dt.datetime | None = None
    created_at_lte: dt.datetime | None = None
    updated_at_gte: dt.datetime | None = None
    updated_at_lte: dt.datetime | None = None


CostListResponse = ListResponse[CostResponse]
