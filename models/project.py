"""Project model - a client engagement with its own work-time configuration."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import JSON, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from db import Base
from errors import EntityValidationError
from models.common import (
    EntityMixin,
    Status,
    check_date_range,
    check_status,
    default_status,
    require,
    trim_fields,
)
from models.query import ListResponse, QueryParams

# Work-time defaults used when a project leaves its configuration unset
DEFAULT_HOURS_PER_DAY = 8
DEFAULT_DAYS_PER_WEEK = 5
DEFAULT_DAYS_PER_MONTH = 20
# 0 = Sunday ... 6 = Saturday
DEFAULT_WORKING_DAYS = [1, 2, 3, 4, 5]
DAYS_IN_WEEK = 7
MAX_HOURS_PER_DAY = 24

DEFAULT_TIMEZONE = "UTC"
DEFAULT_CURRENCY = "USD"


class Project(EntityMixin, Base):
    """Project ORM model."""

    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    client_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("clients.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # 0 means "use the default" until normalize_defaults() fills it in
    hours_per_day: Mapped[int] = mapped_column(Integer, nullable=False, default=DEFAULT_HOURS_PER_DAY)
    days_per_week: Mapped[int] = mapped_column(Integer, nullable=False, default=DEFAULT_DAYS_PER_WEEK)
    working_days: Mapped[list[int]] = mapped_column(
        JSON,
        nullable=False,
        default=lambda: list(DEFAULT_WORKING_DAYS),
    )
    timezone: Mapped[str] = mapped_column(String(64), nullable=False, default=DEFAULT_TIMEZONE)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default=DEFAULT_CURRENCY)
    status: Mapped[int] = mapped_column(Integer, nullable=False, default=Status.ACTIVE, index=True)

    @property
    def is_active(self) -> bool:
        return self.status == Status.ACTIVE

    def normalize_defaults(self) -> None:
        self.status = default_status(self.status)
        if not self.hours_per_day:
            self.hours_per_day = DEFAULT_HOURS_PER_DAY
        if not self.days_per_week:
            self.days_per_week = DEFAULT_DAYS_PER_WEEK
        if not self.working_days:
            self.working_days = list(DEFAULT_WORKING_DAYS)
        if not self.timezone:
            self.timezone = DEFAULT_TIMEZONE
        if not self.currency:
            self.currency = DEFAULT_CURRENCY

    def validate(self) -> None:
        trim_fields(self, "name", "description", "timezone", "currency")

        require(self.name, "project name is required")
        require(self.client_id, "project must belong to a client")

        check_date_range(self.start_date, self.end_date, "project end date must be after start date")

        if self.hours_per_day and not 1 <= self.hours_per_day <= MAX_HOURS_PER_DAY:
            raise EntityValidationError("hours per day must be between 1 and 24")
        if self.days_per_week and not 1 <= self.days_per_week <= DAYS_IN_WEEK:
            raise EntityValidationError("days per week must be between 1 and 7")
        validate_working_days(self.working_days or [])

        check_status(self.status, "project status must be 1 (inactive) or 2 (active)")

    # Work-time conversions
    def get_hours_per_day(self) -> int:
        return self.hours_per_day or DEFAULT_HOURS_PER_DAY

    def get_days_per_week(self) -> int:
        return self.days_per_week or DEFAULT_DAYS_PER_WEEK

    def hours_to_days(self, hours: float) -> float:
        return hours / self.get_hours_per_day()

    def hours_to_weeks(self, hours: float) -> float:
        return self.hours_to_days(hours) / self.get_days_per_week()

    def hours_to_man_months(self, hours: float) -> float:
        return self.hours_to_days(hours) / DEFAULT_DAYS_PER_MONTH


def validate_working_days(working_days: list[int]) -> None:
    """
    Check a working-day list: at most 7 entries, each 0 (Sunday) to 6 (Saturday), no repeats.

    Raises:
        EntityValidationError: On the first rule violated, in that order
    """
    if len(working_days) > DAYS_IN_WEEK:
        raise EntityValidationError("working days cannot exceed 7 days of a week")
    for day in working_days:
        if not 0 <= day < DAYS_IN_WEEK:
            raise EntityValidationError("working day must be between 0 (Sunday) and 6 (Saturday)")
    if len(set(working_days)) != len(working_days):
        raise EntityValidationError("working days must not contain duplicates")


# Pydantic schemas
class ProjectBase(BaseModel):
    """Base project schema."""

    name: str
    description: str = ""
    client_id: int
    start_date: date | None = None
    end_date: date | None = None
    hours_per_day: int = 0
    days_per_week: int = 0
    working_days: list[int] = Field(default_factory=list)
    timezone: str = ""
    currency: str = ""
    status: int = Status.ACTIVE


class ProjectCreate(ProjectBase):
    """Schema for creating a project. Zero/empty work-time values take the defaults."""


class ProjectUpdate(ProjectBase):
    """Schema for updating a project. The whole row is replaced."""


class ProjectResponse(ProjectBase):
    """Schema for project response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class ProjectQueryParams(QueryParams):
    """Filters for listing projects. name_like and description_like form the search box."""

    id_in: list[int] = []
    name: str = ""
    name_like: str = ""
    description_like: str = ""
    client_id: int = 0
    client_id_in: list[int] = []
    status: int = 0
    status_in: list[int] = []
    start_date_gte: date | None = None
    start_date_lte: date | None = None
    end_date_gte: date | None = None
    end_date_lte: date | None = None
    created_at_gte: datetime | None = None
    created_at_lte: datetime | None = None
    updated_at_gte: datetime | None = None
    updated_at_lte: datetime | None = None


ProjectListResponse = ListResponse[ProjectResponse]
