"""ProjectResource model - allocation of a human resource to a project."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict
from sqlalchemy import CheckConstraint, Date, Float, ForeignKey, Integer, String, Text, UniqueConstraint
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

MIN_ALLOCATION = 0
MAX_ALLOCATION = 100


class ProjectResource(EntityMixin, Base):
    """ProjectResource ORM model. A human resource is allocated at most once per project."""

    __tablename__ = "project_resources"

    project_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    human_resource_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("human_resources.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # e.g. "Developer", "Tech Lead", "QA"
    role: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    # Percent of the resource's time
    allocation: Mapped[float] = mapped_column(Float, nullable=False, default=MAX_ALLOCATION)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[int] = mapped_column(Integer, nullable=False, default=Status.ACTIVE)

    __table_args__ = (
        UniqueConstraint("project_id", "human_resource_id", name="ux_project_resources_project_resource"),
        CheckConstraint("allocation >= 0 AND allocation <= 100", name="ck_project_resources_allocation"),
    )

    @property
    def is_active(self) -> bool:
        return self.status == Status.ACTIVE

    def normalize_defaults(self) -> None:
        self.status = default_status(self.status)
        if self.allocation is None:
            self.allocation = MAX_ALLOCATION

    def validate(self) -> None:
        trim_fields(self, "role", "notes")

        require(self.project_id, "project resource must have a valid project ID")
        require(self.human_resource_id, "project resource must have a valid human resource ID")

        check_date_range(self.start_date, self.end_date, "project resource end date must be after start date")

        if self.allocation is None or not MIN_ALLOCATION <= self.allocation <= MAX_ALLOCATION:
            raise EntityValidationError("allocation percentage must be between 0 and 100")

        check_status(self.status, "project resource status must be 1 (inactive) or 2 (active)")


# Pydantic schemas
class ProjectResourceBase(BaseModel):
    """Base project resource schema."""

    project_id: int
    human_resource_id: int
    role: str = ""
    allocation: float = MAX_ALLOCATION
    start_date: date | None = None
    end_date: date | None = None
    notes: str = ""
    status: int = Status.ACTIVE


class ProjectResourceCreate(ProjectResourceBase):
    """Schema for creating a project resource."""


class ProjectResourceUpdate(ProjectResourceBase):
    """Schema for updating a project resource. The whole row is replaced."""


class ProjectResourceResponse(ProjectResourceBase):
    """Schema for project resource response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class ProjectResourceQueryParams(QueryParams):
    id_in: list[int] = []
    project_id: int = 0
    project_id_in: list[int] = []
    human_resource_id: int = 0
    human_resource_id_in: list[int] = []
    role: str = ""
    role_like: str = ""
    allocation_gte: float | None = None
    allocation_lte: float | None = None
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


ProjectResourceListResponse = ListResponse[ProjectResourceResponse]
