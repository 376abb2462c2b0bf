"""Milestone model - a dated checkpoint within a project."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict
from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from db import Base
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


class Milestone(EntityMixin, Base):
    """Milestone ORM model."""

    __tablename__ = "milestones"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    project_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[int] = mapped_column(Integer, nullable=False, default=Status.ACTIVE)

    def normalize_defaults(self) -> None:
        self.status = default_status(self.status)

    def validate(self) -> None:
        trim_fields(self, "name", "description")

        require(self.name, "milestone name is required")
        require(self.project_id, "milestone must belong to a project")

        check_date_range(self.start_date, self.end_date, "milestone end date must be after start date")

        check_status(self.status, "milestone status must be 1 (inactive) or 2 (active)")


# Pydantic schemas
class MilestoneBase(BaseModel):
    """Base milestone schema."""

    name: str
    description: str = ""
    project_id: int
    start_date: date | None = None
    end_date: date | None = None
    status: int = Status.ACTIVE


class MilestoneCreate(MilestoneBase):
    """Schema for creating a milestone."""


class MilestoneUpdate(MilestoneBase):
    """Schema for updating a milestone. The whole row is replaced."""


class MilestoneResponse(MilestoneBase):
    """Schema for milestone response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class MilestoneQueryParams(QueryParams):
    id_in: list[int] = []
    project_id: int = 0
    project_id_in: list[int] = []
    name: str = ""
    name_like: str = ""
    description_like: str = ""
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


MilestoneListResponse = ListResponse[MilestoneResponse]
