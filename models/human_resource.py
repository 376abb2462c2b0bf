"""HumanResource model - a person who can be allocated to projects."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from db import Base
from models.common import EntityMixin, Status, check_status, default_status, require, trim_fields
from models.query import ListResponse, QueryParams


class HumanResource(EntityMixin, Base):
    """HumanResource ORM model."""

    __tablename__ = "human_resources"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    # Free-text seniority (e.g. "Senior"); project roles use the RoleLevel enum instead
    level: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[int] = mapped_column(Integer, nullable=False, default=Status.ACTIVE)

    @property
    def is_active(self) -> bool:
        return self.status == Status.ACTIVE

    def normalize_defaults(self) -> None:
        self.status = default_status(self.status)

    def validate(self) -> None:
        trim_fields(self, "name", "title", "level")

        require(self.name, "human resource name is required")
        require(self.title, "human resource title is required")
        require(self.level, "human resource level is required")

        check_status(self.status, "human resource status must be 1 (inactive) or 2 (active)")


# Pydantic schemas
class HumanResourceBase(BaseModel):
    """Base human resource schema."""

    name: str
    title: str
    level: str
    status: int = Status.ACTIVE


class HumanResourceCreate(HumanResourceBase):
    """Schema for creating a human resource."""


class HumanResourceUpdate(HumanResourceBase):
    """Schema for updating a human resource. The whole row is replaced."""


class HumanResourceResponse(HumanResourceBase):
    """Schema for human resource response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class HumanResourceQueryParams(QueryParams):
    id_in: list[int] = []
    name: str = ""
    name_like: str = ""
    title: str = ""
    title_like: str = ""
    level: str = ""
    level_like: str = ""
    status: int = 0
    status_in: list[int] = []
    created_at_gte: datetime | None = None
    created_at_lte: datetime | None = None
    updated_at_gte: datetime | None = None
    updated_at_lte: datetime | None = None


HumanResourceListResponse = ListResponse[HumanResourceResponse]
