"""ProjectRole model - a staffing slot (role name + seniority) required by a project."""

from datetime import datetime
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, computed_field
from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from db import Base
from errors import EntityValidationError
from models.common import EntityMixin, check_non_negative, require, trim_fields
from models.query import ListResponse, QueryParams


class RoleLevel(IntEnum):
    UNKNOWN = 0
    JUNIOR = 1
    MID = 2
    SENIOR = 3
    LEAD = 4
    MANAGER = 5
    DIRECTOR = 6
    VP = 7
    C_LEVEL = 8

    @property
    def label(self) -> str:
        return _ROLE_LEVEL_LABELS[self]

    @classmethod
    def is_valid(cls, value) -> bool:
        return value in cls._value2member_map_ and value != cls.UNKNOWN


_ROLE_LEVEL_LABELS = {
    RoleLevel.UNKNOWN: "Unknown",
    RoleLevel.JUNIOR: "Junior",
    RoleLevel.MID: "Mid",
    RoleLevel.SENIOR: "Senior",
    RoleLevel.LEAD: "Lead",
    RoleLevel.MANAGER: "Manager",
    RoleLevel.DIRECTOR: "Director",
    RoleLevel.VP: "VP",
    RoleLevel.C_LEVEL: "C-Level",
}


def role_level_name(level: int) -> str:
    """Human-readable level name; anything outside the enum is "Unknown"."""
    if level in RoleLevel._value2member_map_:
        return RoleLevel(level).label
    return RoleLevel.UNKNOWN.label


class ProjectRole(EntityMixin, Base):
    """ProjectRole ORM model. (project_id, name, level) is unique."""

    __tablename__ = "project_roles"

    project_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=RoleLevel.MID)
    headcount: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    __table_args__ = (
        UniqueConstraint("project_id", "name", "level", name="ux_project_roles_project_name_level"),
    )

    @property
    def level_name(self) -> str:
        return role_level_name(self.level)

    def normalize_defaults(self) -> None:
        if not RoleLevel.is_valid(self.level):
            self.level = RoleLevel.MID
        if not self.headcount:
            self.headcount = 1

    def validate(self) -> None:
        trim_fields(self, "name")

        require(self.name, "project role name is required")
        require(self.project_id, "project role must belong to a project")

        check_non_negative(self.headcount, "project role headcount must be non-negative")

        if not RoleLevel.is_valid(self.level):
            raise EntityValidationError("project role level must be between 1 (junior) and 8 (c-level)")


# Pydantic schemas
class ProjectRoleBase(BaseModel):
    """Base project role schema."""

    project_id: int
    name: str
    level: int = RoleLevel.MID
    headcount: int = 1


class ProjectRoleCreate(ProjectRoleBase):
    """Schema for creating a project role. Level 0 defaults to Mid, headcount 0 to 1."""


class ProjectRoleUpdate(ProjectRoleBase):
    """Schema for updating a project role. The whole row is replaced."""


class ProjectRoleResponse(ProjectRoleBase):
    """Schema for project role response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def level_name(self) -> str:
        return role_level_name(self.level)


class ProjectRoleQueryParams(QueryParams):
    id_in: list[int] = []
    project_id: int = 0
    project_id_in: list[int] = []
    name: str = ""
    name_like: str = ""
    level: int = 0
    level_in: list[int] = []
    headcount_gte: int | None = None
    headcount_lte: int | None = None
    created_at_gte: datetime | None = None
    created_at_lte: datetime | None = None
    updated_at_gte: datetime | None = None
    updated_at_lte: datetime | None = None


ProjectRoleListResponse = ListResponse[ProjectRoleResponse]
