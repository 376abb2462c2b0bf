"""Task model - a unit of estimated work, optionally nested and tied to a milestone."""

from datetime import datetime
from enum import IntEnum

from pydantic import BaseModel, ConfigDict
from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from db import Base
from errors import EntityValidationError
from models.common import EntityMixin, check_non_negative, require, trim_fields
from models.query import ListResponse, QueryParams

MIN_TASK_LEVEL = 1
MAX_TASK_LEVEL = 10


class Priority(IntEnum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4


class TaskStatus(IntEnum):
    TODO = 1
    IN_PROGRESS = 2
    DONE = 3
    CANCELLED = 4


class Task(EntityMixin, Base):
    """Task ORM model. Level 1 is an epic, 2 a task, 3 a subtask and so on."""

    __tablename__ = "tasks"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    project_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    milestone_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("milestones.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    parent_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("tasks.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    level: Mapped[int] = mapped_column(Integer, nullable=False, default=MIN_TASK_LEVEL)
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=Priority.MEDIUM)
    # Hours
    estimated_effort: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    status: Mapped[int] = mapped_column(Integer, nullable=False, default=TaskStatus.TODO, index=True)

    @property
    def is_epic(self) -> bool:
        return self.level == MIN_TASK_LEVEL and self.parent_id is None

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.DONE

    def normalize_defaults(self) -> None:
        if not self.level:
            self.level = MIN_TASK_LEVEL
        if self.priority not in Priority._value2member_map_:
            self.priority = Priority.MEDIUM
        if self.status not in TaskStatus._value2member_map_:
            self.status = TaskStatus.TODO

    def validate(self) -> None:
        trim_fields(self, "name", "description")

        require(self.name, "task name is required")
        require(self.project_id, "task must belong to a project")

        if self.level is None or not MIN_TASK_LEVEL <= self.level <= MAX_TASK_LEVEL:
            raise EntityValidationError("level must be between 1 and 10")
        check_non_negative(self.estimated_effort, "estimated effort cannot be negative")

        if self.priority not in Priority._value2member_map_:
            raise EntityValidationError("invalid priority")
        if self.status not in TaskStatus._value2member_map_:
            raise EntityValidationError("invalid task status")

        if self.id is not None and self.parent_id == self.id:
            raise EntityValidationError("task cannot be its own parent")


# Pydantic schemas
class TaskBase(BaseModel):
    """Base task schema."""

    name: str
    description: str = ""
    project_id: int
    milestone_id: int | None = None
    parent_id: int | None = None
    level: int = MIN_TASK_LEVEL
    priority: int = Priority.MEDIUM
    estimated_effort: float = 0
    status: int = TaskStatus.TODO


class TaskCreate(TaskBase):
    """Schema for creating a task."""


class TaskUpdate(TaskBase):
    """Schema for updating a task. The whole row is replaced."""


class TaskResponse(TaskBase):
    """Schema for task response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    updated_at: datetime


class TaskQueryParams(QueryParams):
    """Filters for listing tasks. name_like and description_like form the search box."""

    id_in: list[int] = []
    project_id: int = 0
    project_id_in: list[int] = []
    milestone_id: int = 0
    milestone_id_in: list[int] = []
    milestone_id_is_null: bool | None = None
    parent_id: int = 0
    parent_id_is_null: bool | None = None
    name: str = ""
    name_like: str = ""
    description_like: str = ""
    level: int = 0
    level_in: list[int] = []
    priority: int = 0
    priority_in: list[int] = []
    status: int = 0
    status_in: list[int] = []
    estimated_effort_gte: float | None = None
    estimated_effort_lte: float | None = None
    created_at_gte: datetime | None = None
    created_at_lte: datetime | None = None
    updated_at_gte: datetime | None = None
    updated_at_lte: datetime | None = None


TaskListResponse = ListResponse[TaskResponse]
