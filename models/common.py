"""Shared column mixins, status enum and validation helpers for entity models."""

from datetime import date, datetime, timezone
from enum import IntEnum

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from errors import EntityValidationError


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Status(IntEnum):
    """Two-valued lifecycle status stored as an integer."""

    INACTIVE = 1
    ACTIVE = 2

    @classmethod
    def is_valid(cls, value) -> bool:
        return value in cls._value2member_map_


class EntityMixin:
    """Integer primary key plus store-managed timestamps."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    # Columns that update() never overwrites
    immutable_columns = ("id", "created_at")

    def normalize_defaults(self) -> None:
        """Replace unset or invalid values with defaults. Create path only."""

    def validate(self) -> None:
        """Raise EntityValidationError with the first violated invariant."""

    def column_values(self) -> dict:
        """Column name -> current value for every mapped column."""
        return {column.key: getattr(self, column.key) for column in self.__table__.columns}


def trim_fields(entity, *names: str) -> None:
    """Strip surrounding whitespace from the named string attributes, in place."""
    for name in names:
        value = getattr(entity, name)
        if isinstance(value, str):
            setattr(entity, name, value.strip())


def require(value, message: str) -> None:
    """Raise when a required string is empty or a required id is zero/unset."""
    if value is None or value == "" or value == 0:
        raise EntityValidationError(message)


def check_date_range(
    start: date | datetime | None,
    end: date | datetime | None,
    message: str = "end date must be on or after start date",
) -> None:
    """Reject an end date strictly earlier than the start date; missing bounds pass."""
    if start is not None and end is not None and end < start:
        raise EntityValidationError(message)


def check_non_negative(value, message: str) -> None:
    if value is not None and value < 0:
        raise EntityValidationError(message)


def check_status(value, message: str = "invalid status") -> None:
    if not Status.is_valid(value):
        raise EntityValidationError(message)


def default_status(value) -> int:
    """Status to store on create: ACTIVE unless a valid status was given."""
    return value if Status.is_valid(value) else Status.ACTIVE
