"""Query parameter value objects shared by every list endpoint."""

import math
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

T = TypeVar("T")


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class Sort(BaseModel):
    """A single ORDER BY term. The field is checked against an allow-list at query time."""

    field: str
    order: SortOrder = SortOrder.ASC

    @field_validator("order", mode="before")
    @classmethod
    def fallback_to_asc(cls, value):
        if isinstance(value, SortOrder):
            return value
        if isinstance(value, str) and value.strip().lower() == SortOrder.DESC.value:
            return SortOrder.DESC
        return SortOrder.ASC


class Pagination(BaseModel):
    """
    Page selection. Out-of-range values are clamped instead of rejected:
    page < 1 becomes 1, page_size < 1 becomes 20 and page_size > 100 becomes 100.
    """

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @field_validator("page")
    @classmethod
    def clamp_page(cls, value: int) -> int:
        return value if value >= 1 else DEFAULT_PAGE

    @field_validator("page_size")
    @classmethod
    def clamp_page_size(cls, value: int) -> int:
        if value < 1:
            return DEFAULT_PAGE_SIZE
        return min(value, MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.page_size) if total > 0 else 0

    def has_next(self, total: int) -> bool:
        return self.page < self.total_pages(total)

    def has_prev(self) -> bool:
        return self.page > 1


class QueryParams(BaseModel):
    """Base of every per-entity query parameter model."""

    pagination: Pagination = Field(default_factory=Pagination)
    sorts: list[Sort] = Field(default_factory=list)


class ListResponse(BaseModel, Generic[T]):
    """Page of results plus the total number of rows matching the filters."""

    data: list[T]
    total: int
