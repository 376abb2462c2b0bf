"""
Generic filter builder shared by every repository.

Query parameter models name their fields after the column they filter plus an
operator suffix:

    name            equality, skipped when "" / 0 / None
    name_like       substring match ("%value%"), skipped when ""
    status_in       membership, skipped when the list is empty
    amount_gte      inclusive lower bound, skipped when None
    amount_lte      inclusive upper bound, skipped when None
    parent_id_is_null  IS NULL (True) / IS NOT NULL (False), skipped when None

A FilterSet binds one ORM model to its parameter model, the *_like fields that
are OR-ed together as the search box, and the columns callers may sort by.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel
from sqlalchemy import Select, or_

from models.query import QueryParams, Sort, SortOrder

logger = logging.getLogger(__name__)


class Op(str, Enum):
    EQ = "eq"
    LIKE = "like"
    IN = "in"
    GTE = "gte"
    LTE = "lte"
    IS_NULL = "is_null"


# Longest suffix first so "_is_null" is not read as "_null"
_SUFFIXES = (
    ("_is_null", Op.IS_NULL),
    ("_like", Op.LIKE),
    ("_gte", Op.GTE),
    ("_lte", Op.LTE),
    ("_in", Op.IN),
)

# Fields every QueryParams carries that are not filters
_NON_FILTER_FIELDS = frozenset(QueryParams.model_fields)


@dataclass(frozen=True)
class FieldFilter:
    param: str
    column: str
    op: Op


def parse_field(param: str) -> FieldFilter:
    """Split a parameter name into its column and operator."""
    for suffix, op in _SUFFIXES:
        if param.endswith(suffix):
            return FieldFilter(param=param, column=param[: -len(suffix)], op=op)
    return FieldFilter(param=param, column=param, op=Op.EQ)


@dataclass(frozen=True)
class FilterSet:
    model: type
    params_model: type[QueryParams]
    filters: tuple[FieldFilter, ...]
    search: frozenset[str]
    sort_fields: dict[str, str]

    @classmethod
    def for_params(
        cls,
        model: type,
        params_model: type[QueryParams],
        *,
        search: tuple[str, ...] = (),
        sort_fields: tuple[str, ...] = (),
    ) -> "FilterSet":
        """
        Build the filter metadata for an entity from its parameter model.

        Args:
            model: ORM model being queried
            params_model: Pydantic query parameter model for the entity
            search: *_like parameters combined with OR into one group
            sort_fields: Column names callers may sort by

        Raises:
            AttributeError: If a parameter or sort field names a column the model lacks
        """
        filters = tuple(
            parse_field(name) for name in params_model.model_fields if name not in _NON_FILTER_FIELDS
        )
        for field_filter in filters:
            getattr(model, field_filter.column)
        for name in search:
            if name not in params_model.model_fields or not name.endswith("_like"):
                raise ValueError(f"{params_model.__name__}.{name} is not a *_like filter")
        for name in sort_fields:
            getattr(model, name)

        return cls(
            model=model,
            params_model=params_model,
            filters=filters,
            search=frozenset(search),
            sort_fields={name: name for name in sort_fields},
        )


def is_set(op: Op, value) -> bool:
    """Whether a parameter value activates its filter."""
    if value is None:
        return False
    if op is Op.IN:
        return len(value) > 0
    if op in (Op.GTE, Op.LTE, Op.IS_NULL):
        return True
    if isinstance(value, bool):
        return True
    return value != "" and value != 0


def _predicate(column, op: Op, value):
    if op is Op.EQ:
        return column == value
    if op is Op.LIKE:
        return column.like(f"%{value}%")
    if op is Op.IN:
        return column.in_(value)
    if op is Op.GTE:
        return column >= value
    if op is Op.LTE:
        return column <= value
    return column.is_(None) if value else column.is_not(None)


def build_conditions(filter_set: FilterSet, params: BaseModel) -> list:
    """
    Translate populated parameter fields into SQLAlchemy predicates.

    Args:
        filter_set: Entity filter metadata
        params: Query parameter instance

    Returns:
        Predicates to AND together; the search-box fields, if any are set,
        arrive as a single OR group
    """
    conditions = []
    search_group = []
    for field_filter in filter_set.filters:
        value = getattr(params, field_filter.param, None)
        if not is_set(field_filter.op, value):
            continue
        predicate = _predicate(getattr(filter_set.model, field_filter.column), field_filter.op, value)
        if field_filter.param in filter_set.search:
            search_group.append(predicate)
        else:
            conditions.append(predicate)

    if search_group:
        conditions.append(or_(*search_group))
    return conditions


def apply_sorts(statement: Select, filter_set: FilterSet, sorts: list[Sort]) -> Select:
    """
    Append ORDER BY terms for allow-listed sort fields, then id ASC as tiebreaker.
    Unknown fields are skipped.
    """
    model = filter_set.model
    for sort in sorts:
        column_name = filter_set.sort_fields.get(sort.field)
        if column_name is None:
            logger.debug("Ignoring sort on unknown field: model=%s field=%s", model.__name__, sort.field)
            continue
        column = getattr(model, column_name)
        statement = statement.order_by(column.desc() if sort.order == SortOrder.DESC else column.asc())
    return statement.order_by(model.id.asc())
