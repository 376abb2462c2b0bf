"""Generic CRUD operations shared by the per-entity repositories."""

import logging
from contextlib import contextmanager

from sqlalchemy import delete as sql_delete
from sqlalchemy import func, select
from sqlalchemy import update as sql_update
from sqlalchemy.exc import AmbiguousForeignKeysError, DataError, DBAPIError, IntegrityError, NoForeignKeysError
from sqlalchemy.ext.asyncio import AsyncSession

from errors import (
    CheckConstraintViolatedError,
    DuplicatedKeyError,
    ForeignKeyViolatedError,
    InvalidDataError,
    NotFoundError,
    RepositoryError,
    UnsupportedRelationError,
)
from models.common import EntityMixin, utcnow
from repos.filters import FilterSet, apply_sorts, build_conditions

logger = logging.getLogger(__name__)


def map_db_error(error: Exception) -> RepositoryError:
    """
    Translate a SQLAlchemy / sqlite3 error into the repository error taxonomy.

    Args:
        error: Exception raised by the engine

    Returns:
        The matching RepositoryError subclass instance
    """
    if isinstance(error, (NoForeignKeysError, AmbiguousForeignKeysError)):
        return UnsupportedRelationError(str(error))
    if isinstance(error, DataError):
        return InvalidDataError(str(error.orig))

    if isinstance(error, IntegrityError):
        message = str(error.orig)
        lowered = message.lower()
        if "unique constraint" in lowered:
            return DuplicatedKeyError(message)
        if "foreign key constraint" in lowered:
            return ForeignKeyViolatedError(message)
        if "check constraint" in lowered:
            return CheckConstraintViolatedError(message)
        return InvalidDataError(message)

    if isinstance(error, DBAPIError):
        return RepositoryError(str(error.orig))
    return RepositoryError(str(error))


@contextmanager
def storage_errors(entity: str, action: str):
    """Map engine errors raised inside the block, logging them once."""
    try:
        yield
    except (DBAPIError, NoForeignKeysError, AmbiguousForeignKeysError) as e:
        mapped = map_db_error(e)
        logger.error(
            "Repository error: entity=%s action=%s error=%s detail=%s",
            entity,
            action,
            type(mapped).__name__,
            mapped,
        )
        raise mapped from e


async def create(session: AsyncSession, entity: EntityMixin) -> EntityMixin:
    """
    Normalize, validate and insert a new entity.

    Args:
        session: Database session
        entity: Transient ORM instance

    Returns:
        The persisted entity with id and timestamps populated

    Raises:
        EntityValidationError: If the entity breaks an invariant
        RepositoryError: If the store rejects the row
    """
    entity.normalize_defaults()
    entity.validate()

    session.add(entity)
    with storage_errors(type(entity).__name__, "create"):
        await session.flush()
    await session.refresh(entity)
    return entity


async def get_one(session: AsyncSession, model: type, entity_id: int):
    """
    Get a single entity by primary key.

    Raises:
        NotFoundError: If no row has that id
    """
    query = select(model).where(model.id == entity_id).execution_options(populate_existing=True)
    with storage_errors(model.__name__, "get_one"):
        result = await session.execute(query)
    entity = result.scalar_one_or_none()
    if entity is None:
        raise NotFoundError(f"{model.__name__} {entity_id} not found")
    return entity


async def get_many(session: AsyncSession, filter_set: FilterSet, params=None) -> tuple[list, int]:
    """
    List entities matching the query parameters.

    The filtered statement is built once; the total is counted from it before
    sorting and pagination are layered on for the page fetch.

    Args:
        session: Database session
        filter_set: Entity filter metadata
        params: Query parameters; None means no filters and the first default page

    Returns:
        Tuple of (page of entities, total matching rows)
    """
    if params is None:
        params = filter_set.params_model()
    model = filter_set.model

    filtered = select(model).where(*build_conditions(filter_set, params))
    count_query = select(func.count()).select_from(filtered.subquery())
    page_query = (
        apply_sorts(filtered, filter_set, params.sorts)
        .offset(params.pagination.offset)
        .limit(params.pagination.page_size)
        .execution_options(populate_existing=True)
    )

    with storage_errors(model.__name__, "get_many"):
        total = (await session.execute(count_query)).scalar_one()
        result = await session.execute(page_query)
    return list(result.scalars().all()), total


async def update(session: AsyncSession, entity: EntityMixin) -> int:
    """
    Overwrite every column of an existing row with the entity's values.

    created_at is preserved and updated_at refreshed.

    Args:
        session: Database session
        entity: ORM instance carrying the target id and the new values

    Returns:
        Number of rows affected

    Raises:
        EntityValidationError: If the entity breaks an invariant
        NotFoundError: If no row has the entity's id
    """
    entity.validate()

    model = type(entity)
    values = {
        name: value
        for name, value in entity.column_values().items()
        if name not in model.immutable_columns
    }
    values["updated_at"] = utcnow()
    statement = (
        sql_update(model)
        .where(model.id == entity.id)
        .values(**values)
        .execution_options(synchronize_session=False)
    )

    with storage_errors(model.__name__, "update"):
        result = await session.execute(statement)
    if result.rowcount == 0:
        raise NotFoundError(f"{model.__name__} {entity.id} not found")
    return result.rowcount


async def delete(session: AsyncSession, model: type, entity_id: int) -> None:
    """
    Hard-delete a row by primary key.

    Raises:
        NotFoundError: If no row has that id
    """
    statement = sql_delete(model).where(model.id == entity_id).execution_options(synchronize_session=False)
    with storage_errors(model.__name__, "delete"):
        result = await session.execute(statement)
    if result.rowcount == 0:
        raise NotFoundError(f"{model.__name__} {entity_id} not found")
