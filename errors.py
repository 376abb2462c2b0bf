"""Error taxonomy shared by the models, repositories and API layers."""


class RepositoryError(Exception):
    """Base class for storage errors surfaced by the repository layer."""

    default_message = "repository error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class NotFoundError(RepositoryError):
    default_message = "record not found"


class InvalidDataError(RepositoryError):
    default_message = "invalid data"


class DuplicatedKeyError(RepositoryError):
    default_message = "duplicated key"


class ForeignKeyViolatedError(RepositoryError):
    default_message = "foreign key violated"


class CheckConstraintViolatedError(RepositoryError):
    default_message = "check constraint violated"


class UnsupportedRelationError(RepositoryError):
    default_message = "unsupported relation"


class EntityValidationError(ValueError):
    """Raised by an entity's validate() with the first violated invariant."""


class ServiceNotInitializedError(RuntimeError):
    """Raised when a request arrives while no database is open."""

    def __init__(self, message: str = "service not initialized"):
        super().__init__(message)
