"""Unit tests for the error to HTTP status mapping."""

import warnings

import pytest

from api.errors import to_http_exception
from errors import (
    CheckConstraintViolatedError,
    DuplicatedKeyError,
    EntityValidationError,
    ForeignKeyViolatedError,
    InvalidDataError,
    NotFoundError,
    ServiceNotInitializedError,
    UnsupportedRelationError,
)


@pytest.mark.parametrize(
    "error, status_code",
    [
        (NotFoundError("client 1 not found"), 404),
        (EntityValidationError("client name is required"), 422),
        (DuplicatedKeyError(), 409),
        (ForeignKeyViolatedError(), 409),
        (InvalidDataError(), 400),
        (CheckConstraintViolatedError(), 400),
        (UnsupportedRelationError(), 500),
        (ServiceNotInitializedError(), 503),
    ],
)
def test_known_errors_keep_their_message(error, status_code):
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        exc = to_http_exception(error, "create client")

    assert exc.status_code == status_code
    assert exc.detail == str(error)


def test_unexpected_error_is_500_with_action():
    exc = to_http_exception(KeyError("boom"), "create client")

    assert exc.status_code == 500
    assert exc.detail.startswith("Failed to create client: ")
