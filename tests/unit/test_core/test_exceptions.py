"""Unit tests for the exception hierarchy."""
from __future__ import annotations

import pytest

from content_service.core.exceptions import (
    AppException,
    InvalidArgumentError,
    InvalidCursorError,
    InvalidTagError,
    MalformedIdentifierError,
    NotFoundException,
    RegistryConfigurationError,
    UnknownTagError,
    ValidationException,
)


@pytest.mark.parametrize(
    ("exc", "type_"),
    [
        (InvalidTagError("a:b"), "invalid-tag"),
        (MalformedIdentifierError("xyz", "bad"), "malformed-identifier"),
        (UnknownTagError("Comment"), "unknown-tag"),
        (InvalidCursorError("xyz", "after"), "invalid-cursor"),
        (InvalidArgumentError("'first' must be non-negative", "first"), "invalid-argument"),
    ],
)
def test_identity_and_paging_errors_are_validation_errors(exc, type_):
    assert isinstance(exc, ValidationException)
    assert exc.status_code == 422
    assert exc.title == "Validation Error"
    assert exc.type == type_


def test_registry_configuration_is_server_error():
    exc = RegistryConfigurationError("missing kinds", extra={"missing": ["Menu"]})

    assert isinstance(exc, AppException)
    assert not isinstance(exc, ValidationException)
    assert exc.status_code == 500
    assert exc.extra == {"missing": ["Menu"]}


def test_not_found_defaults():
    exc = NotFoundException("Option 9 not found", type="option-not-found")

    assert exc.status_code == 404
    assert exc.title == "Not Found"
    assert str(exc) == "Option 9 not found"


def test_default_title_from_status():
    assert AppException(status_code=409, detail="clash").title == "Conflict"
    assert AppException(status_code=418, detail="teapot").title == "Error"


def test_cursor_error_reports_argument():
    exc = InvalidCursorError("abc", "before")

    assert exc.extra == {"argument": "before", "cursor": "abc"}
    assert "'before'" in exc.detail
