"""Tests for domain exceptions (message, status_code)."""

import pytest

from pvsf.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    PvsfException,
    ResourceNotFoundException,
    ValidationException,
)
from pvsf.infrastructure.exceptions import FirestoreQueryError, FirestoreUnavailableError


def test_pvsf_exception_defaults_to_500() -> None:
    """Base PvsfException maps to 500 unless a status is given."""
    exc = PvsfException("Something failed")
    assert exc.message == "Something failed"
    assert str(exc) == "Something failed"
    assert exc.status_code == 500


def test_pvsf_exception_custom_status() -> None:
    exc = PvsfException("Teapot", status_code=418)
    assert exc.status_code == 418
    assert PvsfException.status_code == 500


def test_validation_exception() -> None:
    """ValidationException is a 400 and remembers the offending field."""
    exc = ValidationException("xid query parameter is required", field="xid")
    assert exc.status_code == 400
    assert exc.field == "xid"


def test_authentication_exception() -> None:
    exc = AuthenticationException()
    assert exc.status_code == 401
    assert exc.message == "Authentication required"


def test_authorization_exception() -> None:
    exc = AuthorizationException()
    assert exc.status_code == 403
    assert exc.message == "Admin access required"


def test_resource_not_found_exception() -> None:
    """Message names the resource type only, not the id."""
    exc = ResourceNotFoundException("Video", "abc")
    assert exc.status_code == 404
    assert exc.message == "Video not found"
    assert exc.resource_id == "abc"


@pytest.mark.parametrize(
    "exc",
    [FirestoreUnavailableError(), FirestoreQueryError(429, "quota")],
)
def test_infrastructure_exceptions_are_server_errors(exc: PvsfException) -> None:
    assert isinstance(exc, PvsfException)
    assert exc.status_code == 500
