"""Error Hierarchy: kinds, codes, and the REST envelope.

Tests:
    - Each domain error carries the kind the HTTP boundary maps to a status
    - to_response() never includes an HTTP status
    - Every ErrorKind has a status at the boundary
"""

import pytest

from booking_api.api.error_handlers import HTTP_STATUS_BY_KIND, status_for
from booking_api.core.errors import (
    AuthenticationError,
    BookingApiError,
    BookingNotFoundError,
    DatabaseError,
    EnrollmentNotFoundError,
    ErrorKind,
    ErrorSeverity,
    RoomFullError,
    RoomNotFoundError,
    TicketNotEligibleError,
)


@pytest.mark.parametrize("error,kind,code", [
    (EnrollmentNotFoundError(1), ErrorKind.NOT_FOUND, "ENROLLMENT_NOT_FOUND"),
    (TicketNotEligibleError("remote ticket"), ErrorKind.PAYMENT_REQUIRED, "TICKET_NOT_ELIGIBLE"),
    (RoomNotFoundError(1), ErrorKind.NOT_FOUND, "ROOM_NOT_FOUND"),
    (RoomFullError(1), ErrorKind.FORBIDDEN, "ROOM_FULL"),
    (BookingNotFoundError(1), ErrorKind.NOT_FOUND, "BOOKING_NOT_FOUND"),
    (AuthenticationError(), ErrorKind.UNAUTHORIZED, "UNAUTHORIZED"),
    (DatabaseError("boom", "commit"), ErrorKind.DATABASE, "DATABASE_ERROR"),
])
def test_errors_carry_kind_and_code(error, kind, code):
    assert isinstance(error, BookingApiError)
    assert error.kind is kind
    assert error.code == code


@pytest.mark.parametrize("kind,expected", [
    (ErrorKind.NOT_FOUND, 404),
    (ErrorKind.PAYMENT_REQUIRED, 402),
    (ErrorKind.FORBIDDEN, 403),
    (ErrorKind.UNAUTHORIZED, 401),
    (ErrorKind.VALIDATION, 400),
    (ErrorKind.DATABASE, 500),
    (ErrorKind.INTERNAL, 500),
])
def test_status_for_kind(kind, expected):
    assert status_for(kind) == expected


def test_every_kind_is_mapped():
    assert set(HTTP_STATUS_BY_KIND) == set(ErrorKind)


def test_to_response_envelope():
    body = RoomFullError(3).to_response()["error"]
    assert body["code"] == "ROOM_FULL"
    assert body["kind"] == "forbidden"
    assert body["severity"] == ErrorSeverity.WARNING.value
    assert "timestamp" in body
    assert "status" not in body


def test_booking_not_found_message_without_id():
    assert BookingNotFoundError().message == "Booking not found"
    assert BookingNotFoundError(5).message == "Booking '5' not found"


def test_database_error_is_critical():
    err = DatabaseError("Integrity constraint violated", "commit")
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.operation == "commit"
