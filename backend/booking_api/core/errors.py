"""Error Hierarchy: typed, kind-tagged exceptions for every booking failure mode.

Invariants:
    - Every error has a code (str), kind (ErrorKind), severity (ErrorSeverity)
    - Errors carry NO http status - ErrorKind is mapped to a status only at the
      API boundary (api/error_handlers.py)
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BookingApiError base: one global handler catches all
    - ErrorContext as dataclass: request identifiers for logs without coupling
      to the logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorKind(str, Enum):
    """Outcome kinds raised by the logic layer."""
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    PAYMENT_REQUIRED = "payment_required"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Identifiers attached to an error for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    booking_id: int | None = None
    room_id: int | None = None
    debug_info: dict[str, Any] | None = None


class BookingApiError(Exception):
    """Base exception for all booking API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: ErrorKind,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "kind": self.kind.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class EnrollmentNotFoundError(BookingApiError):
    """User has no event enrollment."""
    def __init__(self, user_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext(user_id=user_id)
        super().__init__(
            "User has no enrollment",
            "ENROLLMENT_NOT_FOUND", ErrorKind.NOT_FOUND,
            ErrorSeverity.WARNING, ctx,
        )


class TicketNotEligibleError(BookingApiError):
    """Ticket is unpaid, remote, or does not include a hotel stay."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Ticket does not allow hotel booking: {reason}",
            "TICKET_NOT_ELIGIBLE", ErrorKind.PAYMENT_REQUIRED,
            ErrorSeverity.WARNING, context,
        )
        self.reason = reason


class RoomNotFoundError(BookingApiError):
    """Requested room does not exist."""
    def __init__(self, room_id: int | None, context: ErrorContext | None = None):
        ctx = context or ErrorContext(room_id=room_id)
        super().__init__(
            f"Room '{room_id}' not found",
            "ROOM_NOT_FOUND", ErrorKind.NOT_FOUND,
            ErrorSeverity.WARNING, ctx,
        )


class RoomFullError(BookingApiError):
    """Requested room has no capacity."""
    def __init__(self, room_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext(room_id=room_id)
        super().__init__(
            f"Room '{room_id}' has no capacity",
            "ROOM_FULL", ErrorKind.FORBIDDEN,
            ErrorSeverity.WARNING, ctx,
        )


class BookingNotFoundError(BookingApiError):
    """Booking does not exist or does not belong to the user."""
    def __init__(self, booking_id: int | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext(booking_id=booking_id)
        message = (
            f"Booking '{booking_id}' not found" if booking_id is not None
            else "Booking not found"
        )
        super().__init__(
            message, "BOOKING_NOT_FOUND", ErrorKind.NOT_FOUND,
            ErrorSeverity.WARNING, ctx,
        )


class AuthenticationError(BookingApiError):
    """Bearer token missing, invalid, or without an active session."""
    def __init__(self, reason: str = "Invalid or missing credentials"):
        super().__init__(
            reason, "UNAUTHORIZED", ErrorKind.UNAUTHORIZED,
            ErrorSeverity.WARNING,
        )


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(BookingApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorKind.DATABASE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
