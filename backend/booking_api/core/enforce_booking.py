"""Booking Eligibility Enforcement: validates every condition before a booking is written.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Each check raises a typed BookingApiError on violation, returns the
      validated object on success
    - Callers run the checks in order (enrollment, ticket, room, capacity);
      the first failure wins

Design Decisions:
    - Raising over returning error dicts: the HTTP boundary is the only consumer
      and maps ErrorKind to a status code in one place
"""

from booking_api.core.domain_types import TicketStatus
from booking_api.core.errors import (
    BookingNotFoundError,
    EnrollmentNotFoundError,
    RoomFullError,
    RoomNotFoundError,
    TicketNotEligibleError,
)
from booking_api.core.repository_protocols import (
    BookingLike,
    EnrollmentLike,
    RoomLike,
    TicketLike,
)


def require_enrollment(
    enrollment: EnrollmentLike | None, user_id: int,
) -> EnrollmentLike:
    """Rule 1: the user must be enrolled in the event."""
    if enrollment is None:
        raise EnrollmentNotFoundError(user_id)
    return enrollment


def check_ticket_eligibility(enrollment: EnrollmentLike) -> TicketLike:
    """Rule 2: first ticket must be PAID, in person, and include a hotel stay."""
    if not enrollment.tickets:
        raise TicketNotEligibleError("no ticket")
    ticket = enrollment.tickets[0]
    if ticket.status != TicketStatus.PAID.value:
        raise TicketNotEligibleError("ticket not paid")
    if ticket.ticket_type.is_remote:
        raise TicketNotEligibleError("remote ticket")
    if not ticket.ticket_type.includes_hotel:
        raise TicketNotEligibleError("ticket without hotel")
    return ticket


def require_room_id(room_id: int | None) -> int:
    """Rule 3a: a room must be named (None and 0 both mean "no room")."""
    if not room_id:
        raise RoomNotFoundError(room_id)
    return room_id


def check_room_available(room: RoomLike | None, room_id: int) -> RoomLike:
    """Rules 3b + 4: the room must exist and have capacity."""
    if room is None:
        raise RoomNotFoundError(room_id)
    if room.capacity == 0:
        raise RoomFullError(room.id)
    return room


def require_valid_booking_id(booking_id: int) -> int:
    """Booking ids are positive; anything else cannot exist."""
    if booking_id <= 0:
        raise BookingNotFoundError(booking_id)
    return booking_id


def check_booking_ownership(
    booking: BookingLike | None, booking_id: int,
) -> BookingLike:
    """The user must hold a booking, and it must be the one being changed."""
    if booking is None:
        raise BookingNotFoundError()
    # Stricter than the legacy PUT, which moved whichever booking the path
    # named once the user held any booking. Keep this guard.
    if booking.id != booking_id:
        raise BookingNotFoundError(booking_id)
    return booking
