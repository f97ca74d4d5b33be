"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
      (infrastructure/repositories.py in production, fakes in tests)

Design Decisions:
    - Protocol over ABC: structural subtyping, ORM models satisfy the *Like
      contracts without inheriting from anything
    - Async in Protocol: boundary methods are async because implementations do IO,
      but the core checks that USE these shapes are never async themselves
"""

from datetime import datetime
from typing import Protocol, Sequence

from booking_api.core.domain_types import BookingId, RoomId, UserId


class TicketTypeLike(Protocol):
    """Ticket category flags read by the eligibility check."""
    is_remote: bool
    includes_hotel: bool


class TicketLike(Protocol):
    """Ticket purchase record with its category."""
    id: int
    status: str
    ticket_type: TicketTypeLike


class EnrollmentLike(Protocol):
    """Enrollment with its tickets loaded, lowest id first."""
    id: int
    user_id: int
    tickets: Sequence[TicketLike]


class RoomLike(Protocol):
    """Hotel room as returned by RoomRepository."""
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime


class BookingLike(Protocol):
    """Booking row with its room loaded."""
    id: int
    user_id: int
    room_id: int
    room: RoomLike


class EnrollmentRepository(Protocol):
    """Contract for enrollment lookups: implemented by shell."""
    async def find_with_tickets(self, user_id: UserId) -> EnrollmentLike | None: ...


class RoomRepository(Protocol):
    """Contract for room lookups: implemented by shell."""
    async def get(self, room_id: RoomId) -> RoomLike | None: ...


class BookingRepository(Protocol):
    """Contract for booking persistence: implemented by shell."""
    async def create(self, user_id: UserId, room_id: RoomId) -> BookingLike: ...
    async def find_by_user(self, user_id: UserId) -> BookingLike | None: ...
    async def update_room(
        self, booking_id: BookingId, room_id: RoomId,
    ) -> BookingLike: ...
