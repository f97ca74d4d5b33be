"""Booking Service: orchestrates repository IO around the pure eligibility checks.

Invariants:
    - Checks run in a fixed order; the first failing check decides the outcome
    - Only a fully validated request reaches a repository write
    - Repositories are injected (core/repository_protocols.py), never constructed here

Design Decisions:
    - Impureim sandwich: fetch (IO) -> check (core, pure) -> write (IO)
"""

import logging

from booking_api.core.domain_types import BookingId, RoomId, UserId
from booking_api.core.enforce_booking import (
    check_booking_ownership,
    check_room_available,
    check_ticket_eligibility,
    require_enrollment,
    require_room_id,
    require_valid_booking_id,
)
from booking_api.core.errors import BookingNotFoundError
from booking_api.core.repository_protocols import (
    BookingLike,
    BookingRepository,
    EnrollmentRepository,
    RoomLike,
    RoomRepository,
)

logger = logging.getLogger(__name__)


class BookingService:
    """Create, read, and move a user's single hotel booking."""

    def __init__(
        self,
        enrollments: EnrollmentRepository,
        rooms: RoomRepository,
        bookings: BookingRepository,
    ):
        self.enrollments = enrollments
        self.rooms = rooms
        self.bookings = bookings

    async def create_booking(
        self, user_id: UserId, room_id: RoomId | None,
    ) -> BookingId:
        """Book a room for the user once enrollment, ticket and room all check out."""
        enrollment = require_enrollment(
            await self.enrollments.find_with_tickets(user_id), user_id,
        )
        check_ticket_eligibility(enrollment)
        room = await self._get_bookable_room(room_id)

        booking = await self.bookings.create(user_id, RoomId(room.id))
        logger.info(
            "Booking created",
            extra={"user_id": user_id, "booking_id": booking.id, "room_id": room.id},
        )
        return BookingId(booking.id)

    async def get_booking(self, user_id: UserId) -> BookingLike:
        booking = await self.bookings.find_by_user(user_id)
        if booking is None:
            raise BookingNotFoundError()
        return booking

    async def update_booking(
        self, user_id: UserId, room_id: RoomId | None, booking_id: BookingId,
    ) -> BookingId:
        """Move the user's booking to another room. Returns the unchanged booking id."""
        require_valid_booking_id(booking_id)
        check_booking_ownership(
            await self.bookings.find_by_user(user_id), booking_id,
        )
        room = await self._get_bookable_room(room_id)

        await self.bookings.update_room(booking_id, RoomId(room.id))
        logger.info(
            "Booking moved",
            extra={"user_id": user_id, "booking_id": booking_id, "room_id": room.id},
        )
        return booking_id

    async def _get_bookable_room(self, room_id: RoomId | None) -> RoomLike:
        rid = RoomId(require_room_id(room_id))
        return check_room_available(await self.rooms.get(rid), rid)
